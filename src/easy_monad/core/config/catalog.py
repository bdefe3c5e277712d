# src/easy_monad/core/config/catalog.py
"""
Catálogo de localização do easy_monad.

O catálogo é um mapa aninhado `{locale: {...}}` consultado por chave
pontilhada, no formato usado por arquivos de tradução YAML:

    en:
      operations:
        users:
          create_user:
            empty_name: "Name cannot be empty"

Chaves ausentes não levantam exceção: retornam o texto
`translation missing: <locale>.<chave>`.

Limites explícitos:
    - Não interpola variáveis
    - Não faz fallback entre locales
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .loader import read_mapping_file
from .merge import deep_merge


class Catalog:
    """Catálogo somente-leitura de traduções por locale."""

    def __init__(self, translations: Optional[Mapping[str, Any]] = None, locale: str = "en") -> None:
        self._translations: Dict[str, Any] = deepcopy(dict(translations or {}))
        self.locale = locale

    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        node: Any = self._translations.get(locale or self.locale)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def translate(self, key: str, locale: Optional[str] = None) -> str:
        locale = locale or self.locale
        found = self.lookup(key, locale)
        if found is None:
            return f"translation missing: {locale}.{key}"
        return found

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __repr__(self) -> str:
        return f"Catalog(locale={self.locale!r}, locales={sorted(self._translations)!r})"


def load_catalog(*paths: Union[str, Path], locale: str = "en") -> Catalog:
    """Carrega um ou mais arquivos de tradução; arquivos posteriores têm prioridade."""
    translations: Dict[str, Any] = {}
    for path in paths:
        translations = deep_merge(translations, read_mapping_file(path))
    return Catalog(translations, locale=locale)
