# src/easy_monad/capabilities/redaction.py
"""Capability canônica: redaction (alias legado: params_sanitizer).

Responsabilidades:
- Serializar os parâmetros da Operation para texto JSON compacto.
- Substituir o valor de cada par `"<chave>":"<valor>"` cuja chave esteja em
  `Settings.filter_parameters` por `[FILTERED]`.

Princípios:
- A redação é textual (regex sobre a serialização), não estrutural.
- Chaves casam exatamente como configuradas, inclusive maiúsculas/minúsculas.
- Apenas valores string são redigidos (o padrão exige `":"` após a chave).

Exemplo:
    filter_parameters: [password]
    params: {"email": "a@b.com", "password": "secret123"}
    saída:  {"email":"a@b.com","password":"[FILTERED]"}
"""

from __future__ import annotations

import dataclasses
import json
import re
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Pattern

from easy_monad.core.operation.hooks import Capability

if TYPE_CHECKING:  # pragma: no cover
    from easy_monad.core.config.settings import Settings
    from easy_monad.core.operation.base import Operation

FILTERED = "[FILTERED]"


def _build_pattern(keys: Iterable[str]) -> Optional[Pattern[str]]:
    keys = [re.escape(k) for k in keys]
    if not keys:
        return None
    return re.compile(r'"(' + "|".join(keys) + r')":"((?:[^"\\]|\\.)*)"')


class RedactionCapability(Capability):
    """Redige valores sensíveis da forma textual dos parâmetros."""

    name = "redaction"

    def __init__(self, filter_parameters: Iterable[str] = (), unwrap_host_params: bool = False) -> None:
        self.filter_parameters = tuple(filter_parameters)
        self.unwrap_host_params = unwrap_host_params
        self._pattern = _build_pattern(self.filter_parameters)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RedactionCapability":
        return cls(settings.filter_parameters, settings.unwrap_host_params)

    def to_plain(self, params: Any) -> Any:
        """Converte os parâmetros numa estrutura serializável em JSON."""
        if self.unwrap_host_params and callable(getattr(params, "to_dict", None)):
            params = params.to_dict()
        if isinstance(params, Mapping):
            return {str(k): self.to_plain(v) for k, v in params.items()}
        if dataclasses.is_dataclass(params) and not isinstance(params, type):
            return self.to_plain(dataclasses.asdict(params))
        if isinstance(params, (list, tuple)):
            return [self.to_plain(v) for v in params]
        return params

    def serialize(self, params: Any) -> str:
        return json.dumps(
            self.to_plain(params),
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )

    def redact(self, text: str) -> str:
        if self._pattern is None:
            return text
        return self._pattern.sub(lambda m: f'"{m.group(1)}":"{FILTERED}"', text)

    def redact_for_logging(self, operation: "Operation", params: Any) -> Any:
        text = params if isinstance(params, str) else self.serialize(params)
        return self.redact(text)
