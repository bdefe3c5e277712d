# src/easy_monad/capabilities/localization.py
"""Capability canônica: localization (alias legado: i18n).

Responsabilidades:
- Oferecer `describe(code)` às Operations: descrição localizada de um código
  de erro, para ser passada explicitamente a `error`/`critical_error`.

Chave de catálogo:
    operations.<módulo em snake_case>.<classe em snake_case>.<código>

    ex.: `app.users.CreateUser` + `empty_name`
         → operations.app.users.create_user.empty_name

Princípios:
- Opt-in por ponto de chamada: nunca é invocada automaticamente.
- Chave ausente retorna o fallback do catálogo (`translation missing: ...`).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Hashable

from easy_monad.core.config.catalog import Catalog
from easy_monad.core.operation.hooks import Capability

if TYPE_CHECKING:  # pragma: no cover
    from easy_monad.core.config.settings import Settings
    from easy_monad.core.operation.base import Operation

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """`CreateUser` → `create_user`; `HTTPRequest` → `http_request`."""
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def catalog_key(operation_type: type, code: Hashable) -> str:
    parts = operation_type.__module__.split(".") + operation_type.__qualname__.split(".")
    parts = [underscore(p) for p in parts if p and p != "<locals>"]
    return ".".join(["operations", *parts, str(code)])


class LocalizationCapability(Capability):
    """Resolve descrições de erro no catálogo de traduções."""

    name = "localization"

    def __init__(self, catalog: Catalog, locale: str = "en") -> None:
        self.catalog = catalog
        self.locale = locale

    @classmethod
    def from_settings(cls, settings: "Settings") -> "LocalizationCapability":
        return cls(settings.catalog, settings.locale)

    def describe(self, operation: "Operation", code: Hashable) -> str:
        return self.catalog.translate(catalog_key(type(operation), code), self.locale)
