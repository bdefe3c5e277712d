# src/easy_monad/__init__.py
"""
easy_monad — execução padronizada de Operations de negócio.

Uma Operation recebe parâmetros, acumula erros de domínio num `ErrorSet` e
retorna sempre a própria instância, com desfecho `success`/`failure`.

Arquitetura em alto nível:
    - core.errors     → ErrorSet (first-write-wins, ordem de inserção)
    - core.operation  → ciclo de vida, early exit, join/strict_join, hooks
    - core.config     → settings imutáveis, loader YAML/JSON, catálogo
    - capabilities    → redaction, logging (timing), localization

Uso típico:

    settings = Settings()
    AppOperation = compose(settings)

    class CreateUser(AppOperation):
        def perform(self):
            if not self.params["name"]:
                self.critical_error("empty_name", "Name cannot be empty")
            self.result = {"name": self.params["name"]}

    op = CreateUser.call({"name": "Ana"})
    op.success, op.result
"""

from .capabilities import compose
from .core.config import Catalog, Settings, load_catalog, load_settings
from .core.errors import DEFAULT_ERROR_DESCRIPTION, ErrorSet
from .core.exceptions import (
    CapabilityConfigurationError,
    CapabilityNotEnabledError,
    OperationStateError,
    ProcessError,
)
from .core.operation import Capability, Operation, OperationState, with_capabilities
from .core.sinks import EventLogSink

__all__ = [
    "Capability",
    "CapabilityConfigurationError",
    "CapabilityNotEnabledError",
    "Catalog",
    "DEFAULT_ERROR_DESCRIPTION",
    "ErrorSet",
    "EventLogSink",
    "Operation",
    "OperationState",
    "OperationStateError",
    "ProcessError",
    "Settings",
    "compose",
    "load_catalog",
    "load_settings",
    "with_capabilities",
]
