# src/easy_monad/capabilities/timing.py
"""Capability canônica: logging (timing + linhas de log por Operation).

Responsabilidades:
- Medir a duração da execução com relógio monotônico (início em `on_start`).
- Emitir linhas de log no sink configurado:

    INFO  Operation <Nome> starts params: <params>
    INFO  Operation <Nome> ends. Took: <s> sec, params: <params>
    ERROR Operation <Nome> has errors: <erros> params: <params>
    ERROR Operation <Nome> ends with error. Took: <s> sec, params: <params>, errors: <erros>

Princípios:
- Os parâmetros passam sempre por `operation.redact_for_logging` (identidade
  quando a capability de redaction não está composta).
- A duração é truncada (floor) em duas casas decimais.
- O instante de início é estado privado por instância (`capability_state`).
"""

from __future__ import annotations

import time
from decimal import ROUND_FLOOR, Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Optional

from easy_monad.core.operation.hooks import Capability

if TYPE_CHECKING:  # pragma: no cover
    from easy_monad.core.config.settings import Settings
    from easy_monad.core.operation.base import Operation


def _floor2(seconds: float) -> float:
    return float(Decimal(repr(seconds)).quantize(Decimal("0.01"), rounding=ROUND_FLOOR))


class TimingLoggingCapability(Capability):
    """Timing monotônico e log estruturado do ciclo de vida."""

    name = "logging"

    def __init__(self, sink: Any, clock: Callable[[], float] = time.monotonic) -> None:
        self.sink = sink
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TimingLoggingCapability":
        return cls(settings.sink)

    # -----------------------------
    # Timing
    # -----------------------------
    def elapsed(self, operation: "Operation") -> Optional[float]:
        """Segundos desde `on_start` (truncados), ou None se não iniciou."""
        started = operation.capability_state(self.name).get("started_at")
        if started is None:
            return None
        return _floor2(self.clock() - started)

    def _took(self, operation: "Operation") -> float:
        took = self.elapsed(operation)
        return 0.0 if took is None else took

    # -----------------------------
    # Hooks
    # -----------------------------
    def on_start(self, operation: "Operation") -> None:
        operation.capability_state(self.name)["started_at"] = self.clock()
        self.sink.info(
            f"Operation {type(operation).__name__} starts params: {_params(operation)}"
        )

    def on_end(self, operation: "Operation") -> None:
        took = self._took(operation)
        operation.capability_state(self.name)["duration"] = took
        self.sink.info(
            f"Operation {type(operation).__name__} ends. Took: {took} sec, "
            f"params: {_params(operation)}"
        )

    def on_error(self, operation: "Operation") -> None:
        self.sink.error(
            f"Operation {type(operation).__name__} has errors: {operation.errors.to_list()} "
            f"params: {_params(operation)}"
        )

    def on_critical_error(self, operation: "Operation") -> None:
        self.sink.error(
            f"Operation {type(operation).__name__} ends with error. "
            f"Took: {self._took(operation)} sec, params: {_params(operation)}, "
            f"errors: {operation.errors.to_list()}"
        )


def _params(operation: "Operation") -> Any:
    params = operation.redact_for_logging(operation.params)
    if isinstance(params, MappingProxyType):
        return dict(params)
    return params
