# src/easy_monad/core/operation/hooks.py
"""
Contrato de hooks do ciclo de vida de uma Operation.

Este módulo define a classe base `Capability`, o ponto de extensão pelo qual
comportamentos transversais (timing/logging, redação de parâmetros,
localização) observam e enriquecem a execução de uma Operation sem que o
autor da lógica de negócio escreva boilerplate.

Pontos de extensão (todos no-op por padrão):
    - on_start(op)            → antes da lógica de negócio
    - on_end(op)              → após a fronteira de early exit, qualquer desfecho
    - on_error(op)            → a cada `error`
    - on_critical_error(op)   → a cada `critical_error`, antes do early exit
    - redact_for_logging(op, params) → transformação de dados (identidade)

Decisões arquiteturais:
    - Capabilities são objetos explícitos compostos no tipo da Operation,
      nunca mixins injetados em runtime numa classe base compartilhada
    - Uma capability guarda estado por execução apenas via
      `op.capability_state(self.name)`; a instância da capability é
      compartilhada entre threads e não deve ser mutada após a composição
    - `redact_for_logging` é encadeado: cada capability recebe a saída da anterior

Limites explícitos:
    - Hooks não decidem o desfecho da Operation
    - Hooks não disparam early exit
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from .base import Operation


class Capability:
    """Base no-op do contrato de hooks. Subclasses sobrescrevem o que precisam."""

    name: str = "capability"

    def on_start(self, operation: "Operation") -> None:
        return None

    def on_end(self, operation: "Operation") -> None:
        return None

    def on_error(self, operation: "Operation") -> None:
        return None

    def on_critical_error(self, operation: "Operation") -> None:
        return None

    def redact_for_logging(self, operation: "Operation", params: Any) -> Any:
        return params

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
