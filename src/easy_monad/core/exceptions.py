# src/easy_monad/core/exceptions.py
"""
easy_monad — Exceções canônicas (v1)

Este módulo define as exceções tipadas que podem atravessar a fronteira de
uma Operation. Erros de domínio (`error` / `critical_error`) **nunca** viram
exceção para o chamador: ficam registrados no `ErrorSet` da Operation.

Taxonomia:
- ProcessError: falha terminal, levantada somente por `Operation.unwrap()`
  quando o chamador força o resultado de uma Operation que falhou
- OperationStateError: uso indevido do ciclo de vida (erro de programação)
- CapabilityConfigurationError: identificador de capability desconhecido,
  malformado ou duplicado (erro fatal de configuração, detectado na composição)
- CapabilityNotEnabledError: helper de capability usado sem a capability composta

Regras:
- Erros de programação nunca são rebaixados a erro de domínio.
- Exceções carregam apenas o necessário para diagnóstico.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from easy_monad.core.operation.base import Operation


class ProcessError(Exception):
    """Falha terminal que embrulha exatamente uma Operation com erros.

    Criada apenas por `Operation.unwrap()`. Deve ser capturada numa fronteira
    escolhida pela aplicação (ex.: um handler externo de requisição).
    """

    def __init__(self, operation: "Operation") -> None:
        self.operation = operation
        self.message = f"{type(operation).__name__} Process Error"
        super().__init__(self.message)

    @property
    def errors(self):
        return self.operation.errors

    def __str__(self) -> str:
        return self.message


class OperationStateError(RuntimeError):
    """Escrita ou early exit fora do ciclo de vida permitido da Operation."""


class CapabilityConfigurationError(ValueError):
    """Configuração de capabilities inválida (fatal, nunca erro por chamada)."""


class CapabilityNotEnabledError(AttributeError):
    """Helper de uma capability acessado numa Operation que não a compõe."""
