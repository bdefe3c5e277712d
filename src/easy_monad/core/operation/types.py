# src/easy_monad/core/operation/types.py
"""
Tipos canônicos do ciclo de vida de uma Operation.

Este módulo define os estados possíveis de uma Operation, do momento em que
é construída até o retorno da fronteira de early exit.

Máquina de estados:
    CREATED → RUNNING → {COMPLETED_SUCCESS, COMPLETED_WITH_ERRORS, ABORTED}

Decisões arquiteturais:
    - Os valores são strings para facilitar serialização e logs
    - ABORTED e COMPLETED_WITH_ERRORS são ambos falha para o chamador;
      diferem apenas em *como* a execução terminou (early exit vs. fim normal)
    - Não existem estados de retry ou suspensão: a execução é síncrona

Limites explícitos:
    - Não contém lógica de transição (responsabilidade de `Operation`)
"""

from __future__ import annotations

from enum import Enum


class OperationState(str, Enum):
    CREATED = "created"
    RUNNING = "running"
    COMPLETED_SUCCESS = "completed_success"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    ABORTED = "aborted"

    @property
    def finished(self) -> bool:
        return self in _FINISHED


_FINISHED = frozenset(
    {
        OperationState.COMPLETED_SUCCESS,
        OperationState.COMPLETED_WITH_ERRORS,
        OperationState.ABORTED,
    }
)
