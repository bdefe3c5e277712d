# src/easy_monad/core/operation/__init__.py
"""
# Operation Core — easy_monad

Este pacote define o protocolo de execução de Operations: máquina de
estados, fronteira de early exit, operadores de composição (`join`,
`strict_join`) e o contrato de hooks consumido pelas capabilities.

## Componentes

- **types**: `OperationState`
- **hooks**: `Capability` (contrato de hooks no-op)
- **base**: `Operation`
- **builder**: `derive`, `with_capabilities`
"""

from .base import Operation
from .builder import derive, with_capabilities
from .hooks import Capability
from .types import OperationState

__all__ = [
    "Capability",
    "Operation",
    "OperationState",
    "derive",
    "with_capabilities",
]
