# src/easy_monad/core/operation/builder.py
"""
Composição explícita de capabilities em tipos de Operation.

Capabilities são fixadas no momento em que o tipo da Operation é construído:
um tipo derivado recebe a tupla imutável `capabilities`, e a classe base
compartilhada nunca é alterada.

Este módulo oferece duas formas de composição:
    - `derive(base, capabilities)` → novo tipo derivado de `base`
    - `@with_capabilities(...)`    → decorator aplicado na definição da classe

A resolução de identificadores de configuração para capabilities concretas
vive em `easy_monad.capabilities.registry` (ver `compose`).
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple, Type, TypeVar

from easy_monad.core.exceptions import CapabilityConfigurationError

from .base import Operation
from .hooks import Capability

OperationT = TypeVar("OperationT", bound=Type[Operation])


def _validated(capabilities: Iterable[Capability]) -> Tuple[Capability, ...]:
    resolved = tuple(capabilities)
    seen = set()
    for capability in resolved:
        if not isinstance(capability, Capability):
            raise CapabilityConfigurationError(
                f"capabilities must be Capability instances, got: {type(capability).__name__}"
            )
        if capability.name in seen:
            raise CapabilityConfigurationError(f"Duplicate capability: {capability.name}")
        seen.add(capability.name)
    return resolved


def derive(
    base: Type[Operation],
    capabilities: Iterable[Capability],
    name: Optional[str] = None,
) -> Type[Operation]:
    """Cria um tipo derivado de `base` com `capabilities` acrescentadas às de `base`."""
    composed = _validated(tuple(base.capabilities) + tuple(capabilities))
    return type(
        name or base.__name__,
        (base,),
        {
            "capabilities": composed,
            "__module__": base.__module__,
            "__qualname__": name or base.__qualname__,
            "__doc__": base.__doc__,
        },
    )


def with_capabilities(*capabilities: Capability) -> Callable[[OperationT], OperationT]:
    """Decorator de classe: fixa as capabilities na definição da Operation."""

    def decorator(cls: OperationT) -> OperationT:
        cls.capabilities = _validated(tuple(cls.capabilities) + capabilities)
        return cls

    return decorator
