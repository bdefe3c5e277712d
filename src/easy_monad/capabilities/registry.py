# src/easy_monad/capabilities/registry.py
"""
Registro de capabilities e composição a partir das Settings.

Este módulo resolve os identificadores configurados em
`Settings.capabilities` para capabilities concretas e compõe o tipo base
de Operation da aplicação.

Responsabilidades do módulo:
    - Registrar factories `factory(settings) -> Capability` por identificador
    - Rejeitar identificadores duplicados no registro
    - Resolver identificadores na ordem configurada (`build_capabilities`)
    - Derivar o tipo de Operation composto (`compose`)

Decisões arquiteturais:
    - Identificadores desconhecidos ou malformados são erro fatal de
      configuração, detectado na composição e nunca por chamada
    - A ordem de registro é preservada separadamente do armazenamento
    - Aliases legados (`params_sanitizer`, `i18n`) resolvem para a mesma
      capability do identificador canônico

Invariantes:
    - Cada identificador registrado é único
    - O tipo composto carrega uma tupla imutável de capabilities
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Type

from easy_monad.core.config.settings import Settings
from easy_monad.core.exceptions import CapabilityConfigurationError
from easy_monad.core.operation.base import Operation
from easy_monad.core.operation.builder import derive
from easy_monad.core.operation.hooks import Capability

from .localization import LocalizationCapability
from .redaction import RedactionCapability
from .timing import TimingLoggingCapability

logger = logging.getLogger(__name__)

CapabilityFactory = Callable[[Settings], Capability]


class DuplicateCapabilityError(CapabilityConfigurationError):
    """Identificador de capability registrado mais de uma vez."""


@dataclass
class CapabilityRegistry:
    """Registro canônico `identificador -> factory` com ordem preservada."""

    _factories: Dict[str, CapabilityFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, identifier: str, factory: CapabilityFactory) -> None:
        if not isinstance(identifier, str) or not identifier.strip():
            raise CapabilityConfigurationError("capability identifier must be a non-empty string")
        if not callable(factory):
            raise CapabilityConfigurationError(f"factory for {identifier!r} must be callable")
        if identifier in self._factories:
            raise DuplicateCapabilityError(f"Duplicate capability identifier: {identifier}")

        self._factories[identifier] = factory
        self._order.append(identifier)

    def get(self, identifier: str) -> CapabilityFactory:
        if not isinstance(identifier, str):
            raise CapabilityConfigurationError(
                f"capability identifier must be a string, got: {type(identifier).__name__}"
            )
        try:
            return self._factories[identifier]
        except KeyError:
            raise CapabilityConfigurationError(
                f"Unknown capability: {identifier!r} (known: {', '.join(self._order)})"
            ) from None

    def identifiers(self) -> List[str]:
        return list(self._order)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories


def default_registry() -> CapabilityRegistry:
    registry = CapabilityRegistry()
    registry.add("redaction", RedactionCapability.from_settings)
    registry.add("logging", TimingLoggingCapability.from_settings)
    registry.add("localization", LocalizationCapability.from_settings)
    registry.add("params_sanitizer", RedactionCapability.from_settings)
    registry.add("i18n", LocalizationCapability.from_settings)
    return registry


def build_capabilities(
    settings: Settings,
    registry: Optional[CapabilityRegistry] = None,
) -> List[Capability]:
    """Resolve `settings.capabilities` em capabilities concretas, na ordem configurada."""
    registry = registry or default_registry()
    capabilities: List[Capability] = []
    for identifier in settings.capabilities:
        capability = registry.get(identifier)(settings)
        if not isinstance(capability, Capability):
            raise CapabilityConfigurationError(
                f"factory for {identifier!r} returned {type(capability).__name__}, not a Capability"
            )
        capabilities.append(capability)
    return capabilities


def compose(
    settings: Settings,
    *,
    base: Type[Operation] = Operation,
    registry: Optional[CapabilityRegistry] = None,
    name: Optional[str] = None,
) -> Type[Operation]:
    """
    Deriva de `base` um tipo de Operation com as capabilities configuradas.

    Raises:
        CapabilityConfigurationError: identificador desconhecido, malformado
            ou capability duplicada (ex.: `redaction` e `params_sanitizer`).
    """
    capabilities = build_capabilities(settings, registry)
    composed = derive(base, capabilities, name=name)
    logger.debug(
        "composed %s with capabilities: %s",
        composed.__qualname__,
        ", ".join(c.name for c in composed.capabilities) or "(none)",
    )
    return composed
