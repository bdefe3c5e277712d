# src/easy_monad/capabilities/__init__.py
"""
Capabilities opcionais do easy_monad.

Cada capability implementa o contrato de hooks (`Capability`) e pode ser
habilitada em qualquer subconjunto:

- **redaction**    → `RedactionCapability` (redação textual de parâmetros)
- **logging**      → `TimingLoggingCapability` (timing + linhas de log)
- **localization** → `LocalizationCapability` (`describe(code)`)

A composição a partir das Settings vive em `registry.compose`.
"""

from .localization import LocalizationCapability, catalog_key
from .redaction import FILTERED, RedactionCapability
from .registry import (
    CapabilityRegistry,
    DuplicateCapabilityError,
    build_capabilities,
    compose,
    default_registry,
)
from .timing import TimingLoggingCapability

__all__ = [
    "CapabilityRegistry",
    "DuplicateCapabilityError",
    "FILTERED",
    "LocalizationCapability",
    "RedactionCapability",
    "TimingLoggingCapability",
    "build_capabilities",
    "catalog_key",
    "compose",
    "default_registry",
]
