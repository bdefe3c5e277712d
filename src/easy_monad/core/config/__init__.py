# src/easy_monad/core/config/__init__.py
"""
Camada de configuração do easy_monad.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Construção e validação das `Settings` imutáveis do processo
    - Carregamento do catálogo de localização

Princípios fundamentais:
    - Configuração é estabelecida uma vez, antes da primeira Operation
    - Nenhum estado global é mantido
    - Erros estruturais são tratados como falhas fatais
"""

from .catalog import Catalog, load_catalog
from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, read_mapping_file
from .merge import deep_merge
from .settings import (
    DEFAULT_CAPABILITIES,
    DEFAULT_FILTER_PARAMETERS,
    DEFAULT_LOGGER_NAME,
    Settings,
    load_settings,
)

__all__ = [
    "Catalog",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "DEFAULT_CAPABILITIES",
    "DEFAULT_FILTER_PARAMETERS",
    "DEFAULT_LOGGER_NAME",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "Settings",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_catalog",
    "load_config",
    "load_settings",
    "read_mapping_file",
]
