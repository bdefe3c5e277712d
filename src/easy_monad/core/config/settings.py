# src/easy_monad/core/config/settings.py
"""
Settings do processo para composição de capabilities.

`Settings` é um valor imutável construído uma única vez no startup e passado
explicitamente para `compose`. Não existe singleton global: cada tipo de
Operation composto captura as settings (e as capabilities resolvidas) no
momento da composição.

Campos:
    - sink: destino das linhas de log (`info`/`error`)
    - capabilities: identificadores, em ordem (default: redaction, logging, localization)
    - filter_parameters: chaves sensíveis redigidas nos logs
    - unwrap_host_params: desembrulha objetos de parâmetros do host (`to_dict()`)
    - locale: locale usado pela capability de localização
    - catalog: catálogo de traduções (`Catalog`)
    - log_level: nível numérico lido de `logging.level` (None quando ausente);
      aplicá-lo ao logger é responsabilidade do setup de logging do host

Seção esperada no arquivo de configuração:

    easy_monad:
      capabilities: [redaction, logging, localization]
      filter_parameters: [password, secret]
      unwrap_host_params: false
      logging:
        logger_name: easy_monad.operations
        level: INFO
      localization:
        locale: en
        catalog_paths: [locales/en.yml]

Invariantes:
    - Settings são frozen; coleções são normalizadas para tuplas
    - Validação de tipos ocorre na construção (falha fatal de setup)
    - Construir Settings não altera o estado global do `logging`
    - Identificadores de capabilities são validados na composição
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from easy_monad.core.sinks import LogSink

from .catalog import Catalog, load_catalog
from .errors import InvalidSettingsError
from .loader import load_config

SETTINGS_SECTION = "easy_monad"
DEFAULT_LOGGER_NAME = "easy_monad.operations"
DEFAULT_CAPABILITIES: Tuple[str, ...] = ("redaction", "logging", "localization")
DEFAULT_FILTER_PARAMETERS: Tuple[str, ...] = (
    "password",
    "password_confirmation",
    "secret",
    "password_salt",
)


def _default_sink() -> logging.Logger:
    return logging.getLogger(DEFAULT_LOGGER_NAME)


@dataclass(frozen=True)
class Settings:
    sink: Any = field(default_factory=_default_sink)
    capabilities: Tuple[Any, ...] = DEFAULT_CAPABILITIES
    filter_parameters: Tuple[str, ...] = DEFAULT_FILTER_PARAMETERS
    unwrap_host_params: bool = False
    locale: str = "en"
    catalog: Optional[Catalog] = None
    log_level: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.sink, LogSink):
            raise InvalidSettingsError(
                f"sink must provide info() and error(), got: {type(self.sink).__name__}"
            )

        object.__setattr__(self, "capabilities", tuple(_as_sequence("capabilities", self.capabilities)))
        filters = tuple(_as_sequence("filter_parameters", self.filter_parameters))
        for key in filters:
            if not isinstance(key, str) or not key:
                raise InvalidSettingsError("filter_parameters must contain only non-empty strings")
        object.__setattr__(self, "filter_parameters", filters)

        if not isinstance(self.unwrap_host_params, bool):
            raise InvalidSettingsError("unwrap_host_params must be a bool")
        if not isinstance(self.locale, str) or not self.locale.strip():
            raise InvalidSettingsError("locale must be a non-empty string")
        if self.log_level is not None and (
            isinstance(self.log_level, bool) or not isinstance(self.log_level, int)
        ):
            raise InvalidSettingsError("log_level must be an int logging level")
        if self.catalog is None:
            object.__setattr__(self, "catalog", Catalog(locale=self.locale))

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        *,
        sink: Any = None,
        catalog: Optional[Catalog] = None,
        base_dir: Optional[Path] = None,
    ) -> "Settings":
        """
        Constrói Settings a partir da configuração resolvida (ver `load_config`).

        Chaves ausentes assumem os defaults. `catalog_paths` relativos são
        resolvidos contra `base_dir` quando informado.
        """
        section = config.get(SETTINGS_SECTION) or {}
        if not isinstance(section, Mapping):
            raise InvalidSettingsError(f"'{SETTINGS_SECTION}' section must be a mapping")

        log_cfg = _sub_section(section, "logging")
        i18n_cfg = _sub_section(section, "localization")
        locale = i18n_cfg.get("locale", "en")
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidSettingsError("localization.locale must be a non-empty string")

        logger_name = log_cfg.get("logger_name", DEFAULT_LOGGER_NAME)
        if not isinstance(logger_name, str) or not logger_name.strip():
            raise InvalidSettingsError("logging.logger_name must be a non-empty string")
        log_level = _log_level(log_cfg.get("level"))
        if sink is None:
            sink = logging.getLogger(logger_name)

        if catalog is None:
            paths = _as_sequence("localization.catalog_paths", i18n_cfg.get("catalog_paths", []))
            for p in paths:
                if not isinstance(p, (str, PurePath)):
                    raise InvalidSettingsError(
                        f"localization.catalog_paths entries must be paths, got: {type(p).__name__}"
                    )
            if paths:
                root = Path(base_dir) if base_dir is not None else Path(".")
                catalog = load_catalog(*(root / p for p in paths), locale=locale)

        kwargs: Dict[str, Any] = {
            "sink": sink,
            "locale": locale,
            "catalog": catalog,
            "log_level": log_level,
        }
        if "capabilities" in section:
            kwargs["capabilities"] = section["capabilities"]
        if "filter_parameters" in section:
            kwargs["filter_parameters"] = section["filter_parameters"]
        if "unwrap_host_params" in section:
            kwargs["unwrap_host_params"] = section["unwrap_host_params"]
        return cls(**kwargs)


def load_settings(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    sink: Any = None,
    catalog: Optional[Catalog] = None,
) -> Settings:
    """Atalho: `load_config` + `Settings.from_config`, com paths relativos ao defaults."""
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    return Settings.from_config(
        config,
        sink=sink,
        catalog=catalog,
        base_dir=Path(defaults_path).parent,
    )


def _sub_section(section: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = section.get(key) or {}
    if not isinstance(value, Mapping):
        raise InvalidSettingsError(f"'{SETTINGS_SECTION}.{key}' must be a mapping")
    return value


def _as_sequence(name: str, value: Any) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidSettingsError(f"{name} must be a list, got: {type(value).__name__}")
    return value


def _log_level(value: Any) -> Optional[int]:
    """Normaliza `logging.level` (nome ou número) sem tocar em nenhum logger."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
    raise InvalidSettingsError(f"logging.level is not a known logging level: {value!r}")
