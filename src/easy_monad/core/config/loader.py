# src/easy_monad/core/config/loader.py
"""
Loader canônico de configuração do easy_monad.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON (`read_mapping_file`)
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge determinístico

O mesmo leitor de arquivos é reutilizado pelo catálogo de localização.

Limites explícitos:
    - Não valida a semântica da seção `easy_monad` (ver `settings`)
    - Não compõe capabilities
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

logger = logging.getLogger(__name__)


def read_mapping_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega um arquivo YAML/JSON cujo conteúdo raiz deve ser um dicionário.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo não encontrado: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva (defaults + override local).

    Quando `local_path` é informado mas o arquivo não existe, apenas os
    defaults são usados.
    """
    if not Path(defaults_path).exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_path}")
    effective = read_mapping_file(defaults_path)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, read_mapping_file(local_file))
        else:
            logger.debug("local config %s not found, using defaults only", local_file)

    return effective
