# src/easy_monad/core/config/errors.py
"""
Exceções canônicas da camada de configuração do easy_monad.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução das settings do processo.

As exceções aqui definidas representam **violações de configuração
explícitas**, e não erros de domínio de uma Operation.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de domínio ou de execução

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de Operation ou capabilities
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do easy_monad.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de setup e falhas de execução
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo lido pelo loader (configuração ou
    catálogo de localização) não existe.
    """


class DefaultsNotFoundError(ConfigFileNotFoundError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório quando informado
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um `dict`.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"easy_monad": {"capabilities": ["logging"]}}
        - override: {"easy_monad": "off"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a seção `easy_monad` possui valores com tipo
    ou forma inválidos (ex.: `filter_parameters` que não é lista de strings).

    Decisões arquiteturais:
        - Settings inválidas são falha fatal de setup, nunca erro por chamada
        - Não realiza coerção de tipos
    """
