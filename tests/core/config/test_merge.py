# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos
- dicionários são mesclados recursivamente
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados explicitamente
- objetos de entrada não são mutados
"""

import pytest

from easy_monad.core.config.errors import ConfigTypeConflictError
from easy_monad.core.config.merge import deep_merge


def test_merge_simple_override():
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    base = {"easy_monad": {"logging": {"level": "INFO", "logger_name": "ops"}}}
    override = {"easy_monad": {"logging": {"level": "DEBUG"}}}
    out = deep_merge(base, override)
    assert out == {"easy_monad": {"logging": {"level": "DEBUG", "logger_name": "ops"}}}


def test_merge_list_override_total():
    base = {"easy_monad": {"capabilities": ["redaction", "logging", "localization"]}}
    override = {"easy_monad": {"capabilities": ["logging"]}}
    assert deep_merge(base, override) == {"easy_monad": {"capabilities": ["logging"]}}


def test_merge_none_clears_scalar():
    base = {"easy_monad": {"logging": {"level": "INFO"}}}
    override = {"easy_monad": {"logging": {"level": None}}}
    assert deep_merge(base, override)["easy_monad"]["logging"]["level"] is None


def test_merge_type_conflict_raises():
    base = {"easy_monad": {"unwrap_host_params": False}}
    override = {"easy_monad": "off"}  # dict vs str
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)
