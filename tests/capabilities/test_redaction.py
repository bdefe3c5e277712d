# tests/capabilities/test_redaction.py
"""
Testes da capability de redaction.

Os testes asseguram que:
- valores de chaves sensíveis são substituídos por `[FILTERED]`
- a correspondência de chaves é exata, inclusive maiúsculas/minúsculas
- campos não sensíveis permanecem intactos
- objetos de parâmetros do host são desembrulhados quando configurado

Limites explícitos:
    - Não valida emissão de logs (ver test_timing_logging)
"""

from dataclasses import dataclass

from easy_monad.capabilities.redaction import FILTERED, RedactionCapability
from easy_monad.core.operation import Operation, with_capabilities


def _redact(params, keys=("password",), unwrap=False):
    capability = RedactionCapability(keys, unwrap_host_params=unwrap)
    return capability.redact_for_logging(Operation(params), params)


def test_password_is_filtered():
    out = _redact({"email": "a@b.com", "password": "secret123"})
    assert 'password":"[FILTERED]"' in out
    assert "secret123" not in out
    assert '"email":"a@b.com"' in out


def test_key_match_is_case_sensitive_and_exact():
    out = _redact({"Password": "upper", "user_password": "prefixed", "password": "plain"})
    assert '"Password":"upper"' in out
    assert '"user_password":"prefixed"' in out
    assert f'"password":"{FILTERED}"' in out


def test_nested_values_are_filtered():
    out = _redact({"user": {"name": "Ana", "password": "x"}})
    assert out == '{"user":{"name":"Ana","password":"[FILTERED]"}}'


def test_escaped_quotes_inside_values_are_filtered_whole():
    out = _redact({"password": 'pa"ss'})
    assert out == '{"password":"[FILTERED]"}'


def test_non_string_values_are_not_matched():
    # o padrão textual exige `":"`, então números não são redigidos
    out = _redact({"password": 1234})
    assert out == '{"password":1234}'


def test_empty_filter_list_keeps_text():
    assert _redact({"password": "x"}, keys=()) == '{"password":"x"}'


def test_dataclass_params_are_serialized():
    @dataclass
    class Credentials:
        login: str
        password: str

    out = _redact(Credentials("ana", "x"))
    assert out == '{"login":"ana","password":"[FILTERED]"}'


class HostParams:
    """Objeto de parâmetros de um framework host."""

    def __init__(self, data):
        self._data = data

    def to_dict(self):
        return dict(self._data)

    def __str__(self):
        return "<HostParams>"


def test_host_params_are_unwrapped_when_enabled():
    params = HostParams({"password": "x"})
    assert _redact(params, unwrap=True) == '{"password":"[FILTERED]"}'
    assert _redact(params, unwrap=False) == '"<HostParams>"'


def test_settings_factory(settings):
    capability = RedactionCapability.from_settings(settings)
    assert capability.filter_parameters == ("password",)
    assert capability.unwrap_host_params is False


def test_operation_redacts_through_its_capabilities():
    @with_capabilities(RedactionCapability(["secret"]))
    class Op(Operation):
        def perform(self):
            pass

    op = Op.call({"secret": "s", "name": "n"})
    assert op.redact_for_logging(op.params) == '{"secret":"[FILTERED]","name":"n"}'
