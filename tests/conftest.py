# tests/conftest.py
"""
Fixtures compartilhados para testes do easy_monad.

Este módulo define fixtures reutilizáveis que fornecem:
- sinks de log em memória (EventLogSink)
- relógio monotônico controlado para testes de timing
- catálogo de localização mínimo
- settings determinísticas e tipos de Operation compostos
- Operations de exemplo para testes estruturais

Decisões arquiteturais:
    - Nenhuma fixture depende de filesystem, exceto as que recebem `tmp_path`
    - Relógio e sink são injetados explicitamente nas capabilities
    - Operations de exemplo são classes locais, sem estado global

Invariantes:
    - Nenhuma fixture executa Operation por conta própria
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Config / settings
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """YAML de defaults semelhante ao uso real do projeto."""
    return """\
easy_monad:
  capabilities: [redaction, logging, localization]
  filter_parameters: [password, secret]
  unwrap_host_params: false
  logging:
    logger_name: easy_monad.tests
    level: INFO
  localization:
    locale: en
"""


@pytest.fixture
def config_local_yaml() -> str:
    """YAML de override local: desliga localization e amplia a lista sensível."""
    return """\
easy_monad:
  capabilities: [redaction, logging]
  filter_parameters: [password, secret, token]
"""


@pytest.fixture
def catalog_translations() -> dict:
    return {
        "en": {
            "operations": {
                "app": {
                    "users": {
                        "create_user": {
                            "empty_name": "Name cannot be empty",
                        }
                    }
                }
            }
        },
        "pt": {
            "operations": {
                "app": {
                    "users": {
                        "create_user": {
                            "empty_name": "O nome não pode ser vazio",
                        }
                    }
                }
            }
        },
    }


@pytest.fixture
def event_sink():
    from easy_monad.core.sinks import EventLogSink

    return EventLogSink()


class _FakeClock:
    """Relógio monotônico controlado: avança apenas via `advance`."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_clock():
    return _FakeClock()


@pytest.fixture
def settings(event_sink, catalog_translations):
    """Settings com todas as capabilities default e sink em memória."""
    from easy_monad.core.config import Catalog, Settings

    return Settings(
        sink=event_sink,
        filter_parameters=("password",),
        catalog=Catalog(catalog_translations, locale="en"),
    )


@pytest.fixture
def AppOperation(settings):
    """Tipo base composto a partir das settings (redaction, logging, localization)."""
    from easy_monad.capabilities import compose

    return compose(settings, name="AppOperation")


# =====================================================
# Operations de exemplo
# =====================================================

@pytest.fixture
def FailingWith():
    """
    Fixture factory: retorna uma função que cria Operations concluídas com
    os erros informados (na ordem dada), sem early exit.
    """
    from easy_monad.core.operation import Operation

    def _make(*pairs):
        class _Failing(Operation):
            def perform(self):
                for code, description in pairs:
                    self.error(code, description)

        return _Failing.call({})

    return _make


@pytest.fixture
def Succeeding():
    from easy_monad.core.operation import Operation

    class _Succeeding(Operation):
        def perform(self):
            self.result = {"value": self.params.get("value", 42)}

    return _Succeeding
