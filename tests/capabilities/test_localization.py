# tests/capabilities/test_localization.py
"""
Testes da capability de localization.

Os testes asseguram que:
- a chave é derivada do módulo e da classe concreta em snake_case
- `describe` resolve a tradução no locale configurado
- chaves ausentes retornam o fallback do catálogo
- a capability nunca é invocada automaticamente
"""

import pytest

from easy_monad.capabilities.localization import LocalizationCapability, catalog_key, underscore
from easy_monad.core.config import Catalog
from easy_monad.core.operation import Operation, with_capabilities


@pytest.mark.parametrize(
    "name, expected",
    [
        ("CreateUser", "create_user"),
        ("HTTPRequest", "http_request"),
        ("Create2FACode", "create2_fa_code"),
        ("users", "users"),
    ],
)
def test_underscore(name, expected):
    assert underscore(name) == expected


def test_catalog_key_uses_module_and_qualname():
    class CreateUser(Operation):
        __module__ = "app.users"
        __qualname__ = "CreateUser"

    assert catalog_key(CreateUser, "empty_name") == "operations.app.users.create_user.empty_name"


def _create_user_type(catalog, locale="en"):
    @with_capabilities(LocalizationCapability(catalog, locale))
    class CreateUser(Operation):
        __module__ = "app.users"
        __qualname__ = "CreateUser"

        def perform(self):
            if not self.params["name"]:
                self.error("empty_name", self.describe("empty_name"))

    return CreateUser


def test_describe_resolves_translation(catalog_translations):
    CreateUser = _create_user_type(Catalog(catalog_translations))
    op = CreateUser.call({"name": ""})
    assert op.errors.to_list() == ["empty_name: Name cannot be empty"]


def test_describe_uses_configured_locale(catalog_translations):
    CreateUser = _create_user_type(Catalog(catalog_translations), locale="pt")
    op = CreateUser.call({"name": ""})
    assert op.errors["empty_name"] == "O nome não pode ser vazio"


def test_missing_translation_fallback(catalog_translations):
    CreateUser = _create_user_type(Catalog(catalog_translations))
    op = CreateUser({"name": "x"})
    assert op.describe("unknown") == "translation missing: en.operations.app.users.create_user.unknown"


def test_errors_are_not_localized_automatically(catalog_translations):
    CreateUser = _create_user_type(Catalog(catalog_translations))

    class Plain(CreateUser):
        __qualname__ = "CreateUser"

        def perform(self):
            self.error("empty_name")

    op = Plain.call({"name": ""})
    assert op.errors["empty_name"] == "Something went wrong"


def test_settings_factory(settings):
    capability = LocalizationCapability.from_settings(settings)
    assert capability.catalog is settings.catalog
    assert capability.locale == "en"
