# tests/e2e/test_create_user_e2e.py
"""
Teste end-to-end: Operation de cadastro composta com as capabilities default.

Cobre o fluxo completo:
    Settings → compose → subclass → call → inspeção / unwrap
"""

import pytest

from easy_monad import ProcessError


def _create_user_type(AppOperation):
    class CreateUser(AppOperation):
        __module__ = "app.users"
        __qualname__ = "CreateUser"

        def perform(self):
            if not self.params["name"]:
                self.error("empty_name", "Name cannot be empty")
                return
            self.result = {"name": self.params["name"], "email": self.params["email"]}

    return CreateUser


def test_create_user_with_empty_name(AppOperation, event_sink):
    CreateUser = _create_user_type(AppOperation)
    op = CreateUser.call({"name": "", "email": "a@b.com"})

    assert op.failure is True
    assert op.errors.to_list() == ["empty_name: Name cannot be empty"]
    assert op.result is None
    with pytest.raises(ProcessError):
        op.unwrap()

    assert event_sink.messages("ERROR") == [
        "Operation CreateUser has errors: ['empty_name: Name cannot be empty'] "
        'params: {"name":"","email":"a@b.com"}'
    ]


def test_create_user_success_redacts_password(AppOperation, event_sink):
    CreateUser = _create_user_type(AppOperation)
    op = CreateUser.call({"name": "Ana", "email": "a@b.com", "password": "secret123"})

    assert op.success is True
    assert op.unwrap() == {"name": "Ana", "email": "a@b.com"}
    assert all("secret123" not in m for m in event_sink.messages())
    assert 'password":"[FILTERED]"' in event_sink.messages()[0]


def test_localized_description_through_composed_type(AppOperation):
    class CreateUser(AppOperation):
        __module__ = "app.users"
        __qualname__ = "CreateUser"

        def perform(self):
            self.critical_error("empty_name", self.describe("empty_name"))

    op = CreateUser.call({"name": ""})
    assert op.errors.to_list() == ["empty_name: Name cannot be empty"]


def test_composed_operations_call_each_other(AppOperation):
    CreateUser = _create_user_type(AppOperation)

    class Signup(AppOperation):
        def perform(self):
            user = self.strict_join(CreateUser.call(self.params))
            self.result = {"user": user.result, "welcome_sent": True}

    ok = Signup.call({"name": "Ana", "email": "a@b.com"})
    assert ok.unwrap() == {"user": {"name": "Ana", "email": "a@b.com"}, "welcome_sent": True}

    failed = Signup.call({"name": "", "email": "a@b.com"})
    assert failed.errors.to_list() == ["empty_name: Name cannot be empty"]
    assert failed.result is None
