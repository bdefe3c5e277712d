# src/easy_monad/core/operation/base.py
"""
Contrato canônico de Operation do easy_monad.

Uma Operation é a menor unidade executável de lógica de negócio: recebe
parâmetros, acumula erros de domínio num `ErrorSet` e, opcionalmente,
produz um resultado.

Responsabilidades de uma Operation:
    - executar sua lógica em `perform()` (método abstrato)
    - registrar erros de domínio via `error` (execução continua)
    - abortar a própria execução via `critical_error` (early exit)
    - compor erros de outras Operations via `join` / `strict_join`

Fluxo de `Operation.call(params)`:
    1. constrói a instância com `ErrorSet` vazio
    2. abre a fronteira de early exit desta invocação
    3. dispara `on_start` e executa `perform()` dentro da fronteira
    4. dispara `on_end` e retorna a instância, qualquer que seja o desfecho

Early exit:
    - implementado por um sinal privado (`_EarlyExit`) capturado exatamente
      uma vez, na fronteira aberta por `call`
    - deriva de `BaseException`, de modo que blocos `except Exception` da
      lógica de negócio não o interceptam
    - nunca escapa de `call`: o chamador observa apenas o `ErrorSet`

Invariantes:
    - `success` ⇔ `errors.is_empty()`; `failure` é sua negação
    - parâmetros `dict` são expostos como `MappingProxyType` (somente leitura)
    - após o retorno da fronteira, o desfecho é imutável
      (`error`, `critical_error` e atribuição de `result` falham)
    - `strict_join` registra somente o primeiro erro da Operation juntada

Limites explícitos:
    - Não executa etapas em paralelo
    - Não faz retry
    - Não persiste resultados
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, NoReturn, Optional, Tuple

from easy_monad.core.errors import DEFAULT_ERROR_DESCRIPTION, ErrorSet
from easy_monad.core.exceptions import (
    CapabilityNotEnabledError,
    OperationStateError,
    ProcessError,
)

from .hooks import Capability
from .types import OperationState


class _EarlyExit(BaseException):
    """Sinal interno de early exit; pertence a uma única Operation."""

    def __init__(self, operation: "Operation") -> None:
        super().__init__(type(operation).__name__)
        self.operation = operation


class Operation:
    """
    Base de toda Operation do easy_monad.

    Subclasses implementam `perform()` e são executadas via
    `MinhaOperation.call(params)`. Capabilities são declaradas no atributo de
    classe `capabilities` (ver `compose` e `with_capabilities`).
    """

    capabilities: Tuple[Capability, ...] = ()

    def __init__(self, params: Any = None, errors: Optional[ErrorSet] = None) -> None:
        # dicts viram uma visão somente leitura de uma cópia rasa: nem a
        # Operation nem o chamador alteram os parâmetros da outra parte
        self._params = MappingProxyType(dict(params)) if isinstance(params, dict) else params
        self._errors = errors if errors is not None else ErrorSet()
        self._result: Any = None
        self._state = OperationState.CREATED
        self._capability_state: Dict[str, Dict[str, Any]] = {}

    # -----------------------------
    # Ponto de entrada
    # -----------------------------
    @classmethod
    def call(cls, params: Any = None, /, **kwargs: Any) -> "Operation":
        if params is None:
            params = dict(kwargs)
        elif kwargs:
            raise TypeError("pass params either as a single positional value or as keyword arguments")

        operation = cls(params)
        operation.within_early_exit_block(operation._start_and_perform)
        operation.on_end()
        return operation

    def within_early_exit_block(self, block: Callable[[], Any]) -> "Operation":
        if self._state is not OperationState.CREATED:
            raise OperationStateError(
                f"{type(self).__name__} already ran (state: {self._state.value})"
            )

        self._state = OperationState.RUNNING
        try:
            block()
        except _EarlyExit as signal:
            self._state = OperationState.ABORTED
            if signal.operation is not self:
                raise
        except BaseException:
            self._state = OperationState.ABORTED
            raise
        else:
            self._state = (
                OperationState.COMPLETED_SUCCESS
                if self.success
                else OperationState.COMPLETED_WITH_ERRORS
            )
        return self

    def _start_and_perform(self) -> None:
        self.on_start()
        self.perform()

    def perform(self) -> None:
        raise NotImplementedError(
            f"{type(self).__name__} must implement perform() by itself"
        )

    # -----------------------------
    # Estado e resultado
    # -----------------------------
    @property
    def params(self) -> Any:
        return self._params

    @property
    def errors(self) -> ErrorSet:
        return self._errors

    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def success(self) -> bool:
        return self._errors.is_empty()

    @property
    def failure(self) -> bool:
        return self._errors.any()

    @property
    def result(self) -> Any:
        return self._result

    @result.setter
    def result(self, value: Any) -> None:
        self._ensure_writable()
        self._result = value

    def unwrap(self) -> Any:
        """Retorna o resultado ou levanta `ProcessError` se a Operation falhou."""
        if self.success:
            return self._result
        raise ProcessError(self)

    def capability_state(self, name: str) -> Dict[str, Any]:
        """Estado privado, por instância, da capability `name`."""
        return self._capability_state.setdefault(name, {})

    # -----------------------------
    # Erros de domínio
    # -----------------------------
    def error(self, code: Hashable, description: Optional[str] = None) -> None:
        self._ensure_writable()
        self._errors.add(code, DEFAULT_ERROR_DESCRIPTION if description is None else description)
        self.on_error()

    def critical_error(self, code: Hashable, description: Optional[str] = None) -> NoReturn:
        if self._state is not OperationState.RUNNING:
            raise OperationStateError(
                f"critical_error requires a running operation "
                f"({type(self).__name__} is {self._state.value})"
            )
        self._errors.add(code, DEFAULT_ERROR_DESCRIPTION if description is None else description)
        self.on_critical_error()
        raise _EarlyExit(self)

    def _ensure_writable(self) -> None:
        if self._state.finished:
            raise OperationStateError(
                f"{type(self).__name__} outcome is final (state: {self._state.value})"
            )

    # -----------------------------
    # Composição
    # -----------------------------
    def join(self, other: "Operation") -> "Operation":
        for code, description in other.errors.items():
            self.error(code, description)
        return other

    def strict_join(self, other: "Operation") -> "Operation":
        # Somente o primeiro erro de `other` é transferido: o early exit
        # acontece antes de qualquer par seguinte.
        first = next(iter(other.errors.items()), None)
        if first is not None:
            code, description = first
            self.critical_error(code, description)
        return other

    # -----------------------------
    # Hooks (despachados para as capabilities compostas)
    # -----------------------------
    def on_start(self) -> None:
        for capability in type(self).capabilities:
            capability.on_start(self)

    def on_end(self) -> None:
        for capability in type(self).capabilities:
            capability.on_end(self)

    def on_error(self) -> None:
        for capability in type(self).capabilities:
            capability.on_error(self)

    def on_critical_error(self) -> None:
        for capability in type(self).capabilities:
            capability.on_critical_error(self)

    def redact_for_logging(self, params: Any) -> Any:
        for capability in type(self).capabilities:
            params = capability.redact_for_logging(self, params)
        return params

    # -----------------------------
    # Helpers de capabilities
    # -----------------------------
    def describe(self, code: Hashable) -> str:
        """Descrição localizada de `code` (requer a capability de localização)."""
        for capability in type(self).capabilities:
            describe = getattr(capability, "describe", None)
            if describe is not None:
                return describe(self, code)
        raise CapabilityNotEnabledError(
            f"{type(self).__name__}.describe requires the 'localization' capability"
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} state={self._state.value} "
            f"errors={self._errors.to_list()!r}>"
        )
