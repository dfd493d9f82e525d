"""Errors raised while evaluating a program."""

from __future__ import annotations

from typing import Any


class EvalError(Exception):
    """Base class for every error raised during evaluation."""


class UndefinedVariable(EvalError):
    """A name was looked up or assigned that no scope defines."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined variable: '{name}'")


class EvalTypeError(EvalError):
    """An operation was applied to a value of the wrong type."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Type error: {detail}")


class WrongNumArgs(EvalError):
    """A function or special form got the wrong number of arguments."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Wrong number of arguments: {detail}")


class NotCallable(EvalError):
    """Something that is not a function was called."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Not a callable function: {value!r}")


class SpecialFormError(EvalError):
    """A special form was written in a malformed way."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Special form error: {detail}")


class DivisionByZero(EvalError):
    """A division had zero as its denominator."""

    def __init__(self) -> None:
        super().__init__("Division by zero")