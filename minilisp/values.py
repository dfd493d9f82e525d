"""Runtime values: nil, functions, and their printed form and equality."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from .environment import Environment


class NilType:
    """The type of ``NIL``, the value that stands for nothing."""

    _instance: "NilType | None" = None

    def __new__(cls) -> "NilType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nil"

    def __bool__(self) -> bool:
        return False


NIL = NilType()


@dataclass(frozen=True)
class Builtin:
    """A function implemented natively, taking a list of argument values."""

    name: str
    func: Callable[[list], Any]

    def __call__(self, args):
        return self.func(list(args))


@dataclass(frozen=True, eq=False)
class Lambda:
    """A user-defined function together with the scope it was created in."""

    params: tuple
    body: tuple
    env: "Environment"

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "body", tuple(self.body))


Value = Union[float, str, bool, NilType, Builtin, Lambda]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_value(value: Any) -> str:
    """Return the printed form of a runtime value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(float(value))
    if isinstance(value, str):
        return value
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Builtin):
        return "#<builtin-function>"
    if isinstance(value, Lambda):
        return f"#<lambda ({' '.join(value.params)})>"
    raise TypeError(f"not a runtime value: {value!r}")


def values_equal(a: Any, b: Any) -> bool:
    """Compare two runtime values; values of different kinds are never equal."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, NilType) or isinstance(b, NilType):
        return a is b
    if isinstance(a, Builtin) and isinstance(b, Builtin):
        return a.func is b.func
    if isinstance(a, Lambda) and isinstance(b, Lambda):
        return a is b or (a.params == b.params and a.body == b.body and a.env is b.env)
    return False