"""Functions available in the global scope of every program."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Sequence

from .errors import DivisionByZero, EvalTypeError, WrongNumArgs
from .values import NIL, format_value, values_equal


def _check_count(name: str, args: Sequence[Any], expected: int) -> None:
    if len(args) != expected:
        raise WrongNumArgs(f"{name} expects {expected} arguments, but got {len(args)}")


def _check_min_count(name: str, args: Sequence[Any], minimum: int) -> None:
    if len(args) < minimum:
        raise WrongNumArgs(f"{name} expects at least {minimum} arguments, but got {len(args)}")


def _number(name: str, value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise EvalTypeError(f"{name} expects numbers")


def _numbers(name: str, args: Sequence[Any]) -> list[float]:
    return [_number(name, arg) for arg in args]


def _two_numbers(name: str, args: Sequence[Any]) -> tuple[float, float]:
    _check_count(name, args, 2)
    return _number(name, args[0]), _number(name, args[1])


def _sum(numbers: Sequence[float]) -> float:
    return reduce(operator.add, numbers, -0.0)


def add(args):
    """Sum of all arguments."""
    return _sum(_numbers("+", args))


def sub(args):
    """Negate a single argument, or subtract the rest from the first."""
    _check_min_count("-", args, 1)
    numbers = _numbers("-", args)
    first, *rest = numbers
    if not rest:
        return -first
    return first - _sum(rest)


def mul(args):
    """Product of all arguments."""
    return reduce(operator.mul, _numbers("*", args), 1.0)


def div(args):
    """Divide the first of two arguments by the second."""
    numerator, denominator = _two_numbers("/", args)
    if denominator == 0.0:
        raise DivisionByZero()
    return numerator / denominator


def eq(args):
    """Whether two values are equal."""
    _check_count("=", args, 2)
    return values_equal(args[0], args[1])


def ne(args):
    """Whether two values differ."""
    _check_count("!=", args, 2)
    return not values_equal(args[0], args[1])


def gt(args):
    a, b = _two_numbers(">", args)
    return a > b


def lt(args):
    a, b = _two_numbers("<", args)
    return a < b


def ge(args):
    a, b = _two_numbers(">=", args)
    return a >= b


def le(args):
    a, b = _two_numbers("<=", args)
    return a <= b


def print_values(args):
    """Print the arguments separated by spaces, then a newline."""
    print(" ".join(format_value(arg) for arg in args))
    return NIL