"""Evaluation of syntax trees against chained environments."""

from __future__ import annotations

from typing import Any, Sequence

from .environment import Environment, global_environment
from .errors import EvalTypeError, NotCallable, WrongNumArgs
from .parser import Boolean, Identifier, ListExpr, Number, Str
from .values import NIL, Builtin, Lambda


class Evaluator:
    """Evaluates expressions; top-level definitions persist in ``global_env``."""

    def __init__(self) -> None:
        self.global_env = global_environment()

    def evaluate(self, expr, env):
        """Evaluate one expression in ``env`` and return its value."""
        match expr:
            case Number(value=value):
                return value
            case Str(value=value):
                return value
            case Boolean(value=value):
                return value
            case Identifier(name=name):
                return env.get(name)
            case ListExpr(elements=()):
                return NIL
            case ListExpr(elements=elements):
                head = elements[0]
                if isinstance(head, Identifier):
                    special = self._SPECIAL_FORMS.get(head.name)
                    if special is not None:
                        return special(self, elements, env)
                return self._apply(elements, env)
        raise TypeError(f"not an expression: {expr!r}")

    def eval_program(self, program):
        """Evaluate top-level expressions in order; return the last value or NIL."""
        result: Any = NIL
        for expr in program:
            result = self.evaluate(expr, self.global_env)
        return result

    def _eval_if(self, elements: Sequence[Any], env: Environment):
        if not 3 <= len(elements) <= 4:
            raise WrongNumArgs("if expects 2 or 3 arguments (condition then-expr [else-expr])")
        if self.evaluate(elements[1], env) is True:
            return self.evaluate(elements[2], env)
        if len(elements) == 4:
            return self.evaluate(elements[3], env)
        return NIL

    def _eval_let(self, elements: Sequence[Any], env: Environment):
        if len(elements) != 3:
            raise WrongNumArgs("let expects 2 arguments (variable value)")
        _, target, value_expr = elements
        if not isinstance(target, Identifier):
            raise EvalTypeError("let expects an identifier as variable name")
        env.define(target.name, self.evaluate(value_expr, env))
        return NIL

    def _eval_lambda(self, elements: Sequence[Any], env: Environment):
        if len(elements) < 3:
            raise WrongNumArgs("lambda expects at least (params) body")
        params_expr = elements[1]
        if not isinstance(params_expr, ListExpr):
            raise EvalTypeError("lambda parameters must be a list")
        if not all(isinstance(param, Identifier) for param in params_expr.elements):
            raise EvalTypeError("lambda parameters must be identifiers")
        params = [param.name for param in params_expr.elements]
        return Lambda(params, elements[2:], env)

    def _apply(self, elements: Sequence[Any], env: Environment):
        func = self.evaluate(elements[0], env)
        args = [self.evaluate(arg, env) for arg in elements[1:]]

        if isinstance(func, Builtin):
            return func(args)
        if not isinstance(func, Lambda):
            raise NotCallable(func)

        if len(args) != len(func.params):
            raise WrongNumArgs(
                f"Function expects {len(func.params)} arguments, but got {len(args)}"
            )
        call_env = Environment(func.env)
        for name, value in zip(func.params, args):
            call_env.define(name, value)

        result: Any = NIL
        for expr in func.body:
            result = self.evaluate(expr, call_env)
        return result

    _SPECIAL_FORMS = {
        "if": _eval_if,
        "let": _eval_let,
        "lambda": _eval_lambda,
    }