"""Scopes mapping names to values, chained to an enclosing scope."""

from __future__ import annotations

from typing import Any, Optional

from . import builtins
from .errors import UndefinedVariable
from .values import Builtin


class Environment:
    """A scope of variable bindings with an optional enclosing scope."""

    def __init__(self, parent: Optional["Environment"] = None) -> None:
        self._store: dict[str, Any] = {}
        self.parent = parent

    def _chain(self):
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.parent

    def get(self, name):
        """Look ``name`` up here and then in the enclosing scopes."""
        for env in self._chain():
            if name in env._store:
                return env._store[name]
        raise UndefinedVariable(name)

    def define(self, name, value):
        """Bind ``name`` in this scope, replacing any binding it had here."""
        self._store[name] = value

    def set(self, name, value):
        """Rebind ``name`` in the nearest scope that already defines it."""
        for env in self._chain():
            if name in env._store:
                env._store[name] = value
                return
        raise UndefinedVariable(name)


_BUILTINS = (
    ("+", builtins.add),
    ("-", builtins.sub),
    ("*", builtins.mul),
    ("/", builtins.div),
    ("=", builtins.eq),
    ("!=", builtins.ne),
    (">", builtins.gt),
    ("<", builtins.lt),
    (">=", builtins.ge),
    ("<=", builtins.le),
    ("print", builtins.print_values),
)


def global_environment() -> Environment:
    """Return a fresh top-level scope holding every built-in function."""
    env = Environment()
    for name, func in _BUILTINS:
        env.define(name, Builtin(name, func))
    return env