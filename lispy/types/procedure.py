"""Callable values: interpreted closures and host-provided natives.

Both expose `invoke(args)`, so the evaluator's application path treats them
uniformly.
"""

from __future__ import annotations

from typing import Callable

from lispy import SExpression, LispValue
from lispy.errors import LispyError, NativeError
from lispy.types.environment import Environment
from lispy.types.nil import Undefined
from lispy.types.symbol import Symbol


class Procedure:
    """A first-class lambda with parameters, body forms, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[Symbol], body: list[SExpression], env: Environment
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        # The live defining scope, not a copy
        self.env: Environment = env

    def bind(self, args: list[LispValue]) -> Environment:
        """Bind arguments positionally in a new scope under the closure env.

        Missing arguments stay unbound; extra arguments are ignored.
        """
        local = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            local.set(param, arg)
        return local

    def invoke(self, args: list[LispValue]) -> LispValue:
        from lispy.evaluation.evaluator import evaluate_body
        return evaluate_body(self.body, self.bind(args))

    def __call__(self, *args: LispValue) -> LispValue:
        return self.invoke(list(args))

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"<Procedure ({params})>"


class Native:
    """A host callable invoked with already-evaluated arguments."""

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[..., LispValue], name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "native")

    def invoke(self, args: list[LispValue]) -> LispValue:
        try:
            result = self.fn(*args)
        except (LispyError, RecursionError):
            raise
        except Exception as ex:
            raise NativeError(self.name, ex) from ex
        return Undefined if result is None else result

    def __call__(self, *args: LispValue) -> LispValue:
        return self.invoke(list(args))

    def __repr__(self) -> str:
        return f"<Native {self.name}>"


def is_callable(value: LispValue) -> bool:
    return isinstance(value, (Procedure, Native))
