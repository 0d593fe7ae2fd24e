"""Core tree-walking evaluator for the lispy interpreter.

Interprets the reader's syntax tree directly: atoms first, then special
forms keyed on the head symbol's name, then ordinary application.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.types.environment import Environment
from lispy.types.nil import Nil, Undefined
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply
from lispy.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a syntax node in an environment."""
    if isinstance(expr, Symbol):
        return env.get(expr)

    if isinstance(expr, list):
        if not expr:
            return Nil
        head, *tail = expr
        if isinstance(head, Symbol) and head.id in SPECIAL_FORMS:
            return SPECIAL_FORMS[head.id](tail, env, evaluate)

        proc = evaluate(head, env)
        args = [evaluate(arg, env) for arg in tail]
        return apply(proc, args)

    # Numbers, string literals and already-evaluated values return as-is
    return expr


def evaluate_body(body: list[SExpression], env: Environment) -> LispValue:
    """Evaluate body forms in sequence, returning the last (Undefined if empty)."""
    result: LispValue = Undefined
    for form in body:
        result = evaluate(form, env)
    return result
