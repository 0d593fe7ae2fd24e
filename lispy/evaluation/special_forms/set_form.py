from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.symbol import Symbol
from lispy.types.environment import Environment
from lispy.types.nil import Undefined


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name expr) mutates the nearest existing binding of name."""
    if len(tail) != 2:
        raise InvalidSpecialForm("set!", "requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise InvalidSpecialForm("set!", f"first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.assign(var_sym, value)
    return Undefined
