from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.nil import Undefined
from lispy.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((n1 v1) ...) body...)
    Bindings are evaluated left to right inside the new scope, so later
    bindings see earlier ones.
    """
    if not tail or not isinstance(tail[0], list):
        raise InvalidSpecialForm("let", "requires a binding list")

    local = Environment(outer=env)
    for binding in tail[0]:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise InvalidSpecialForm("let", f"malformed binding {binding!r}")
        name, val_expr = binding
        local.set(name, evaluate_fn(val_expr, local))

    result: LispValue = Undefined
    for e in tail[1:]:
        result = evaluate_fn(e, local)
    return result
