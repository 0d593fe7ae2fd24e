from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.nil import Undefined


def when_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(when test body...) evaluates body in the current env if test is truthy."""
    if not tail:
        raise InvalidSpecialForm("when", "requires a test expression")

    result: LispValue = Undefined
    if evaluate_fn(tail[0], env):
        for e in tail[1:]:
            result = evaluate_fn(e, env)
    return result
