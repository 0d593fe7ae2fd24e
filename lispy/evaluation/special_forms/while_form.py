from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.nil import Undefined


def while_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(while test body...) loops in the current env; always Undefined."""
    if not tail:
        raise InvalidSpecialForm("while", "requires a test expression")

    test, body = tail[0], tail[1:]
    while evaluate_fn(test, env):
        for e in body:
            evaluate_fn(e, env)
    return Undefined
