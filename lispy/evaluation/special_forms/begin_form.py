from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.types.environment import Environment
from lispy.types.nil import Undefined


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Undefined
    for e in tail:
        result = evaluate_fn(e, env)
    return result
