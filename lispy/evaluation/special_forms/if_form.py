from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.nil import Undefined


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test conseq [alt])"""
    if not 2 <= len(tail) <= 3:
        raise InvalidSpecialForm("if", "requires a test, a consequent and an optional alternative")

    # Host truthiness: False, 0, "", Nil and Undefined are false
    if evaluate_fn(tail[0], env):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Undefined
