from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.nil import Undefined
from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.lambda_form import make_procedure


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; sugar for (define name (lambda (params...) body...))
    Always binds in the innermost scope of `env`.
    """
    if not tail:
        raise InvalidSpecialForm("define", "requires a name")

    target = tail[0]
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise InvalidSpecialForm("define", "procedure name must be a symbol")
        name, *params = target
        env.set(name, make_procedure("define", params, tail[1:], env))
        return Undefined

    if not isinstance(target, Symbol):
        raise InvalidSpecialForm("define", f"cannot define {target!r}")
    if len(tail) != 2:
        raise InvalidSpecialForm("define", "requires exactly 2 arguments: (define name value)")

    env.set(target, evaluate_fn(tail[1], env))
    return Undefined
