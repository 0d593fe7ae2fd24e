from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.procedure import Procedure
from lispy.types.symbol import Symbol


def make_procedure(
    keyword: str, params: SExpression, body: list[SExpression], env: Environment
) -> Procedure:
    if not isinstance(params, list):
        raise InvalidSpecialForm(keyword, f"parameter list expected, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise InvalidSpecialForm(keyword, f"parameter must be a symbol, got {p!r}")
    return Procedure(list(params), list(body), env)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms.
    # With no body forms, invoking the procedure yields Undefined.
    if not tail:
        raise InvalidSpecialForm("lambda", "requires at least a parameter list")

    return make_procedure("lambda", tail[0], tail[1:], env)
