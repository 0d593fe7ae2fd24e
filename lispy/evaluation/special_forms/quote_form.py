from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import InvalidSpecialForm
from lispy.types.environment import Environment
from lispy.types.pair import sequence_to_list
from lispy.types.symbol import Symbol, QuotedSymbol


def make_quoted(expr: SExpression) -> LispValue:
    """Turn syntax into data: Symbols become QuotedSymbols, lists become Pair-lists."""
    if isinstance(expr, Symbol):
        return QuotedSymbol(expr.id)
    if isinstance(expr, list):
        return sequence_to_list(make_quoted(x) for x in expr)
    return expr


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise InvalidSpecialForm("quote", "expects exactly 1 argument")
    return make_quoted(tail[0])
