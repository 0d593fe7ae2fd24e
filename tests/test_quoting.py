from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.special_forms.quote_form import make_quoted
from lispy.printer import to_string
from lispy.reader.parser import parse
from lispy.types.nil import Nil
from lispy.types.pair import Pair, list_to_sequence
from lispy.types.symbol import Symbol, QuotedSymbol


def test_quote_symbol(env):
    result = evaluate(parse("(quote a)"), env)
    assert result == QuotedSymbol("a")
    assert not isinstance(result, str)
    assert to_string(result) == "a"


def test_quote_preserves_atoms(env):
    assert evaluate(parse("(quote 1)"), env) == 1
    assert evaluate(parse('(quote "a")'), env) == "a"


def test_quote_list_becomes_pair_list(env):
    result = evaluate(parse('(quote (a 1 "s"))'), env)
    assert isinstance(result, Pair)
    assert list_to_sequence(result) == [QuotedSymbol("a"), 1.0, "s"]
    assert to_string(result) == '(a 1 "s")'


def test_quote_nested(env):
    result = evaluate(parse("(quote (a (b (c)) d))"), env)
    assert to_string(result) == "(a (b (c)) d)"
    inner = list_to_sequence(result)[1]
    assert list_to_sequence(inner)[0] == QuotedSymbol("b")


def test_quoted_forms_are_not_evaluated(env):
    assert to_string(evaluate(parse("(quote (undefined-thing (+ 1 2)))"), env)) == "(undefined-thing (+ 1 2))"


def test_quoted_list_works_with_list_natives(env):
    assert evaluate(parse("(car (quote (1 2 3)))"), env) == 1
    assert to_string(evaluate(parse("(cdr (quote (1 2 3)))"), env)) == "(2 3)"
    assert evaluate(parse("(symbol? (car (quote (a))))"), env) is True


def test_make_quoted():
    assert make_quoted(Symbol("x")) == QuotedSymbol("x")
    assert make_quoted([]) is Nil
    assert make_quoted([Symbol("x"), [2.0]]) == Pair(QuotedSymbol("x"), Pair(Pair(2.0, Nil), Nil))


def test_quoted_symbol_differs_from_string():
    assert QuotedSymbol("a") != "a"
    assert to_string(QuotedSymbol("a")) == "a"
    assert to_string("a") == '"a"'
