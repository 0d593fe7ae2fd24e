import pytest

from lispy.errors import InvalidSpecialForm, UnboundVariable
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_string
from lispy.reader.parser import parse
from lispy.types.nil import Nil, Undefined
from lispy.types.procedure import Procedure


def ev(source, env):
    return evaluate(parse(source), env)


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 1 10 20)", 10),
        ("(if 0 10 20)", 20),
        ('(if "" 10 20)', 20),
        ('(if "x" 10 20)', 10),
        ("(if (list) 10 20)", 20),
        ("(if (list 1) 10 20)", 10),
        ("(if (< 1 2) 10 20)", 10),
        ("(if (> 1 2) 10 20)", 20),
        ("(if (quote a) 10 20)", 10),
    ],
)
def test_if_truthiness(env, source, expected):
    assert ev(source, env) == expected


def test_if_without_alternative(env):
    result = ev("(if 0 1)", env)
    assert result is Undefined
    assert to_string(result) not in ("0", '""', "()", "")


def test_if_only_evaluates_chosen_branch(env):
    assert ev("(if 1 2 missing)", env) == 2
    assert ev("(if 0 missing 3)", env) == 3


@pytest.mark.parametrize("source", ["(if)", "(if 1)", "(if 1 2 3 4)"])
def test_if_malformed(env, source):
    with pytest.raises(InvalidSpecialForm):
        ev(source, env)


# ------------------ define ------------------

def test_define_returns_undefined(env):
    assert ev("(define x 10)", env) is Undefined
    assert ev("x", env) == 10


def test_define_procedure_sugar(env):
    ev("(define (add a b) (+ a b))", env)
    proc = ev("add", env)
    assert isinstance(proc, Procedure)
    assert [p.id for p in proc.params] == ["a", "b"]
    assert ev("(add 2 3)", env) == 5


def test_define_procedure_without_params(env):
    ev("(define (five) 5)", env)
    assert ev("(five)", env) == 5


def test_define_writes_innermost_scope(env):
    ev("(define x 1)", env)
    ev("(define (shadow) (define x 2) x)", env)
    assert ev("(shadow)", env) == 2
    assert ev("x", env) == 1


@pytest.mark.parametrize("source", ["(define)", "(define x)", "(define x 1 2)", "(define 1 2)", "(define () 1)"])
def test_define_malformed(env, source):
    with pytest.raises(InvalidSpecialForm):
        ev(source, env)


# ------------------ let ------------------

def test_let_basic(env):
    assert ev("(let ((a 1) (b 2)) (+ a b))", env) == 3


def test_let_bindings_are_sequential(env):
    assert ev("(let ((a 1) (b (+ a 1))) b)", env) == 2


def test_let_scope_is_discarded(env):
    ev("(let ((tmp 1)) tmp)", env)
    with pytest.raises(UnboundVariable):
        ev("tmp", env)


def test_let_empty_body(env):
    assert ev("(let ((a 1)))", env) is Undefined


@pytest.mark.parametrize("source", ["(let)", "(let x x)", "(let (x) x)", "(let ((x)) x)", "(let ((1 2)) 1)"])
def test_let_malformed(env, source):
    with pytest.raises(InvalidSpecialForm):
        ev(source, env)


# ------------------ lambda ------------------

def test_lambda_does_not_evaluate_body(env):
    proc = ev("(lambda (x) missing)", env)
    assert isinstance(proc, Procedure)


@pytest.mark.parametrize("source", ["(lambda)", "(lambda x x)", "(lambda (1) 1)"])
def test_lambda_malformed(env, source):
    with pytest.raises(InvalidSpecialForm):
        ev(source, env)


# ------------------ begin ------------------

def test_begin_sequencing(env):
    assert ev("(begin (define a 10) (define b 20) (+ a b))", env) == 30
    # begin does not open a scope
    assert ev("a", env) == 10


def test_begin_empty(env):
    assert ev("(begin)", env) is Undefined


# ------------------ when ------------------

def test_when(env):
    assert ev("(when 1 (define w 1) (+ w 1))", env) == 2
    assert ev("w", env) == 1
    assert ev("(when 0 missing)", env) is Undefined


def test_when_malformed(env):
    with pytest.raises(InvalidSpecialForm):
        ev("(when)", env)


# ------------------ while ------------------

def test_while_loop(env):
    ev("(define i 0)", env)
    ev("(define total 0)", env)
    result = ev("(while (< i 5) (set! total (+ total i)) (set! i (+ i 1)))", env)
    assert result is Undefined
    assert ev("total", env) == 10
    assert ev("i", env) == 5


def test_while_false_test_never_runs_body(env):
    assert ev("(while 0 missing)", env) is Undefined


# ------------------ set! ------------------

def test_set_mutates_enclosing_binding(env):
    ev("(define x 1)", env)
    assert ev("(let ((y 0)) (set! x 5))", env) is Undefined
    assert ev("x", env) == 5


def test_set_unbound(env):
    with pytest.raises(UnboundVariable):
        ev("(set! nope 1)", env)
    with pytest.raises(UnboundVariable):
        ev("nope", env)


def test_set_evaluates_expression_first(env):
    with pytest.raises(UnboundVariable) as info:
        ev("(set! nope missing)", env)
    assert info.value.name == "missing"


@pytest.mark.parametrize("source", ["(set!)", "(set! x)", "(set! 1 2)", '(set! "x" 2)'])
def test_set_malformed(env, source):
    with pytest.raises(InvalidSpecialForm):
        ev(source, env)


# ------------------ quote ------------------

def test_quote_malformed(env):
    with pytest.raises(InvalidSpecialForm):
        ev("(quote)", env)
    with pytest.raises(InvalidSpecialForm):
        ev("(quote a b)", env)


def test_quote_empty_list(env):
    assert ev("(quote ())", env) is Nil
