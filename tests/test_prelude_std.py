import pytest

from lispy.interpreter import Interpreter
from lispy.printer import to_string


@pytest.fixture(scope="module")
def std():
    return Interpreter()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cadr (list 1 2 3))", "2"),
        ("(caddr (list 1 2 3))", "3"),
        ("(square 4)", "16"),
        ("(cube 2)", "8"),
        ("(zero? 0)", "True"),
        ("(positive? -1)", "False"),
        ("(negative? -1)", "True"),
        ("(even? 4)", "True"),
        ("(odd? 4)", "False"),
        ("(odd? -3)", "True"),
        ("(even? -4)", "True"),
        ("(odd? -4)", "False"),
    ],
)
def test_prelude_procedures(std, source, expected):
    assert to_string(std.eval(source)) == expected


def test_prelude_can_be_disabled():
    assert "square" not in Interpreter(prelude=None).env


def test_prelude_from_source():
    interp = Interpreter(prelude="(define (twice x) (* 2 x))")
    assert interp.eval("(twice 21)") == 42
    assert "square" not in interp.env


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "b.lsp").write_text("(define b (+ a 1))", encoding="utf-8")
    (tmp_path / "a.lsp").write_text("(define a 1)", encoding="utf-8")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path))
    interp = Interpreter()
    # directory entries load in sorted order
    assert interp.eval("b") == 2
    assert "square" not in interp.env


def test_missing_prelude_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path / "missing.lsp"))
    interp = Interpreter()
    assert interp.eval("(+ 1 2)") == 3
