# Core type aliases for the lispy data model.
# Syntax trees are plain Python lists of atoms (float, str, Symbol); runtime
# lists are Pair cells terminated by Nil.
#
# Naming guidance:
# - SExpression: use in reader/evaluator code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax node alias
SExpression = Any

# Evaluator function type, handed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]


from lispy.reader.parser import tokenize, parse, parse_all  # noqa: E402
from lispy.evaluation.evaluator import evaluate  # noqa: E402
from lispy.printer import to_string, to_source  # noqa: E402
from lispy.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "tokenize",
    "parse",
    "parse_all",
    "evaluate",
    "to_string",
    "to_source",
    "Interpreter",
]
