"""Built-in native procedures for the lispy runtime environment.

This module defines math, arithmetic, comparison, list processing,
predicates, string helpers and output exposed to Lisp code. Every native is
called with already-evaluated arguments; procedure arguments are invoked
through the uniform `invoke` contract. Lists cross the boundary as
Pair-lists.
"""
from __future__ import annotations

import math
import random as _random
import sys
from functools import reduce
from typing import Callable, TextIO

from lispy import LispValue
from lispy.errors import LispyTypeError, LispyArityError
from lispy.printer import to_string, format_number
from lispy.reader.parser import parse_number
from lispy.types.environment import Environment
from lispy.types.nil import Nil
from lispy.types.pair import Pair, is_proper_list, list_to_sequence, sequence_to_list
from lispy.types.procedure import Procedure, Native, is_callable
from lispy.types.symbol import QuotedSymbol


def _invoke(fn: LispValue, *args: LispValue) -> LispValue:
    if not is_callable(fn):
        raise LispyTypeError(f"Expected a procedure, got {to_string(fn)}")
    return fn.invoke(list(args))


def _numbers(name: str, args: tuple) -> tuple:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise LispyTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: LispValue) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args), 0.0)


def sub(*args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LispyArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    return reduce(lambda acc, x: acc - x, rest, first)


def mul(*args: LispValue) -> LispValue:
    return reduce(lambda acc, x: acc * x, _numbers("*", args), 1.0)


def div(*args: LispValue) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise LispyArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", args)
    if not rest:
        return 1 / first
    return reduce(lambda acc, x: acc / x, rest, first)


def modulo(a: float, b: float) -> float:
    """Sign follows the dividend: (modulo -1 3) => -1."""
    _numbers("modulo", (a, b))
    return math.fmod(a, b)


def floor_mod(a: float, b: float) -> float:
    """Sign follows the divisor: (mod -1 3) => 2."""
    _numbers("mod", (a, b))
    return math.fmod(math.fmod(a, b) + b, b)


# -------------------------------
# Comparison and equality
# -------------------------------
def _chain(op: Callable[[LispValue, LispValue], bool]) -> Callable[..., bool]:
    def compare(*args: LispValue) -> bool:
        return all(op(a, b) for a, b in zip(args, args[1:]))
    return compare


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity for cells and procedures; value equality for atoms."""
    if isinstance(a, (Pair, Procedure, Native)) or isinstance(b, (Pair, Procedure, Native)):
        return a is b
    return type(a) is type(b) and a == b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality, walking Pair-lists element by element."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not is_equal(a.head, b.head):
            return False
        a, b = a.tail, b.tail
    return is_eq(a, b)


def logical_not(x: LispValue) -> bool:
    return not x


# -------------------------------
# List operations
# -------------------------------
def cons(head: LispValue, tail: LispValue) -> Pair:
    return Pair(head, tail)


def car(x: LispValue) -> LispValue:
    if not isinstance(x, Pair):
        raise LispyTypeError(f"car expects a pair, got {to_string(x)}")
    return x.head


def cdr(x: LispValue) -> LispValue:
    if not isinstance(x, Pair):
        raise LispyTypeError(f"cdr expects a pair, got {to_string(x)}")
    return x.tail


def make_list(*items: LispValue) -> LispValue:
    return sequence_to_list(items)


def length(x: LispValue) -> float:
    if isinstance(x, str):
        return float(len(x))
    return float(len(list_to_sequence(x)))


def list_ref(lst: LispValue, n: float) -> LispValue:
    items = list_to_sequence(lst)
    if n != int(n) or not 0 <= n < len(items):
        raise LispyTypeError(f"Index out of bounds: {format_number(n)}")
    return items[int(n)]


def append(*lists: LispValue) -> LispValue:
    """Concatenate lists; the last argument is shared, not copied."""
    if not lists:
        return Nil
    *init, last = lists
    items = [x for lst in init for x in list_to_sequence(lst)]
    result = last
    for item in reversed(items):
        result = Pair(item, result)
    return result


def list_range(start: float, end: float) -> LispValue:
    """(range s e) => (s s+1 ... e-1)"""
    items = []
    i = start
    while i < end:
        items.append(i)
        i += 1
    return sequence_to_list(items)


def list_sum(lst: LispValue) -> LispValue:
    return add(*list_to_sequence(lst))


def list_map(fn: LispValue, lst: LispValue) -> LispValue:
    return sequence_to_list(_invoke(fn, x) for x in list_to_sequence(lst))


def list_filter(pred: LispValue, lst: LispValue) -> LispValue:
    return sequence_to_list(x for x in list_to_sequence(lst) if _invoke(pred, x))


def list_reduce(fn: LispValue, init: LispValue, lst: LispValue) -> LispValue:
    """(reduce f init lst): left fold, calling (f acc x) for each element."""
    return reduce(lambda acc, x: _invoke(fn, acc, x), list_to_sequence(lst), init)


def list_reverse(lst: LispValue) -> LispValue:
    return sequence_to_list(reversed(list_to_sequence(lst)))


def list_last(lst: LispValue) -> LispValue:
    items = list_to_sequence(lst)
    if not items:
        raise LispyTypeError("last expects a non-empty list")
    return items[-1]


def for_each(fn: LispValue, lst: LispValue) -> None:
    for x in list_to_sequence(lst):
        _invoke(fn, x)


def apply_native(fn: LispValue, args: LispValue) -> LispValue:
    return _invoke(fn, *list_to_sequence(args))


# -------------------------------
# Strings
# -------------------------------
def string_append(*args: LispValue) -> str:
    return "".join(a if isinstance(a, str) else to_string(a) for a in args)


def number_to_string(n: LispValue) -> str:
    _numbers("number->string", (n,))
    return format_number(n)


def string_to_number(s: LispValue) -> float:
    if not isinstance(s, str):
        raise LispyTypeError(f"string->number expects a string, got {to_string(s)}")
    number = parse_number(s)
    if number is None:
        raise LispyTypeError(f"Not a number: {to_string(s)}")
    return number


def make_print(output: TextIO | None) -> Callable[..., None]:
    """Build `print`, writing rendered values to `output` (stdout by default)."""
    def lisp_print(*args: LispValue) -> None:
        stream = output if output is not None else sys.stdout
        stream.write(" ".join(a if isinstance(a, str) else to_string(a) for a in args) + "\n")
    return lisp_print


def make_set_global(env: Environment) -> Callable[[str, LispValue], LispValue]:
    """Build `set-global`, defining a name in the session's root scope."""
    def set_global(name: LispValue, value: LispValue) -> LispValue:
        if isinstance(name, QuotedSymbol):
            name = name.name
        if not isinstance(name, str):
            raise LispyTypeError(f"set-global expects a name, got {to_string(name)}")
        env.root().set(name, value)
        return value
    return set_global


def make_callback(fn: LispValue) -> Native:
    """Wrap a procedure as a zero-argument Native, callable from Lisp and the host."""
    if not is_callable(fn):
        raise LispyTypeError(f"Expected a procedure, got {to_string(fn)}")
    return Native(lambda: fn.invoke([]), "callback")


BUILTINS: dict[str, Callable[..., LispValue]] = {
    # math
    "abs": abs,
    "max": max,
    "min": min,
    "sqrt": math.sqrt,
    "sin": math.sin,
    "cos": math.cos,
    "pow": math.pow,
    "expt": math.pow,
    "round": lambda x: float(math.floor(x + 0.5)),
    "floor": lambda x: float(math.floor(x)),
    "ceil": lambda x: float(math.ceil(x)),
    "deg-to-rad": math.radians,
    "random": lambda n: _random.random() * n,
    # arithmetic
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "modulo": modulo,
    "mod": floor_mod,
    "negative": lambda x: -x,
    # comparison
    "=": _chain(lambda a, b: a == b),
    "<": _chain(lambda a, b: a < b),
    ">": _chain(lambda a, b: a > b),
    "<=": _chain(lambda a, b: a <= b),
    ">=": _chain(lambda a, b: a >= b),
    # equality and predicates
    "eq?": is_eq,
    "equal?": is_equal,
    "not": logical_not,
    "null?": lambda x: x is Nil,
    "number?": lambda x: isinstance(x, (int, float)) and not isinstance(x, bool),
    "string?": lambda x: isinstance(x, str),
    "symbol?": lambda x: isinstance(x, QuotedSymbol),
    "procedure?": is_callable,
    "list?": is_proper_list,
    "pair?": lambda x: isinstance(x, Pair),
    # lists
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "first": car,
    "rest": cdr,
    "list": make_list,
    "length": length,
    "list-ref": list_ref,
    "append": append,
    "range": list_range,
    "sum": list_sum,
    "map": list_map,
    "filter": list_filter,
    "reduce": list_reduce,
    "reverse": list_reverse,
    "last": list_last,
    "for-each": for_each,
    "apply": apply_native,
    # strings
    "string-append": string_append,
    "number->string": number_to_string,
    "string->number": string_to_number,
    # host callbacks
    "callback": make_callback,
}


def register(env: Environment, output: TextIO | None = None) -> None:
    """Install the standard natives into `env`."""
    env.update({name: Native(fn, name) for name, fn in BUILTINS.items()})
    env.set("pi", math.pi)
    env.define_native("print", make_print(output))
    env.define_native("set-global", make_set_global(env))
