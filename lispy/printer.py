"""Render runtime values and syntax trees back to lispy surface syntax."""

from __future__ import annotations

import math

from lispy import LispValue, SExpression
from lispy.types.nil import NilType, UndefinedType
from lispy.types.pair import Pair, is_proper_list
from lispy.types.procedure import Procedure, Native
from lispy.types.symbol import Symbol, QuotedSymbol

PROCEDURE_PLACEHOLDER = "#<procedure>"
NATIVE_PLACEHOLDER = "#<native>"
UNDEFINED_PLACEHOLDER = "#<undefined>"


def format_number(value: int | float) -> str:
    """Integral floats print without a fractional part: 3.0 -> 3."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def quote_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


SYMBOL_SPECIAL = frozenset("\\\"() \t\n\r")


def quote_symbol(name: str) -> str:
    """Backslash-escape characters the lexer would otherwise split or quote on."""
    return "".join("\\" + c if c in SYMBOL_SPECIAL else c for c in name)


def to_string(value: LispValue) -> str:
    """Render any runtime value as text."""
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (QuotedSymbol, Symbol)):
        return quote_symbol(str(value))
    if isinstance(value, Procedure):
        return PROCEDURE_PLACEHOLDER
    if isinstance(value, Native):
        return NATIVE_PLACEHOLDER
    if isinstance(value, UndefinedType):
        return UNDEFINED_PLACEHOLDER
    if isinstance(value, NilType):
        return "()"
    if isinstance(value, Pair):
        if is_proper_list(value):
            return "(" + " ".join(to_string(x) for x in value) + ")"
        # improper pair: render both slots directly
        return f"({to_string(value.head)} . {to_string(value.tail)})"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def to_source(expr: SExpression) -> str:
    """Render a syntax tree as source text that `parse` reads back unchanged."""
    if isinstance(expr, list):
        return "(" + " ".join(to_source(x) for x in expr) + ")"
    return to_string(expr)
