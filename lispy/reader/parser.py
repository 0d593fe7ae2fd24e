"""
  Lisp Reader: Lexer and Parser

- Single-pass character lexer producing (kind, text) tokens
- Recursive reader consuming tokens from the front of a deque
- Emits Python primitives for the syntax tree:

    - lists   -> Python list (possibly empty)
    - symbols -> Symbol
    - strings -> str
    - numbers -> float
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterator

from lispy import SExpression
from lispy.errors import MalformedSyntax, EmptyInput
from lispy.types.symbol import Symbol

Token = tuple[str, str]

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

WHITESPACE = " \t\n\r"


def tokenize(source: str) -> list[Token]:
    """Convert a string of characters into a list of (kind, text) tokens.

    Kinds are "lparen", "rparen", "string" and "atom".
    """
    tokens: list[Token] = []
    current: list[str] = []
    in_string = False
    escape_next = False

    def flush() -> None:
        text = "".join(current)
        current.clear()
        if text.strip():
            tokens.append(("atom", text))

    for char in source:
        if escape_next:
            current.append(char)
            escape_next = False
            continue

        if char == "\\":
            escape_next = True
            continue

        if char == '"':
            if in_string:
                tokens.append(("string", "".join(current)))
                current.clear()
                in_string = False
            else:
                flush()
                in_string = True
            continue

        if in_string:
            current.append(char)
            continue

        if char == "(" or char == ")":
            flush()
            tokens.append(("lparen" if char == "(" else "rparen", char))
            continue

        if char in WHITESPACE:
            flush()
            continue

        current.append(char)

    # An unterminated string is still emitted as a best-effort token
    if in_string:
        tokens.append(("string", "".join(current)))
    else:
        flush()

    return tokens


def parse_number(text: str) -> float | None:
    """Full numeric parse of `text`; None if it is not a number literal."""
    trimmed = text.strip()
    if NUMBER_RE.fullmatch(trimmed):
        return float(trimmed)
    return None


def atom(kind: str, text: str) -> SExpression:
    """Numbers become floats; string tokens become str; the rest are Symbols."""
    if kind == "string":
        return text
    number = parse_number(text)
    if number is not None:
        return number
    return Symbol(text.strip())


def read_from_tokens(tokens: deque[Token]) -> SExpression:
    """Read one expression, consuming tokens from the front of the queue."""
    if not tokens:
        raise EmptyInput()
    kind, text = tokens.popleft()
    if kind == "lparen":
        items: list[SExpression] = []
        while True:
            if not tokens:
                raise MalformedSyntax("unexpected EOF while reading list")
            if tokens[0][0] == "rparen":
                break
            items.append(read_from_tokens(tokens))
        tokens.popleft()  # pop off ')'
        return items
    if kind == "rparen":
        raise MalformedSyntax("unexpected )")
    return atom(kind, text)


def parse(program: str) -> SExpression:
    """Read the first expression from a string; trailing input is ignored."""
    return read_from_tokens(deque(tokenize(program)))


def parse_all(program: str) -> Iterator[SExpression]:
    """Yield every top-level expression in `program`."""
    tokens = deque(tokenize(program))
    while tokens:
        yield read_from_tokens(tokens)
