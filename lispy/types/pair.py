"""Cons cells and conversions between Pair-lists and Python sequences.

Pair-lists are the only list representation at runtime. Native procedures
that accept or return collections go through `list_to_sequence` and
`sequence_to_list` at the boundary.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy import LispValue
from lispy.errors import LispyTypeError
from lispy.types.nil import Nil


class Pair:
    """A two-slot cell: head value plus tail (another Pair, Nil, or anything)."""

    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue = Nil):
        self.head = head
        self.tail = tail

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Pair):
            return False
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a == b

    __hash__ = None  # mutable cells

    def __iter__(self) -> Iterator[LispValue]:
        return iter_pairs(self)

    def __repr__(self) -> str:
        return f"Pair({self.head!r}, {self.tail!r})"


def iter_pairs(lst: LispValue) -> Iterator[LispValue]:
    """Yield the heads of a proper list; raise on an improper tail."""
    while isinstance(lst, Pair):
        yield lst.head
        lst = lst.tail
    if lst is not Nil:
        raise LispyTypeError("Expected a proper list")


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Pair):
        value = value.tail
    return value is Nil


def list_to_sequence(lst: LispValue) -> list[LispValue]:
    """Convert a Pair-list (or Nil) into a Python list of its elements."""
    if lst is not Nil and not isinstance(lst, Pair):
        raise LispyTypeError(f"Expected a list, got {lst!r}")
    return list(iter_pairs(lst))


def sequence_to_list(items: Iterable[LispValue]) -> LispValue:
    """Build a proper Pair-list from any Python iterable."""
    result: LispValue = Nil
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result
