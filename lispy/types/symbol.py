from __future__ import annotations
import sys


class Symbol:
    """A bare symbol in the syntax tree; evaluated by environment lookup."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class QuotedSymbol:
    """A symbol produced by `quote`: runtime data, printed as its bare name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, QuotedSymbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("quoted", self.name))

    def __repr__(self):
        return f"QuotedSymbol({self.name!r})"

    def __str__(self):
        return self.name
