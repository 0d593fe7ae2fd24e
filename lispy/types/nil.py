from __future__ import annotations


class NilType:
    """The empty list. A singleton, distinct from Undefined and from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


class UndefinedType:
    """Result of forms that produce no meaningful value (define, set!, ...)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<undefined>"
    def __bool__(self): return False


Nil = NilType()
Undefined = UndefinedType()
