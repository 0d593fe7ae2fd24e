from __future__ import annotations

from typing import Any


class LispyError(Exception):
    """ Base class for all lispy errors"""
    pass


class UnboundVariable(LispyError):
    """ Raised when a symbol is looked up or mutated before it is bound"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound variable: {name}")
        self.name = str(name)


class MalformedSyntax(LispyError):
    """ Raised when the reader meets unbalanced or malformed input"""


class EmptyInput(MalformedSyntax):
    """ Raised when the reader runs out of tokens before an expression starts"""

    def __init__(self, message: str = "unexpected EOF"):
        super().__init__(message)


class NotCallable(LispyError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value: Any):
        from lispy.printer import to_string
        super().__init__(f"Not a procedure: {to_string(value)}")
        self.value = value


class InvalidSpecialForm(LispyError):
    """ Raised when a special form keyword is used with the wrong shape"""

    def __init__(self, keyword: str, message: str):
        super().__init__(f"{keyword}: {message}")
        self.keyword = keyword


class LispyTypeError(LispyError):
    """ Raised when the types of arguments passed to a native are incorrect"""


class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a native is incorrect"""


class NativeError(LispyError):
    """ Raised when a host callable fails inside a native procedure"""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"{name}: {cause}")
        self.name = name
        self.cause = cause
