"""Application engine for lispy.

Procedures and natives share the `invoke(args)` contract; anything else in
head position is an error.
"""

from lispy import LispValue
from lispy.errors import NotCallable
from lispy.types.procedure import is_callable


def apply(head: LispValue, args: list[LispValue]) -> LispValue:
    """Invoke a Procedure or Native with already-evaluated arguments."""
    if not is_callable(head):
        raise NotCallable(head)
    return head.invoke(args)
