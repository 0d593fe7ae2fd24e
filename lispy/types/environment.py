"""Runtime environment for lispy.

The Environment stores bindings of names to evaluated Lisp values and
supports nested scopes via an `outer` link. The link is fixed at
construction; closures hold the live chain, so later mutations through
`assign` are visible to every holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Mapping, Optional

from lispy import LispValue
from lispy.errors import UnboundVariable
from lispy.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def get(self, name: Symbol | str) -> LispValue:
        """Look up `name` in this scope, then outward.

        Raises UnboundVariable if no scope in the chain binds it.
        """
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env.vars[key]
            env = env.outer
        raise UnboundVariable(key)

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` in this scope only, shadowing any outer binding."""
        self.vars[_key(name)] = value

    def find(self, name: Symbol | str) -> Environment:
        """Return the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        raise UnboundVariable(key)

    def assign(self, name: Symbol | str, value: LispValue) -> None:
        """Mutate the existing binding for `name`; never creates one."""
        self.find(name).set(name, value)

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[_key(k)] = v

    def define_native(self, name: str, fn: Callable[..., LispValue]) -> None:
        """Bind a host callable, wrapped as a Native, in this scope."""
        from lispy.types.procedure import Native
        self.set(name, fn if isinstance(fn, Native) else Native(fn, name))

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name: Symbol | str) -> bool:
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return True
            env = env.outer
        return False

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
