from __future__ import annotations

import logging
from typing import Callable, Literal, Mapping, TextIO

from lispy import LispValue
from lispy.reader.parser import parse_all
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_string
from lispy.types.environment import Environment
from lispy.types.nil import Undefined
from lispy.builtin.env_builtin import register, make_callback

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: owns the root scope, the registered natives and
    the output stream used by `print`. Independent sessions never share state.
    """

    def __init__(
        self,
        natives: Mapping[str, Callable[..., LispValue]] | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
        output: TextIO | None = None,
    ):
        self.natives: dict[str, Callable[..., LispValue]] = dict(natives or {})
        self.prelude = prelude
        self.output = output
        self.env: Environment = Environment()
        self._start()
        logger.debug("created session with %d host natives", len(self.natives))

    def _start(self) -> None:
        self.env = Environment()
        register(self.env, self.output)
        for name, fn in self.natives.items():
            self.env.define_native(name, fn)

        if self.prelude is None:
            pass  # explicit: no prelude
        elif self.prelude == 'auto':
            from lispy.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError as ex:
                # Be permissive: no prelude found -> proceed
                logger.debug("prelude skipped: %s", ex)
        else:
            self.eval_prelude(self.prelude)

    def define_native(self, name: str, fn: Callable[..., LispValue]) -> None:
        """Register a host callable; it survives `reset`."""
        self.natives[name] = fn
        self.env.define_native(name, fn)

    def reset(self) -> None:
        """Discard every user binding and start again from a fresh root scope."""
        logger.debug("resetting session")
        self._start()

    def eval_prelude(self, code: str) -> None:
        for expr in parse_all(code):
            evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value."""
        result: LispValue = Undefined
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def eval_to_string(self, code: str) -> str:
        return to_string(self.eval(code))

    def make_callback(self, proc: LispValue) -> Callable[[], LispValue]:
        """Zero-argument host callable that invokes `proc` synchronously."""
        return make_callback(proc)
