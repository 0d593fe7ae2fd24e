"""
Read-Eval-Print Loop for lispy.

Each input is a block of text. Lines containing ';' are treated as comment
lines and dropped; several remaining lines are wrapped into one
`(begin ...)` form. Errors are rendered as `Error: <message>` and the loop
continues with the next input.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from lispy.config import get_log_level, get_prompt
from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.printer import to_string

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"(exit)", "(quit)"}
CONTINUATION_PROMPT = "... "


def open_parens(code: str) -> int:
    """Count unclosed parentheses outside string literals."""
    depth = 0
    in_string = False
    escape_next = False
    for char in code:
        if escape_next:
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == '"':
            in_string = not in_string
        elif not in_string and char == "(":
            depth += 1
        elif not in_string and char == ")":
            depth -= 1
    return depth


class Repl:
    def __init__(self, interpreter: Interpreter | None = None, fresh_session: bool = False):
        self.interp = interpreter if interpreter is not None else Interpreter()
        # Reset the session before every input, like a page that re-runs its editor contents
        self.fresh_session = fresh_session

    @staticmethod
    def prepare(text: str) -> str:
        code = text.strip()
        lines = [line.strip() for line in code.split("\n") if ";" not in line and line.strip()]
        if len(lines) > 1:
            return f"(begin {' '.join(lines)})"
        return lines[0] if lines else ""

    def evaluate_input(self, text: str) -> tuple[bool, str]:
        """Evaluate one block of input; returns (ok, rendered result or error)."""
        if self.fresh_session:
            self.interp.reset()
        code = self.prepare(text)
        if not code:
            return True, ""
        try:
            result = self.interp.eval(code)
        except LispyError as ex:
            logger.debug("evaluation failed for %r", code, exc_info=True)
            return False, f"Error: {ex}"
        except RecursionError:
            logger.debug("recursion limit hit for %r", code)
            return False, "Error: maximum recursion depth exceeded"
        return True, to_string(result)

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None, prompt: str | None = None) -> None:
        """Read blocks until EOF or an exit command.

        A block keeps reading lines until its parentheses balance; a blank
        line ends an unbalanced block early.
        """
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout
        prompt = get_prompt() if prompt is None else prompt
        block: list[str] = []
        while True:
            stdout.write(CONTINUATION_PROMPT if block else prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                if block:
                    self._write_result(stdout, "".join(block))
                stdout.write("\n")
                break
            if not block and line.strip() in EXIT_COMMANDS:
                break
            if line.strip() or block:
                block.append(line)
            if block and (not line.strip() or open_parens(self.prepare("".join(block))) <= 0):
                self._write_result(stdout, "".join(block))
                block = []

    def _write_result(self, stdout: TextIO, text: str) -> None:
        _, output = self.evaluate_input(text)
        if output:
            stdout.write(output + "\n")


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    Repl(Interpreter(output=sys.stdout)).run()


if __name__ == "__main__":
    main()
