from __future__ import annotations
import logging
from typing import Protocol

from lispy.config import get_prelude_paths

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate every configured prelude file, in order.

    Raises FileNotFoundError if a configured file does not exist.
    """
    for path in get_prelude_paths():
        if not path.is_file():
            raise FileNotFoundError(f"Cannot find prelude '{path}' (LISPY_PRELUDE_PATH)")
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
