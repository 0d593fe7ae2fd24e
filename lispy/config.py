from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_PATHS = [_LISPY_DIR / 'prelude' / 'std.lsp']
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = 'lispy> '


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Prelude files to load, expanding directories into their *.lsp files."""
    files: List[Path] = []
    for p in paths_from_env('LISPY_PRELUDE_PATH', _DEFAULT_PRELUDE_PATHS):
        if p.is_dir():
            files.extend(sorted(p.glob('*.lsp')))
        else:
            files.append(p)
    return files


def get_log_level() -> str:
    return os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT', _DEFAULT_PROMPT)
