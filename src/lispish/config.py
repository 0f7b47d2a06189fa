"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

_DEFAULT_HISTORY = Path.home() / ".lispish_history"
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_history_path() -> Path:
    raw = os.environ.get("LISPISH_HISTORY")
    if not raw or not raw.strip():
        return _DEFAULT_HISTORY
    return Path(raw.strip()).expanduser()


def max_safe_depth() -> int:
    """Deepest nesting that reading and evaluating can recurse through."""
    # evaluate + eval_sexpr use two frames per level, read one
    return sys.getrecursionlimit() // 4


def get_max_depth() -> int:
    """Deepest s-expression nesting accepted by the parser."""
    return min(int_from_env("LISPISH_MAX_DEPTH", _DEFAULT_MAX_DEPTH), max_safe_depth())


def get_log_level() -> int:
    raw = os.environ.get("LISPISH_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
