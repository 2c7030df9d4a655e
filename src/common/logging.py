"""
Where: `common.logging`.
What: one-time logging setup for huescale entry points.
Why: library modules only call ``logging.getLogger(__name__)``; the CLI decides
handlers and levels, and keeps matplotlib's font/backend chatter out of debug runs.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Third-party loggers that flood DEBUG output.
_NOISY_LOGGERS = ("matplotlib", "PIL")


def resolve_level(level: Optional[int | str]) -> int:
    """Turn a level name or number into a logging level (unknown -> INFO)."""
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: Optional[int | str] = None) -> int:
    """Apply a minimal logging configuration once and return the level used.

    - ``level`` defaults to ``HUESCALE_LOG_LEVEL``
    - No-op for handlers if the root logger already has some
    - The ``huescale`` logger always follows ``level``
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("huescale").setLevel(lvl)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))
    return lvl


__all__ = ["LOG_FORMAT", "resolve_level", "setup_default_logging"]
