"""
Where: `common` package.
What: ambient helpers shared by huescale (env parsing, settings, logging).
Why: keep configuration plumbing out of the color engine.
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
