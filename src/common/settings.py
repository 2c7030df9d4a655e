"""
Where: `common.settings`
What: typed snapshot of the huescale environment variables, loaded at import.
Why: defaults and types live in one dataclass, and tests can reload them
after patching the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

_OUTPUT_FORMATS = ("hex", "rgb", "oklch", "oklab")


@dataclass
class _Settings:
    # Pattern source (None -> bundled default palette)
    PATTERN_SOURCE: str | None = None
    PATTERN_CACHE_ENABLED: bool = True

    # Output defaults
    DEFAULT_OUTPUT_FORMAT: str = "hex"
    DEFAULT_PALETTE_NAME: str = "generated"
    DEFAULT_BATCH_NAME: str = "batch"

    # Batch fan-out
    MAX_CONCURRENCY: int = 3

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """Re-read every setting from the environment.

    - Unknown output formats fall back to ``hex``.
    - ``MAX_CONCURRENCY`` is raised to at least 1.
    """
    _settings.PATTERN_SOURCE = env_str("HUESCALE_PATTERN_SOURCE")
    _settings.PATTERN_CACHE_ENABLED = env_bool("HUESCALE_PATTERN_CACHE", True)

    fmt = (env_str("HUESCALE_DEFAULT_OUTPUT_FORMAT", "hex") or "hex").lower()
    _settings.DEFAULT_OUTPUT_FORMAT = fmt if fmt in _OUTPUT_FORMATS else "hex"
    _settings.DEFAULT_PALETTE_NAME = env_str("HUESCALE_DEFAULT_PALETTE_NAME", "generated") or "generated"
    _settings.DEFAULT_BATCH_NAME = env_str("HUESCALE_DEFAULT_BATCH_NAME", "batch") or "batch"

    _settings.MAX_CONCURRENCY = env_int("HUESCALE_MAX_CONCURRENCY", 3, min_value=1) or 1

    _settings.LOG_LEVEL = (env_str("HUESCALE_LOG_LEVEL", "INFO") or "INFO").upper()


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
