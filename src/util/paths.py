"""
Where: `util.paths`.
What: small path helpers for reading inputs and writing exports.
Why: callers get expanded, absolute paths and export directories that exist,
safe under concurrent calls.
"""

from __future__ import annotations

from pathlib import Path


def resolve_path(path: str | Path) -> Path:
    """Expand ``~`` and return an absolute path (no existence check)."""
    return Path(path).expanduser().resolve()


def ensure_parent_dir(path: str | Path) -> Path:
    """Create the parent directory of ``path`` and return the resolved path.

    - Existing directories are left as they are.
    - `exist_ok=True` keeps concurrent calls safe.
    """
    out = resolve_path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    return out


__all__ = ["resolve_path", "ensure_parent_dir"]
