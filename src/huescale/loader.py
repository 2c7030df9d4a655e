from __future__ import annotations

"""Loading example palettes and learned patterns.

Palette files are JSON objects shaped like::

    {"name": "blue", "stops": [{"position": 100, "hex": "#E5EEFB"}, ...]}

Each stop may use ``"color"`` instead of ``"hex"`` with any notation
:func:`huescale.convert.to_oklch` accepts. Loading a pattern reads the
palette, extracts its pattern and smooths it.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol

from common import settings
from util.paths import resolve_path

from .convert import to_oklch
from .errors import HuescaleError, PatternLoadError
from .learning import extract_patterns
from .palette import AnalyzedPalette, PaletteStop
from .pattern import TransformationPattern
from .smoothing import smooth_pattern

logger = logging.getLogger(__name__)

#: Example palette shipped with the package.
DEFAULT_PATTERN_PATH = Path(__file__).parent / "patterns" / "default.json"


class PatternLoader(Protocol):
    """Anything that can turn a source identifier into a smoothed pattern."""

    def load(self, source: str) -> TransformationPattern: ...


class FilePatternLoader:
    """Load patterns from JSON palette files, caching per resolved path."""

    def __init__(self, *, cache: Optional[bool] = None) -> None:
        self._cache_enabled = settings.get().PATTERN_CACHE_ENABLED if cache is None else cache
        self._cache: Dict[Path, TransformationPattern] = {}
        self._lock = threading.Lock()

    def load(self, source: str) -> TransformationPattern:
        path = resolve_path(source)
        if self._cache_enabled:
            with self._lock:
                cached = self._cache.get(path)
            if cached is not None:
                return cached

        palette = load_palette_file(path)
        try:
            pattern = smooth_pattern(extract_patterns([palette], name=palette.name))
        except HuescaleError as exc:
            raise PatternLoadError(str(source), str(exc)) from exc
        logger.debug("loaded pattern '%s' from %s", pattern.name, path)

        if self._cache_enabled:
            with self._lock:
                self._cache[path] = pattern
        return pattern

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


class MemoryPatternLoader:
    """Look patterns up in a mapping; useful for tests and embedding."""

    def __init__(self, patterns: Mapping[str, TransformationPattern]) -> None:
        self._patterns = dict(patterns)

    def load(self, source: str) -> TransformationPattern:
        try:
            return self._patterns[source]
        except KeyError:
            raise PatternLoadError(source, "pattern not found") from None


def load_palette_file(path: str | Path) -> AnalyzedPalette:
    """Read a JSON palette file and convert its colors to OKLCH."""
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise PatternLoadError(source, f"cannot read file: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PatternLoadError(source, f"invalid JSON: {exc}") from exc
    return palette_from_dict(data, source=source)


def palette_from_dict(data: Any, *, source: str = "<memory>") -> AnalyzedPalette:
    """Build an :class:`AnalyzedPalette` from decoded JSON."""
    if not isinstance(data, dict):
        raise PatternLoadError(source, "palette must be a JSON object")
    name = data.get("name")
    stops = data.get("stops")
    if not isinstance(name, str) or not name:
        raise PatternLoadError(source, "palette needs a non-empty 'name'")
    if not isinstance(stops, list) or not stops:
        raise PatternLoadError(source, "palette needs a non-empty 'stops' list")

    parsed: list[PaletteStop] = []
    for i, entry in enumerate(stops):
        if not isinstance(entry, dict):
            raise PatternLoadError(source, f"stop #{i} must be an object")
        position = entry.get("position")
        color_text = entry.get("hex", entry.get("color"))
        if not isinstance(position, int) or isinstance(position, bool):
            raise PatternLoadError(source, f"stop #{i} needs an integer 'position'")
        if not isinstance(color_text, str):
            raise PatternLoadError(source, f"stop #{i} needs a 'hex' or 'color' string")
        try:
            color = to_oklch(color_text)
        except HuescaleError as exc:
            raise PatternLoadError(source, f"stop {position}: {exc}") from exc
        parsed.append(PaletteStop(position=position, color=color))
    return AnalyzedPalette(name=name, stops=tuple(parsed))


def resolve_pattern_source(source: Optional[str] = None) -> str:
    """Explicit source, else ``HUESCALE_PATTERN_SOURCE``, else the bundled default."""
    if source:
        return source
    configured = settings.get().PATTERN_SOURCE
    if configured:
        return configured
    return str(DEFAULT_PATTERN_PATH)


_default_loader: Optional[FilePatternLoader] = None


def default_loader() -> FilePatternLoader:
    """Shared file loader (its cache lives for the process)."""
    global _default_loader
    if _default_loader is None:
        _default_loader = FilePatternLoader()
    return _default_loader


def load_pattern(source: Optional[str] = None, loader: Optional[PatternLoader] = None) -> TransformationPattern:
    """Load a smoothed pattern from ``source`` using ``loader`` (file loader by default)."""
    resolved = resolve_pattern_source(source)
    return (loader if loader is not None else default_loader()).load(resolved)


__all__ = [
    "DEFAULT_PATTERN_PATH",
    "PatternLoader",
    "FilePatternLoader",
    "MemoryPatternLoader",
    "load_palette_file",
    "palette_from_dict",
    "resolve_pattern_source",
    "default_loader",
    "load_pattern",
]
