"""Shared fixtures.

- settings reset per test (HUESCALE_* env vars cleared)
- the bundled example palette and its smoothed pattern
- small builders for hand-made palettes
"""

from __future__ import annotations

import os
from typing import Callable, Iterator, Mapping

import pytest

from common import settings
from huescale.color_types import OKLCHColor
from huescale.convert import to_oklch
from huescale.learning import extract_patterns
from huescale.loader import DEFAULT_PATTERN_PATH, load_palette_file
from huescale.palette import AnalyzedPalette, PaletteStop
from huescale.pattern import TransformationPattern
from huescale.smoothing import smooth_pattern


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings."""
    for key in list(os.environ):
        if key.startswith("HUESCALE_"):
            monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture(scope="session")
def blue_palette() -> AnalyzedPalette:
    return load_palette_file(DEFAULT_PATTERN_PATH)


@pytest.fixture(scope="session")
def blue_pattern(blue_palette: AnalyzedPalette) -> TransformationPattern:
    return smooth_pattern(extract_patterns([blue_palette], name=blue_palette.name))


@pytest.fixture()
def make_palette() -> Callable[[str, Mapping[int, str]], AnalyzedPalette]:
    """Build an AnalyzedPalette from ``{stop: color string}``."""

    def _make(name: str, colors: Mapping[int, str]) -> AnalyzedPalette:
        return AnalyzedPalette(
            name=name,
            stops=tuple(PaletteStop(position=p, color=to_oklch(c)) for p, c in colors.items()),
        )

    return _make


@pytest.fixture()
def blue_500() -> OKLCHColor:
    return to_oklch("#2D72D2")
