from __future__ import annotations

"""Container types for example and generated palettes.

:class:`AnalyzedPalette` is an input (an example palette converted to
OKLCH, possibly with gaps); :class:`Palette` is a generated result holding
exactly one color for every stop position.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .color_types import OKLCHColor


@dataclass(frozen=True)
class PaletteStop:
    """A color at one stop position."""

    position: int
    color: OKLCHColor


@dataclass(frozen=True)
class AnalyzedPalette:
    """Example palette used for pattern learning.

    Attributes
    ----------
    name:
        Human-readable palette name.
    stops:
        One or more stops; ideally all 10, in any order.
    """

    name: str
    stops: Tuple[PaletteStop, ...]

    def color_at(self, position: int) -> Optional[OKLCHColor]:
        """Return the color at ``position`` or None if the palette lacks it."""
        for stop in self.stops:
            if stop.position == position:
                return stop.color
        return None


@dataclass(frozen=True)
class Palette:
    """Generated palette: 10 stops sorted by position, no duplicates."""

    name: str
    stops: Tuple[PaletteStop, ...]

    def color_at(self, position: int) -> OKLCHColor:
        for stop in self.stops:
            if stop.position == position:
                return stop.color
        raise KeyError(position)


__all__ = ["PaletteStop", "AnalyzedPalette", "Palette"]
