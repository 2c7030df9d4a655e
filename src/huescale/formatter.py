from __future__ import annotations

"""Rendering OKLCH colors as strings in CSS-like notations.

This module exposes the :class:`ColorFormat` enum, label/enum pairs for
UIs, and :func:`format_color` / :func:`format_palette_stops`.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from .color_types import OKLCHColor
from .convert import oklch_to_hex, oklch_to_oklab_color, oklch_to_rgb
from .palette import PaletteStop

LIGHTNESS_PRECISION = 2
CHROMA_PRECISION = 3
HUE_PRECISION = 1
OKLAB_AXIS_PRECISION = 3


class ColorFormat(Enum):
    """Supported output notations."""

    HEX = "hex"
    RGB = "rgb"
    OKLCH = "oklch"
    OKLAB = "oklab"

    @classmethod
    def from_value(cls, value: "ColorFormat | str") -> "ColorFormat":
        if isinstance(value, ColorFormat):
            return value
        for fmt in cls:
            if fmt.value == str(value).strip().lower():
                return fmt
        raise ValueError(f"Unknown color format: {value}")


@dataclass(frozen=True)
class FormattedStop:
    """A palette stop together with its rendered value."""

    position: int
    color: OKLCHColor
    value: str


def format_color(color: OKLCHColor, fmt: ColorFormat | str) -> str:
    """Render ``color`` in the given notation.

    - hex: ``#rrggbb`` (``#rrggbbaa`` with transparency)
    - rgb: ``rgb(r, g, b)`` / ``rgb(r, g, b, a)``
    - oklch: ``oklch(L% C H)`` / ``oklch(L% C H / a)``
    - oklab: ``oklab(L% a b)`` / ``oklab(L% a b / a)``
    """
    out_fmt = ColorFormat.from_value(fmt)
    if out_fmt == ColorFormat.HEX:
        return oklch_to_hex(color)
    if out_fmt == ColorFormat.RGB:
        rgb = oklch_to_rgb(color)
        return f"rgb({rgb.r}, {rgb.g}, {rgb.b}{_alpha_suffix(rgb.alpha, ', ')})"
    if out_fmt == ColorFormat.OKLCH:
        hue = "none" if math.isnan(color.h) else f"{color.h:.{HUE_PRECISION}f}"
        return (
            f"oklch({_lightness(color.l)} {color.c:.{CHROMA_PRECISION}f} {hue}"
            f"{_alpha_suffix(color.alpha, ' / ')})"
        )
    if out_fmt == ColorFormat.OKLAB:
        lab = oklch_to_oklab_color(color)
        return (
            f"oklab({_lightness(lab.l)} {lab.a:.{OKLAB_AXIS_PRECISION}f} {lab.b:.{OKLAB_AXIS_PRECISION}f}"
            f"{_alpha_suffix(lab.alpha, ' / ')})"
        )
    raise ValueError(f"Unsupported color format: {fmt}")


def format_palette_stops(stops: Iterable[PaletteStop], fmt: ColorFormat | str) -> List[FormattedStop]:
    """Render every stop, keeping the input order."""
    out_fmt = ColorFormat.from_value(fmt)
    return [FormattedStop(s.position, s.color, format_color(s.color, out_fmt)) for s in stops]


def _lightness(l: float) -> str:
    return f"{l * 100:.{LIGHTNESS_PRECISION}f}%"


def _alpha_suffix(alpha: float, separator: str) -> str:
    if alpha == 1.0:
        return ""
    return f"{separator}{alpha:g}"


__all__ = [
    "ColorFormat",
    "FormattedStop",
    "format_color",
    "format_palette_stops",
]
