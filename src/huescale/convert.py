from __future__ import annotations

"""Parsing and conversions between color strings, OKLCH, OKLab and RGB.

All public functions take and return the value objects from
:mod:`huescale.color_types`. Parsing failures raise
:class:`~huescale.errors.ColorParseError`; numeric failures (non-finite
values) raise :class:`~huescale.errors.ColorConversionError`.
"""

import math

from util.color import parse_css_color

from .color_types import OKLABColor, OKLCHColor, RGBColor
from .engine import DEFAULT_ENGINE, oklab_to_oklch, oklch_to_oklab
from .errors import ColorConversionError, ColorParseError


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp ``x`` into [lo, hi]."""
    return max(lo, min(hi, x))


def normalize_hue(h: float) -> float:
    """Wrap a hue into [0, 360). ``nan`` (undefined hue) is returned as is."""
    return DEFAULT_ENGINE.normalize_hue(h)


def hue_difference(h1: float, h2: float) -> float:
    """Signed shortest rotation from ``h1`` to ``h2`` in [-180, 180)."""
    return (h2 - h1 + 180.0) % 360.0 - 180.0


def is_achromatic(color: OKLCHColor) -> bool:
    """True for grays: zero chroma or an undefined hue."""
    return color.c == 0.0 or math.isnan(color.h)


def to_oklch(text: str) -> OKLCHColor:
    """Parse a color string (hex, rgb(), hsl(), oklch(), oklab(), named)."""
    try:
        parsed = parse_css_color(text)
    except ValueError as exc:
        raise ColorParseError(str(text), str(exc)) from exc

    if parsed.space == "oklch":
        L, C, h = parsed.coords
        color = OKLCHColor(L, C, normalize_hue(h) if C > 0.0 else 0.0, parsed.alpha)
    elif parsed.space == "oklab":
        color = oklab_to_oklch_color(OKLABColor(*parsed.coords, alpha=parsed.alpha))
    else:
        r, g, b = parsed.coords
        L, C, h = DEFAULT_ENGINE.srgb_to_oklch(r, g, b)
        color = OKLCHColor(L, C, h, parsed.alpha)

    _require_finite(color, parsed.space, "oklch")
    return color


def oklch_to_oklab_color(color: OKLCHColor) -> OKLABColor:
    """Convert OKLCH to OKLab."""
    _require_finite(color, "oklch", "oklab")
    L, a, b = oklch_to_oklab(color.l, color.c, color.h)
    return OKLABColor(L, a, b, color.alpha)


def oklab_to_oklch_color(color: OKLABColor) -> OKLCHColor:
    """Convert OKLab to OKLCH (grays get chroma 0, hue 0)."""
    if not all(math.isfinite(v) for v in (color.l, color.a, color.b, color.alpha)):
        raise ColorConversionError("oklab", "oklch", color, "non-finite component")
    L, C, h = oklab_to_oklch(color.l, color.a, color.b)
    return OKLCHColor(L, C, h, color.alpha)


def oklch_to_rgb(color: OKLCHColor) -> RGBColor:
    """Convert OKLCH to 8-bit sRGB, clipping channels into 0–255."""
    _require_finite(color, "oklch", "rgb")
    r, g, b = DEFAULT_ENGINE.oklch_to_srgb(color.l, color.c, color.h)
    return RGBColor(_to_u8(r), _to_u8(g), _to_u8(b), color.alpha)


def rgb_to_oklch(color: RGBColor) -> OKLCHColor:
    """Convert 8-bit sRGB to OKLCH."""
    channels = (color.r, color.g, color.b)
    if not all(0 <= v <= 255 for v in channels):
        raise ColorConversionError("rgb", "oklch", color, "channel outside 0-255")
    L, C, h = DEFAULT_ENGINE.srgb_to_oklch(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    return OKLCHColor(L, C, h, color.alpha)


def oklch_to_hex(color: OKLCHColor) -> str:
    """Return ``#rrggbb`` (or ``#rrggbbaa`` when alpha < 1), lowercase."""
    rgb = oklch_to_rgb(color)
    hex_value = f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"
    if color.alpha < 1.0:
        hex_value += f"{int(round(clamp(color.alpha, 0.0, 1.0) * 255)):02x}"
    return hex_value


def _to_u8(x: float) -> int:
    return int(round(clamp(x, 0.0, 1.0) * 255))


def _require_finite(color: OKLCHColor, from_space: str, to_space: str) -> None:
    # hue may legitimately be nan (achromatic)
    if not all(math.isfinite(v) for v in (color.l, color.c, color.alpha)):
        raise ColorConversionError(from_space, to_space, color, "non-finite component")


__all__ = [
    "clamp",
    "normalize_hue",
    "hue_difference",
    "is_achromatic",
    "to_oklch",
    "oklch_to_oklab_color",
    "oklab_to_oklch_color",
    "oklch_to_rgb",
    "rgb_to_oklch",
    "oklch_to_hex",
]
