"""
Where: `util.color`.
What: parse CSS color strings (hex, rgb(), hsl(), oklch(), oklab(), named
colors) into a small tagged tuple of coordinates.
Why: the engine and the pattern loader accept the same notations with the
same error messages; conversions to OKLCH happen in `huescale.convert`.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Literal

from matplotlib.colors import CSS4_COLORS

ColorSpaceTag = Literal["srgb", "oklch", "oklab"]

# CSS Color 4: 100% chroma / a / b in OKLCH/OKLab corresponds to 0.4.
_OK_PERCENT_REFERENCE = 0.4

_FUNCTION_RE = re.compile(r"^([a-z]+)\(\s*(.*?)\s*\)$", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg|rad|grad|turn)?$", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedColor:
    """Coordinates of a parsed color string.

    ``space`` tells how to read ``coords``: ``srgb`` is (r, g, b) in [0, 1],
    ``oklch`` is (L, C, h) with L in [0, 1], ``oklab`` is (L, a, b).
    """

    space: ColorSpaceTag
    coords: tuple[float, float, float]
    alpha: float = 1.0


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Return RGBA (0–1) from a hex string.

    Accepted: "#RGB", "#RGBA", "#RRGGBB", "#RRGGBBAA", the same with a "0x"
    prefix or without any prefix. Case-insensitive.
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) in (3, 4):
        t = "".join(ch * 2 for ch in t)
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RGB, RGBA, RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _parse_token(token: str) -> tuple[float, str]:
    """Split a CSS numeric token into (value, unit); ``none`` reads as 0."""
    t = token.strip()
    if t.lower() == "none":
        return 0.0, ""
    m = _NUMBER_RE.match(t)
    if m is None:
        raise ValueError(f"invalid numeric component: '{token}'")
    return float(m.group(1)), (m.group(2) or "").lower()


def _parse_angle(token: str) -> float:
    value, unit = _parse_token(token)
    if unit in ("", "deg"):
        return value
    if unit == "rad":
        return math.degrees(value)
    if unit == "grad":
        return value * 0.9
    if unit == "turn":
        return value * 360.0
    raise ValueError(f"invalid hue component: '{token}'")


def _parse_alpha(token: str | None) -> float:
    if token is None:
        return 1.0
    value, unit = _parse_token(token)
    if unit == "%":
        value /= 100.0
    elif unit:
        raise ValueError(f"invalid alpha component: '{token}'")
    return _clamp01(value)


def _parse_fraction(token: str, *, scale: float) -> float:
    """Read a number, or a percentage where 100% equals ``scale``."""
    value, unit = _parse_token(token)
    if unit == "%":
        return value / 100.0 * scale
    if unit:
        raise ValueError(f"unexpected unit in '{token}'")
    return value


def _parse_percentage(token: str) -> float:
    """Read an hsl() saturation/lightness; bare numbers count as percent."""
    value, unit = _parse_token(token)
    if unit not in ("", "%"):
        raise ValueError(f"invalid percentage component: '{token}'")
    return _clamp01(value / 100.0)


def _split_arguments(body: str) -> tuple[list[str], str | None]:
    """Split function arguments in legacy comma or modern space/slash syntax."""
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if len(parts) == 4:
            return parts[:3], parts[3]
        return parts, None
    alpha: str | None = None
    if "/" in body:
        body, alpha = body.split("/", 1)
        alpha = alpha.strip()
    return body.split(), alpha


def _parse_function(name: str, body: str, original: str) -> ParsedColor:
    args, alpha_token = _split_arguments(body)
    if len(args) != 3:
        raise ValueError(f"expected 3 components in '{original}'")
    alpha = _parse_alpha(alpha_token)

    if name in ("rgb", "rgba"):
        channels = []
        for token in args:
            value, unit = _parse_token(token)
            if unit == "%":
                channels.append(_clamp01(value / 100.0))
            elif unit:
                raise ValueError(f"invalid rgb component: '{token}'")
            else:
                channels.append(_clamp01(value / 255.0))
        return ParsedColor("srgb", (channels[0], channels[1], channels[2]), alpha)

    if name in ("hsl", "hsla"):
        h = _parse_angle(args[0]) % 360.0
        s = _parse_percentage(args[1])
        lum = _parse_percentage(args[2])
        r, g, b = colorsys.hls_to_rgb(h / 360.0, lum, s)
        return ParsedColor("srgb", (r, g, b), alpha)

    if name == "oklch":
        lightness = _clamp01(_parse_fraction(args[0], scale=1.0))
        chroma = max(0.0, _parse_fraction(args[1], scale=_OK_PERCENT_REFERENCE))
        hue = _parse_angle(args[2])
        return ParsedColor("oklch", (lightness, chroma, hue), alpha)

    if name == "oklab":
        lightness = _clamp01(_parse_fraction(args[0], scale=1.0))
        a = _parse_fraction(args[1], scale=_OK_PERCENT_REFERENCE)
        b = _parse_fraction(args[2], scale=_OK_PERCENT_REFERENCE)
        return ParsedColor("oklab", (lightness, a, b), alpha)

    raise ValueError(f"unsupported color function: '{name}'")


def parse_css_color(s: str) -> ParsedColor:
    """Parse a CSS color string.

    Raises ``ValueError`` with a readable message when the string is not a
    color in any supported notation.
    """
    if not isinstance(s, str):
        raise ValueError(f"unsupported color type: {type(s)!r}")
    t = s.strip()
    if not t:
        raise ValueError("empty color string")

    lowered = t.lower()
    if lowered == "transparent":
        return ParsedColor("srgb", (0.0, 0.0, 0.0), 0.0)
    named = CSS4_COLORS.get(lowered)
    if named is not None:
        r, g, b, a = parse_hex_color_str(named)
        return ParsedColor("srgb", (r, g, b), a)

    m = _FUNCTION_RE.match(t)
    if m is not None:
        return _parse_function(m.group(1).lower(), m.group(2), s)

    try:
        r, g, b, a = parse_hex_color_str(t)
    except ValueError as e:
        raise ValueError(f"unrecognized color: '{s}'") from e
    return ParsedColor("srgb", (r, g, b), a)


__all__ = [
    "ParsedColor",
    "parse_hex_color_str",
    "parse_css_color",
]
