from __future__ import annotations

"""Color conversion engine for OKLCH, OKLab and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB (D65) and OKLCH via OKLab.
sRGB values returned here are NOT clipped, so callers can tell whether a
color lies inside the gamut.
"""

import math
from typing import Protocol, Tuple


OKLCH = Tuple[float, float, float]
OKLAB = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

#: Chroma below this value (after conversion from sRGB) is treated as gray.
ACHROMATIC_CHROMA = 1e-6


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def srgb_to_oklab(self, r: float, g: float, b: float) -> OKLAB: ...

    def oklab_to_srgb(self, L: float, a: float, b: float) -> SRGB: ...

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH: ...

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360); ``nan`` is passed through."""
        if math.isnan(h):
            return h
        wrapped = h % 360.0
        # tiny negative inputs round up to exactly 360.0
        return 0.0 if wrapped >= 360.0 else wrapped

    def srgb_to_oklab(self, r: float, g: float, b: float) -> OKLAB:
        """Convert gamma-encoded sRGB in [0, 1] to OKLab."""
        rl, gl, bl = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

        # Linear RGB to LMS
        l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
        m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
        s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

        l_ = math.copysign(abs(l) ** (1 / 3), l)
        m_ = math.copysign(abs(m) ** (1 / 3), m)
        s_ = math.copysign(abs(s) ** (1 / 3), s)

        L_ok = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
        a_ok = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
        b_ok = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
        return (L_ok, a_ok, b_ok)

    def oklab_to_srgb(self, L: float, a: float, b: float) -> SRGB:
        """Convert OKLab to gamma-encoded sRGB (unclipped)."""
        l_ = L + 0.3963377774 * a + 0.2158037573 * b
        m_ = L - 0.1055613458 * a - 0.0638541728 * b
        s_ = L - 0.0894841775 * a - 1.2914855480 * b

        l = l_**3
        m = m_**3
        s = s_**3

        rl = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
        gl = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
        bl = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

        return (_linear_to_srgb(rl), _linear_to_srgb(gl), _linear_to_srgb(bl))

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH:
        """Convert sRGB in [0, 1] to OKLCH with L in [0, 1].

        Near-gray results get chroma 0 and hue 0.
        """
        L_ok, a_ok, b_ok = self.srgb_to_oklab(r, g, b)
        return oklab_to_oklch(L_ok, a_ok, b_ok, self)

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH (L in [0, 1]) to unclipped sRGB."""
        L_ok, a, b = oklch_to_oklab(L, C, h, self)
        return self.oklab_to_srgb(L_ok, a, b)


def oklch_to_oklab(L: float, C: float, h: float, engine: ColorEngine | None = None) -> OKLAB:
    """Polar to rectangular; an undefined (nan) hue yields a = b = 0."""
    C = max(0.0, C)
    if C == 0.0 or math.isnan(h):
        return (L, 0.0, 0.0)
    eng = engine if engine is not None else DEFAULT_ENGINE
    h_rad = math.radians(eng.normalize_hue(h))
    return (L, C * math.cos(h_rad), C * math.sin(h_rad))


def oklab_to_oklch(L: float, a: float, b: float, engine: ColorEngine | None = None) -> OKLCH:
    """Rectangular to polar; chroma below :data:`ACHROMATIC_CHROMA` snaps to 0."""
    C = math.sqrt(a * a + b * b)
    if C < ACHROMATIC_CHROMA:
        return (L, 0.0, 0.0)
    eng = engine if engine is not None else DEFAULT_ENGINE
    return (L, C, eng.normalize_hue(math.degrees(math.atan2(b, a))))


def _srgb_to_linear(c: float) -> float:
    if abs(c) <= 0.04045:
        return c / 12.92
    return math.copysign(((abs(c) + 0.055) / 1.055) ** 2.4, c)


def _linear_to_srgb(c: float) -> float:
    if abs(c) <= 0.0031308:
        return 12.92 * c
    return math.copysign(1.055 * (abs(c) ** (1 / 2.4)) - 0.055, c)


DEFAULT_ENGINE = DefaultColorEngine()
