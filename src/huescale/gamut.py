from __future__ import annotations

"""sRGB gamut handling for OKLCH colors.

:func:`clamp_to_gamut` brings a color into the sRGB gamut by shrinking its
chroma while lightness, hue and alpha stay fixed. It always terminates
and never raises.
"""

import logging
import math
from typing import Optional

from .color_types import OKLCHColor
from .engine import DEFAULT_ENGINE, ColorEngine

logger = logging.getLogger(__name__)

#: Slack allowed on each sRGB channel before a color counts as out of gamut.
GAMUT_TOLERANCE = 1e-6

#: Lightness this close to 0 or 1 has no room for chroma at all.
EXTREME_LIGHTNESS = 1e-4

MAX_CLAMP_ITERATIONS = 20


def is_displayable(color: OKLCHColor, engine: Optional[ColorEngine] = None) -> bool:
    """Return True if the color converts to sRGB without clipping."""
    eng = engine if engine is not None else DEFAULT_ENGINE
    if not (math.isfinite(color.l) and math.isfinite(color.c)):
        return False
    r, g, b = eng.oklch_to_srgb(color.l, color.c, color.h)
    return _in_gamut(r, g, b)


def clamp_to_gamut(
    color: OKLCHColor,
    engine: Optional[ColorEngine] = None,
    max_iter: int = MAX_CLAMP_ITERATIONS,
) -> OKLCHColor:
    """Return a displayable color with the same lightness, hue and alpha.

    Chroma is found by binary search between 0 (a gray, always displayable
    once lightness is in [0, 1]) and the input chroma.
    """
    eng = engine if engine is not None else DEFAULT_ENGINE
    L = max(0.0, min(1.0, color.l)) if math.isfinite(color.l) else 0.0
    C = max(0.0, color.c) if math.isfinite(color.c) else 0.0
    h = eng.normalize_hue(color.h)
    candidate = OKLCHColor(L, C, h, color.alpha)

    if is_displayable(candidate, eng):
        return candidate
    if L <= EXTREME_LIGHTNESS or L >= 1.0 - EXTREME_LIGHTNESS:
        return OKLCHColor(L, 0.0, h, color.alpha)

    lo, hi = 0.0, C
    for _ in range(max_iter):
        mid = (lo + hi) / 2.0
        if is_displayable(OKLCHColor(L, mid, h, color.alpha), eng):
            lo = mid
        else:
            hi = mid
    logger.debug("clamped chroma %.4f -> %.4f at L=%.4f h=%.1f", C, lo, L, h)
    return OKLCHColor(L, lo, h, color.alpha)


def _in_gamut(r: float, g: float, b: float) -> bool:
    lo = -GAMUT_TOLERANCE
    hi = 1.0 + GAMUT_TOLERANCE
    return lo <= r <= hi and lo <= g <= hi and lo <= b <= hi


__all__ = [
    "GAMUT_TOLERANCE",
    "MAX_CLAMP_ITERATIONS",
    "is_displayable",
    "clamp_to_gamut",
]
