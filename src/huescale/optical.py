from __future__ import annotations

"""Optical appearance transfer between colors.

Takes the lightness and chroma (the "look": brightness and colorfulness)
of a reference color and applies them to the hue of a target color. The
result is gamut-clamped; clamping only ever lowers chroma.
"""

import logging
from typing import Optional

from .color_types import OKLCHColor
from .convert import is_achromatic, normalize_hue
from .engine import ColorEngine
from .gamut import clamp_to_gamut, is_displayable

logger = logging.getLogger(__name__)

#: Below this reference lightness the transfer is unreliable (near black).
MIN_VIABLE_LIGHTNESS = 0.05

#: Above this reference lightness the transfer is unreliable (near white).
MAX_VIABLE_LIGHTNESS = 0.95

#: Largest acceptable fraction of reference chroma lost to gamut clamping.
MAX_CHROMA_LOSS_RATIO = 0.5


def apply_optical_appearance(
    reference: OKLCHColor,
    target: OKLCHColor,
    engine: Optional[ColorEngine] = None,
) -> OKLCHColor:
    """Return the reference's lightness/chroma/alpha on the target's hue.

    - Gray reference: result is gray (chroma 0) and keeps the target hue,
      or hue 0 when the target is gray too.
    - Gray target: there is no hue to keep, so the reference hue is used.

    Blue ``oklch(57% 0.15 259)`` as reference and green
    ``oklch(62% 0.18 140)`` as target give ``oklch(57% 0.15 140)``.
    """
    if is_achromatic(reference):
        hue = 0.0 if is_achromatic(target) else normalize_hue(target.h)
        return OKLCHColor(reference.l, 0.0, hue, reference.alpha)

    if is_achromatic(target):
        candidate = OKLCHColor(reference.l, reference.c, normalize_hue(reference.h), reference.alpha)
    else:
        candidate = OKLCHColor(reference.l, reference.c, normalize_hue(target.h), reference.alpha)

    if is_displayable(candidate, engine):
        return candidate
    clamped = clamp_to_gamut(candidate, engine)
    logger.debug("optical transfer clamped chroma %.4f -> %.4f", candidate.c, clamped.c)
    return clamped


def is_transformation_viable(
    reference: OKLCHColor,
    target: OKLCHColor,
    engine: Optional[ColorEngine] = None,
) -> bool:
    """Heuristic check that the transfer will not lose too much.

    False when the reference is near black or near white, or when gamut
    clamping would remove at least half of the reference chroma.
    """
    if not (MIN_VIABLE_LIGHTNESS <= reference.l <= MAX_VIABLE_LIGHTNESS):
        return False
    if is_achromatic(reference):
        # a gray result is always displayable
        return True

    hue = reference.h if is_achromatic(target) else target.h
    candidate = OKLCHColor(reference.l, reference.c, normalize_hue(hue), reference.alpha)
    if is_displayable(candidate, engine):
        return True
    clamped = clamp_to_gamut(candidate, engine)
    loss = (reference.c - clamped.c) / reference.c
    return loss < MAX_CHROMA_LOSS_RATIO


__all__ = [
    "MIN_VIABLE_LIGHTNESS",
    "MAX_VIABLE_LIGHTNESS",
    "MAX_CHROMA_LOSS_RATIO",
    "apply_optical_appearance",
    "is_transformation_viable",
]
