from __future__ import annotations

"""Palette generation from a single anchor color.

Strategy:

1. take the input color as the anchor at the given stop;
2. scale it by each stop's transform relative to the anchor stop's own
   transform;
3. clamp every result into the sRGB gamut.

Stops are computed independently of each other, so their order of
computation does not matter; the result is sorted by position.
"""

import logging
from typing import Optional

from .color_types import STOP_POSITIONS, OKLCHColor, stop_index
from .convert import clamp, normalize_hue
from .engine import ColorEngine
from .errors import GenerationInvariantError, PatternError
from .gamut import clamp_to_gamut, is_displayable
from .palette import Palette, PaletteStop
from .pattern import StopTransform, TransformationPattern

logger = logging.getLogger(__name__)

#: Anchor multipliers below this are treated as the reference level.
MIN_DIVISOR = 0.001


def generate_palette_from_stop(
    anchor_color: OKLCHColor,
    anchor_stop: int,
    pattern: TransformationPattern,
    name: str,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate a 10-stop palette around ``anchor_color``.

    Parameters
    ----------
    anchor_color:
        Color the anchor stop should have.
    anchor_stop:
        Stop position ``anchor_color`` represents.
    pattern:
        Complete (smoothed) transformation pattern.
    name:
        Name of the generated palette.
    engine:
        Optional ColorEngine used for gamut checks.

    Returns
    -------
    Palette
        Exactly 10 displayable stops sorted by position. The anchor stop
        equals ``anchor_color`` unless that color is out of gamut.

    Raises
    ------
    StopPositionError
        If ``anchor_stop`` is not a stop position.
    PatternError
        If the pattern has gaps (smooth it first).
    GenerationInvariantError
        If the result is not exactly the 10 sorted stops.
    """
    stop_index(anchor_stop)
    if not pattern.is_complete:
        raise PatternError(f"pattern '{pattern.name}' is incomplete; smooth it before generating")
    anchor_transform = pattern.transform_at(anchor_stop)

    stops = [
        PaletteStop(
            position=target,
            color=_ensure_displayable(
                apply_relative_transform(anchor_color, pattern.transform_at(target), anchor_transform),
                engine,
            ),
        )
        for target in STOP_POSITIONS
    ]
    stops.sort(key=lambda s: s.position)
    _check_stops(stops)
    return Palette(name=name, stops=tuple(stops))


def apply_relative_transform(
    color: OKLCHColor,
    target: StopTransform,
    anchor: StopTransform,
) -> OKLCHColor:
    """Move ``color`` from the anchor's transform to the target's.

    When an anchor multiplier is below :data:`MIN_DIVISOR` (an example
    palette had a gray at the anchor stop), the anchor counts as the reference
    level and the target multiplier is applied as is. The anchor's own
    stop always gets ratio 1.
    """
    if target == anchor:
        l_ratio = c_ratio = 1.0
        hue_delta = 0.0
    else:
        l_ratio = _ratio(target.lightness_multiplier, anchor.lightness_multiplier)
        c_ratio = _ratio(target.chroma_multiplier, anchor.chroma_multiplier)
        hue_delta = target.hue_shift_degrees - anchor.hue_shift_degrees
    return OKLCHColor(
        l=clamp(color.l * l_ratio, 0.0, 1.0),
        c=max(0.0, color.c * c_ratio),
        h=normalize_hue(color.h + hue_delta),
        alpha=color.alpha,
    )


def _ratio(target: float, anchor: float) -> float:
    if anchor < MIN_DIVISOR:
        return target
    return target / anchor


def _ensure_displayable(color: OKLCHColor, engine: Optional[ColorEngine]) -> OKLCHColor:
    if is_displayable(color, engine):
        return color
    return clamp_to_gamut(color, engine)


def _check_stops(stops: list[PaletteStop]) -> None:
    positions = tuple(s.position for s in stops)
    if positions != STOP_POSITIONS:
        logger.error("palette generation produced stops %s", positions)
        raise GenerationInvariantError(positions)


__all__ = ["generate_palette_from_stop", "apply_relative_transform"]
