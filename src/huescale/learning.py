from __future__ import annotations

"""Statistical extraction of transformation patterns from example palettes.

For every example palette each stop is expressed relative to the palette's
own reference stop (500 by default):

- lightness multiplier ``stop.l / ref.l``
- chroma multiplier ``stop.c / ref.c``
- signed hue shift ``stop.h - ref.h`` in [-180, 180)

Multipliers from several palettes are averaged per stop. Stops that no
palette covers are left empty for :func:`huescale.smoothing.smooth_pattern`
to fill.
"""

import logging
from typing import Iterable, Optional

import numpy as np

from .color_types import DEFAULT_REFERENCE_STOP, STOP_POSITIONS, OKLCHColor, stop_index
from .convert import hue_difference, is_achromatic
from .errors import PatternError, StopPositionError
from .palette import AnalyzedPalette
from .pattern import StopTransform, TransformationPattern

logger = logging.getLogger(__name__)

#: Floor for the reference lightness to avoid division by zero.
MIN_DIVISOR = 0.001

#: Reference chroma below this carries no chroma information.
ACHROMATIC_REFERENCE_CHROMA = 0.001

#: Confidence reported when only one palette contributed.
SINGLE_PALETTE_CONFIDENCE = 0.8

DEFAULT_PATTERN_NAME = "learned-pattern"


def extract_patterns(
    palettes: Iterable[AnalyzedPalette],
    reference_stop: int = DEFAULT_REFERENCE_STOP,
    name: Optional[str] = None,
) -> TransformationPattern:
    """Learn a transformation pattern from one or more example palettes.

    Parameters
    ----------
    palettes:
        Example palettes in OKLCH. Palettes without the reference stop are
        skipped with a warning.
    reference_stop:
        Stop the multipliers are relative to.
    name:
        Pattern name; defaults to ``"learned-pattern"``.

    Returns
    -------
    TransformationPattern
        Averaged per-stop transforms. Slots no palette covered are None.

    Raises
    ------
    PatternError
        If no palettes are given, if none contains the reference stop, or
        if a palette uses an unknown stop position.
    """
    try:
        stop_index(reference_stop)
    except StopPositionError as exc:
        raise PatternError(f"invalid reference stop {reference_stop!r}") from exc

    palettes = list(palettes)
    if not palettes:
        raise PatternError("no palettes provided")

    rows: list[np.ndarray] = []
    for palette in palettes:
        ref = palette.color_at(reference_stop)
        if ref is None:
            logger.warning("palette '%s' has no stop %d; skipped", palette.name, reference_stop)
            continue
        rows.append(_palette_samples(palette, ref))

    if not rows:
        raise PatternError(f"no palette contains the reference stop {reference_stop}")

    samples = np.stack(rows)  # (palettes, stops, [L, C, H])
    present = ~np.isnan(samples[:, :, 0])
    counts = present.sum(axis=0)
    sums = np.where(np.isnan(samples), 0.0, samples).sum(axis=0)
    means = sums / np.maximum(counts, 1)[:, None]

    transforms = tuple(
        StopTransform(float(means[k, 0]), float(means[k, 1]), float(means[k, 2])) if counts[k] else None
        for k in range(len(STOP_POSITIONS))
    )
    confidence = _confidence(samples, counts)
    logger.debug(
        "extracted pattern from %d palette(s), %d/%d stops covered, confidence=%.3f",
        len(rows),
        int(np.count_nonzero(counts)),
        len(STOP_POSITIONS),
        confidence,
    )
    return TransformationPattern(
        name=name or DEFAULT_PATTERN_NAME,
        reference_stop=reference_stop,
        transforms=transforms,
        source_count=len(rows),
        confidence=confidence,
    )


def stop_sample(color: OKLCHColor, ref: OKLCHColor) -> tuple[float, float, float]:
    """Return (lightness multiplier, chroma multiplier, hue shift) of ``color`` against ``ref``.

    A gray reference has no chroma to scale, so the chroma multiplier is
    1.0 (generated stops keep the anchor's chroma). The hue shift is 0 when
    either color is gray.
    """
    l_mult = color.l / max(ref.l, MIN_DIVISOR)
    if ref.c < ACHROMATIC_REFERENCE_CHROMA:
        c_mult = 1.0
    else:
        c_mult = color.c / ref.c
    if is_achromatic(color) or is_achromatic(ref):
        shift = 0.0
    else:
        shift = hue_difference(ref.h, color.h)
    return (l_mult, c_mult, shift)


def _palette_samples(palette: AnalyzedPalette, ref: OKLCHColor) -> np.ndarray:
    out = np.full((len(STOP_POSITIONS), 3), np.nan)
    for stop in palette.stops:
        try:
            idx = stop_index(stop.position)
        except StopPositionError as exc:
            raise PatternError(f"palette '{palette.name}' uses unknown stop {stop.position!r}") from exc
        out[idx] = stop_sample(stop.color, ref)
    return out


def _confidence(samples: np.ndarray, counts: np.ndarray) -> float:
    """Map the spread of multipliers across palettes to [0, 1]."""
    multi = counts >= 2
    if samples.shape[0] < 2 or not multi.any():
        return SINGLE_PALETTE_CONFIDENCE
    spreads: list[float] = []
    for k in np.flatnonzero(multi):
        column = samples[:, k, :2]
        column = column[~np.isnan(column[:, 0])]
        spreads.extend(float(s) for s in column.std(axis=0))
    return float(np.clip(1.0 - np.mean(spreads), 0.0, 1.0))


__all__ = [
    "MIN_DIVISOR",
    "ACHROMATIC_REFERENCE_CHROMA",
    "extract_patterns",
    "stop_sample",
]
