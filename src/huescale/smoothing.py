from __future__ import annotations

"""Regularization of transformation patterns.

:func:`smooth_pattern` turns a possibly gappy, noisy pattern into one with
a transform for every stop:

1. gaps are filled by linear interpolation over stop index;
2. lightness multipliers get their least-squares non-increasing fit, so
   stop 100 is the lightest and 1000 the darkest;
3. the reference stop is reset to the identity transform.
"""

import logging
from typing import List

import numpy as np

from .color_types import STOP_POSITIONS, stop_index
from .errors import PatternError
from .pattern import IDENTITY_TRANSFORM, StopTransform, TransformationPattern

logger = logging.getLogger(__name__)

_SMOOTHED_SUFFIX = "-smoothed"


def smooth_pattern(pattern: TransformationPattern) -> TransformationPattern:
    """Return a complete, monotonic copy of ``pattern``.

    Raises
    ------
    PatternError
        If the pattern has no transform at all.
    """
    known = [k for k, t in enumerate(pattern.transforms) if t is not None]
    if not known:
        raise PatternError(f"pattern '{pattern.name}' has no transforms to smooth")

    filled = _fill_gaps(pattern, known)
    ref = stop_index(pattern.reference_stop)

    lightness = fit_non_increasing(filled[:, 0])
    # Resetting the reference to 1.0 must not break monotonicity.
    lightness[:ref] = np.maximum(lightness[:ref], 1.0)
    lightness[ref + 1 :] = np.minimum(lightness[ref + 1 :], 1.0)
    chroma = np.maximum(filled[:, 1], 0.0)
    hue = filled[:, 2]

    transforms = tuple(
        IDENTITY_TRANSFORM if k == ref else StopTransform(float(lightness[k]), float(chroma[k]), float(hue[k]))
        for k in range(len(STOP_POSITIONS))
    )
    if len(known) < len(STOP_POSITIONS):
        logger.debug("pattern '%s': interpolated %d missing stop(s)", pattern.name, len(STOP_POSITIONS) - len(known))

    name = pattern.name if pattern.name.endswith(_SMOOTHED_SUFFIX) else pattern.name + _SMOOTHED_SUFFIX
    return TransformationPattern(
        name=name,
        reference_stop=pattern.reference_stop,
        transforms=transforms,
        source_count=pattern.source_count,
        confidence=pattern.confidence,
    )


def fit_non_increasing(values: np.ndarray) -> np.ndarray:
    """Least-squares non-increasing fit (pool-adjacent-violators).

    Already non-increasing input comes back unchanged.
    """
    y = -np.asarray(values, dtype=float)
    # each block: [mean, size]
    blocks: List[List[float]] = []
    for v in y:
        blocks.append([float(v), 1.0])
        while len(blocks) > 1 and blocks[-2][0] > blocks[-1][0]:
            m2, n2 = blocks.pop()
            m1, n1 = blocks.pop()
            blocks.append([(m1 * n1 + m2 * n2) / (n1 + n2), n1 + n2])
    out = np.concatenate([np.full(int(n), m) for m, n in blocks])
    return -out


def _fill_gaps(pattern: TransformationPattern, known: List[int]) -> np.ndarray:
    """Return a (10, 3) array of [L mult, C mult, hue shift], gaps interpolated.

    Hue shifts are interpolated along the shorter arc: +170 and -170 meet
    at 180, not at 0.
    """
    xp = np.asarray(known, dtype=float)
    fp = np.array(
        [
            [t.lightness_multiplier, t.chroma_multiplier, t.hue_shift_degrees]
            for t in (pattern.transforms[k] for k in known)
            if t is not None
        ],
        dtype=float,
    )
    x = np.arange(len(STOP_POSITIONS), dtype=float)
    # np.interp holds the nearest known value beyond either end
    filled = np.column_stack([np.interp(x, xp, fp[:, j]) for j in range(2)])
    hue_path = np.rad2deg(np.unwrap(np.deg2rad(fp[:, 2])))
    hue = (np.interp(x, xp, hue_path) + 180.0) % 360.0 - 180.0
    hue[known] = fp[:, 2]
    return np.column_stack([filled, hue])


__all__ = ["smooth_pattern", "fit_non_increasing"]
