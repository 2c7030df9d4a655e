from __future__ import annotations

"""Core color and stop types used by huescale.

Colors are immutable value objects. OKLCH is the internal representation
for every manipulation; OKLab and 8-bit RGB exist for conversion and
formatting.
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import StopPositionError

#: The fixed, ordered set of palette stops (100 lightest, 1000 darkest).
STOP_POSITIONS: Tuple[int, ...] = (100, 200, 300, 400, 500, 600, 700, 800, 900, 1000)

#: Stop used as the pattern reference when none is given.
DEFAULT_REFERENCE_STOP = 500


@dataclass(frozen=True)
class OKLCHColor:
    """Color in OKLCH.

    Attributes
    ----------
    l:
        Perceptual lightness in [0, 1].
    c:
        Chroma, non-negative (displayable colors stay below ~0.37).
    h:
        Hue in degrees, [0, 360). ``nan`` marks an undefined hue.
    alpha:
        Opacity in [0, 1].
    """

    l: float
    c: float
    h: float
    alpha: float = 1.0


@dataclass(frozen=True)
class OKLABColor:
    """Rectangular form of OKLCH: ``a = c*cos(h)``, ``b = c*sin(h)``."""

    l: float
    a: float
    b: float
    alpha: float = 1.0


@dataclass(frozen=True)
class RGBColor:
    """8-bit sRGB color (channels 0–255) with float alpha."""

    r: int
    g: int
    b: int
    alpha: float = 1.0


def is_valid_stop(value: object) -> bool:
    """Return True if ``value`` is one of the 10 stop positions."""
    return isinstance(value, int) and not isinstance(value, bool) and value in STOP_POSITIONS


def stop_index(stop: int) -> int:
    """Return the 0-based index of ``stop`` in :data:`STOP_POSITIONS`."""
    if not is_valid_stop(stop):
        raise StopPositionError(stop)
    return STOP_POSITIONS.index(stop)


def coerce_stop(value: object) -> int:
    """Convert ``value`` (int or numeric string) to a validated stop position."""
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise StopPositionError(value) from exc
    if not is_valid_stop(value):
        raise StopPositionError(value)
    return int(value)  # type: ignore[arg-type]


__all__ = [
    "STOP_POSITIONS",
    "DEFAULT_REFERENCE_STOP",
    "OKLCHColor",
    "OKLABColor",
    "RGBColor",
    "is_valid_stop",
    "stop_index",
    "coerce_stop",
]
