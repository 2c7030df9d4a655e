from __future__ import annotations

"""Transformation pattern types.

A pattern stores, for each of the 10 stops, how that stop's color relates
to the reference stop's color. Transforms live in a fixed 10-slot tuple
indexed by stop index (0 for 100, ..., 9 for 1000).
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .color_types import DEFAULT_REFERENCE_STOP, STOP_POSITIONS, stop_index
from .errors import PatternError


@dataclass(frozen=True)
class StopTransform:
    """How a stop relates to the reference stop.

    ``L = ref.L * lightness_multiplier``, ``C = ref.C * chroma_multiplier``,
    ``h = ref.h + hue_shift_degrees``.
    """

    lightness_multiplier: float
    chroma_multiplier: float
    hue_shift_degrees: float


IDENTITY_TRANSFORM = StopTransform(1.0, 1.0, 0.0)


@dataclass(frozen=True)
class TransformationPattern:
    """Per-stop transforms learned from example palettes.

    Attributes
    ----------
    name:
        Pattern name (``-smoothed`` is appended by smoothing).
    reference_stop:
        Stop the multipliers are relative to (500 by default).
    transforms:
        10 slots in stop order; ``None`` where no example covered the stop.
    source_count:
        Number of example palettes that contributed.
    confidence:
        Agreement between the examples, in [0, 1].
    """

    name: str
    reference_stop: int = DEFAULT_REFERENCE_STOP
    transforms: Tuple[Optional[StopTransform], ...] = field(
        default_factory=lambda: (None,) * len(STOP_POSITIONS)
    )
    source_count: int = 1
    confidence: float = 1.0

    def __post_init__(self) -> None:
        if len(self.transforms) != len(STOP_POSITIONS):
            raise PatternError(
                f"pattern '{self.name}' needs {len(STOP_POSITIONS)} transform slots, got {len(self.transforms)}"
            )
        stop_index(self.reference_stop)

    @property
    def is_complete(self) -> bool:
        return all(t is not None for t in self.transforms)

    def transform_at(self, stop: int) -> StopTransform:
        """Return the transform for ``stop``; raises PatternError for a gap."""
        transform = self.transforms[stop_index(stop)]
        if transform is None:
            raise PatternError(f"pattern '{self.name}' has no transform for stop {stop}")
        return transform


__all__ = ["StopTransform", "IDENTITY_TRANSFORM", "TransformationPattern"]
