from __future__ import annotations

"""High-level public API for generating palettes.

This module wires parsing, generation and formatting together:

- :func:`generate_palette` builds one palette and fails fast;
- :func:`generate_batch` builds many palettes concurrently and isolates
  per-item failures;
- :func:`transform` exposes the optical appearance transfer for strings.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from common import settings

from .color_types import OKLCHColor, coerce_stop
from .convert import to_oklch
from .errors import HuescaleError, describe_error
from .formatter import ColorFormat, FormattedStop, format_palette_stops
from .generator import generate_palette_from_stop
from .optical import apply_optical_appearance
from .pattern import TransformationPattern

logger = logging.getLogger(__name__)

#: Hard bounds on batch concurrency.
MIN_WORKERS = 1
MAX_WORKERS = 8


@dataclass(frozen=True)
class GeneratedPaletteOutput:
    """A generated palette with every stop rendered in ``output_format``."""

    name: str
    anchor_stop: int
    input_color: str
    output_format: ColorFormat
    stops: Tuple[FormattedStop, ...]


@dataclass(frozen=True)
class ColorStopPair:
    """One batch request: a color string and the stop it represents."""

    color: str
    stop: int


@dataclass(frozen=True)
class BatchFailure:
    """Why one batch item failed."""

    index: int
    input_color: str
    anchor_stop: object
    reason: str


@dataclass(frozen=True)
class BatchResult:
    """Outcome of :func:`generate_batch`.

    ``palettes`` holds the successes in input order; ``partial`` is True
    when at least one pair failed, with details in ``failures``.
    """

    group_name: str
    output_format: ColorFormat
    generated_at: str
    palettes: Tuple[GeneratedPaletteOutput, ...]
    partial: bool
    failures: Tuple[BatchFailure, ...] = ()


PairLike = Union[ColorStopPair, Tuple[str, object]]


def generate_palette(
    input_color: str,
    anchor_stop: int,
    pattern: TransformationPattern,
    output_format: Optional[ColorFormat | str] = None,
    palette_name: Optional[str] = None,
) -> GeneratedPaletteOutput:
    """Generate and format one palette.

    Parameters
    ----------
    input_color:
        Color string in any supported notation.
    anchor_stop:
        Stop position the color represents (100..1000).
    pattern:
        Smoothed transformation pattern.
    output_format:
        Rendering of each stop; defaults to ``HUESCALE_DEFAULT_OUTPUT_FORMAT``.
    palette_name:
        Defaults to ``HUESCALE_DEFAULT_PALETTE_NAME``.

    Raises
    ------
    HuescaleError
        The first error met (parse, stop, pattern or invariant).
    """
    cfg = settings.get()
    fmt = ColorFormat.from_value(output_format if output_format is not None else cfg.DEFAULT_OUTPUT_FORMAT)
    name = palette_name or cfg.DEFAULT_PALETTE_NAME
    stop = coerce_stop(anchor_stop)

    anchor = to_oklch(input_color)
    palette = generate_palette_from_stop(anchor, stop, pattern, name)
    return GeneratedPaletteOutput(
        name=palette.name,
        anchor_stop=stop,
        input_color=input_color,
        output_format=fmt,
        stops=tuple(format_palette_stops(palette.stops, fmt)),
    )


def generate_batch(
    pairs: Iterable[PairLike],
    pattern: TransformationPattern,
    output_format: Optional[ColorFormat | str] = None,
    group_name: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> BatchResult:
    """Generate one palette per (color, stop) pair.

    Pairs run on a bounded thread pool. A failing pair is recorded in
    ``failures`` and does not affect its siblings. Each palette is named
    ``"{group_name}-{color}"``.
    """
    cfg = settings.get()
    fmt = ColorFormat.from_value(output_format if output_format is not None else cfg.DEFAULT_OUTPUT_FORMAT)
    group = group_name or cfg.DEFAULT_BATCH_NAME
    items = [_as_pair(p) for p in pairs]
    workers = max(MIN_WORKERS, min(MAX_WORKERS, max_workers or cfg.MAX_CONCURRENCY))

    def _run(item: Tuple[str, object]) -> GeneratedPaletteOutput | HuescaleError:
        color, stop = item
        try:
            return generate_palette(color, stop, pattern, fmt, f"{group}-{color}")  # type: ignore[arg-type]
        except HuescaleError as exc:
            return exc

    results: List[GeneratedPaletteOutput | HuescaleError]
    if items:
        with ThreadPoolExecutor(max_workers=min(workers, len(items))) as pool:
            results = list(pool.map(_run, items))
    else:
        results = []

    palettes: List[GeneratedPaletteOutput] = []
    failures: List[BatchFailure] = []
    for index, ((color, stop), result) in enumerate(zip(items, results)):
        if isinstance(result, GeneratedPaletteOutput):
            palettes.append(result)
            continue
        failure = BatchFailure(index=index, input_color=color, anchor_stop=stop, reason=describe_error(result))
        logger.warning("batch item %d (%s @ %s) failed: %s", index, color, stop, failure.reason)
        failures.append(failure)

    return BatchResult(
        group_name=group,
        output_format=fmt,
        generated_at=datetime.now(timezone.utc).isoformat(),
        palettes=tuple(palettes),
        partial=bool(failures),
        failures=tuple(failures),
    )


def transform(reference: str, target: str) -> OKLCHColor:
    """Apply ``reference``'s lightness and chroma to ``target``'s hue."""
    return apply_optical_appearance(to_oklch(reference), to_oklch(target))


def _as_pair(pair: PairLike) -> Tuple[str, object]:
    if isinstance(pair, ColorStopPair):
        return (pair.color, pair.stop)
    color, stop = pair
    return (str(color), stop)


__all__ = [
    "GeneratedPaletteOutput",
    "ColorStopPair",
    "BatchFailure",
    "BatchResult",
    "generate_palette",
    "generate_batch",
    "transform",
]
