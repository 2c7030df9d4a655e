"""Public entrypoint for the huescale palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``huescale`` instead of individual
submodules.
"""

from .color_types import STOP_POSITIONS, OKLABColor, OKLCHColor, RGBColor
from .palette import AnalyzedPalette, Palette, PaletteStop
from .pattern import StopTransform, TransformationPattern
from .learning import extract_patterns
from .smoothing import smooth_pattern
from .generator import generate_palette_from_stop
from .optical import apply_optical_appearance, is_transformation_viable
from .formatter import ColorFormat, format_color
from .api import (
    BatchFailure,
    BatchResult,
    ColorStopPair,
    GeneratedPaletteOutput,
    generate_batch,
    generate_palette,
    transform,
)
from .loader import load_pattern
from .errors import HuescaleError, describe_error

__all__ = [
    "STOP_POSITIONS",
    "OKLCHColor",
    "OKLABColor",
    "RGBColor",
    "PaletteStop",
    "AnalyzedPalette",
    "Palette",
    "StopTransform",
    "TransformationPattern",
    "extract_patterns",
    "smooth_pattern",
    "generate_palette_from_stop",
    "apply_optical_appearance",
    "is_transformation_viable",
    "ColorFormat",
    "format_color",
    "GeneratedPaletteOutput",
    "ColorStopPair",
    "BatchFailure",
    "BatchResult",
    "generate_palette",
    "generate_batch",
    "transform",
    "load_pattern",
    "HuescaleError",
    "describe_error",
]
