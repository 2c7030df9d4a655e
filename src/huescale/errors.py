from __future__ import annotations

"""Error taxonomy for huescale.

Every failure the library reports is a subclass of :class:`HuescaleError`
carrying structured context attributes. Gamut problems are not errors:
they are corrected by chroma clamping.
"""

from typing import Sequence


class HuescaleError(Exception):
    """Base class of all huescale errors."""


class ColorParseError(HuescaleError):
    """A string could not be read as any supported color notation."""

    def __init__(self, input: str, reason: str) -> None:
        super().__init__(f"could not parse color {input!r}: {reason}")
        self.input = input
        self.reason = reason


class ColorConversionError(HuescaleError):
    """A parsed color could not be converted into the requested space."""

    def __init__(self, from_space: str, to_space: str, value: object, reason: str) -> None:
        super().__init__(f"could not convert {value!r} from {from_space} to {to_space}: {reason}")
        self.from_space = from_space
        self.to_space = to_space
        self.value = value
        self.reason = reason


class PatternError(HuescaleError):
    """Pattern extraction or smoothing received unusable input."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class GenerationInvariantError(HuescaleError):
    """A generated palette did not contain exactly the 10 sorted stops."""

    def __init__(self, positions: Sequence[int]) -> None:
        super().__init__(f"generated palette has invalid stop positions: {list(positions)}")
        self.positions = tuple(positions)


class StopPositionError(HuescaleError):
    """A stop position outside 100, 200, ..., 1000 was requested."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid stop position {value!r} (expected one of 100, 200, ..., 1000)")
        self.value = value


class PatternLoadError(HuescaleError):
    """A pattern source could not be read or learned from."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"could not load pattern from {source!r}: {reason}")
        self.source = source
        self.reason = reason


class ExportError(HuescaleError):
    """A generated result could not be written to its export target."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"could not export to {target!r}: {reason}")
        self.target = target
        self.reason = reason


class InputParseError(HuescaleError):
    """A color/stop pair or transformation expression was malformed."""

    def __init__(self, input: str, reason: str) -> None:
        super().__init__(f"invalid input {input!r}: {reason}")
        self.input = input
        self.reason = reason


def describe_error(exc: BaseException) -> str:
    """Render an error as a one-line, user-facing message."""
    if isinstance(exc, ColorParseError):
        return f"Invalid color '{exc.input}': {exc.reason}"
    if isinstance(exc, ColorConversionError):
        return f"Color conversion {exc.from_space} -> {exc.to_space} failed for {exc.value!r}: {exc.reason}"
    if isinstance(exc, PatternError):
        return f"Pattern error: {exc.reason}"
    if isinstance(exc, GenerationInvariantError):
        return f"Internal error: palette stops {list(exc.positions)} are not the 10 expected positions"
    if isinstance(exc, StopPositionError):
        return f"Invalid stop {exc.value!r}: use one of 100, 200, ..., 1000"
    if isinstance(exc, PatternLoadError):
        return f"Could not load pattern '{exc.source}': {exc.reason}"
    if isinstance(exc, ExportError):
        return f"Export to '{exc.target}' failed: {exc.reason}"
    if isinstance(exc, InputParseError):
        return f"Invalid input '{exc.input}': {exc.reason}"
    return str(exc)


__all__ = [
    "HuescaleError",
    "ColorParseError",
    "ColorConversionError",
    "PatternError",
    "GenerationInvariantError",
    "StopPositionError",
    "PatternLoadError",
    "ExportError",
    "InputParseError",
    "describe_error",
]
