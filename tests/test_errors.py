from __future__ import annotations

import pytest

from huescale.errors import (
    ColorConversionError,
    ColorParseError,
    ExportError,
    GenerationInvariantError,
    HuescaleError,
    InputParseError,
    PatternError,
    PatternLoadError,
    StopPositionError,
    describe_error,
)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ColorParseError("nope", "unrecognized"), "Invalid color 'nope': unrecognized"),
        (ColorConversionError("oklch", "rgb", 1.5, "non-finite"), "Color conversion oklch -> rgb failed for 1.5: non-finite"),
        (PatternError("no palettes provided"), "Pattern error: no palettes provided"),
        (GenerationInvariantError([100, 300]), "Internal error: palette stops [100, 300] are not the 10 expected positions"),
        (StopPositionError(550), "Invalid stop 550: use one of 100, 200, ..., 1000"),
        (PatternLoadError("p.json", "missing"), "Could not load pattern 'p.json': missing"),
        (ExportError("out.json", "denied"), "Export to 'out.json' failed: denied"),
        (InputParseError("a>", "missing target color"), "Invalid input 'a>': missing target color"),
    ],
)
def test_describe_error(exc: HuescaleError, expected: str) -> None:
    assert isinstance(exc, HuescaleError)
    assert describe_error(exc) == expected


def test_describe_error_fallback() -> None:
    assert describe_error(RuntimeError("boom")) == "boom"


def test_context_attributes() -> None:
    exc = GenerationInvariantError([100, 200])
    assert exc.positions == (100, 200)
    assert "100" in str(exc)
    assert StopPositionError("x").value == "x"
