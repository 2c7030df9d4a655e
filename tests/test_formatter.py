from __future__ import annotations

import math

import pytest

from huescale.color_types import OKLCHColor
from huescale.convert import to_oklch
from huescale.formatter import ColorFormat, format_color, format_palette_stops
from huescale.palette import PaletteStop


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("hex", "#2d72d2"),
        (ColorFormat.RGB, "rgb(45, 114, 210)"),
    ],
)
def test_srgb_formats(fmt, expected: str) -> None:
    assert format_color(to_oklch("#2D72D2"), fmt) == expected


def test_oklch_and_oklab_strings() -> None:
    color = OKLCHColor(0.5, 0.1, 120.0)
    assert format_color(color, "oklch") == "oklch(50.00% 0.100 120.0)"
    assert format_color(OKLCHColor(0.5, 0.1, 90.0), "oklab") == "oklab(50.00% 0.000 0.100)"


def test_alpha_suffixes() -> None:
    color = OKLCHColor(0.5, 0.1, 120.0, 0.5)
    assert format_color(color, "oklch") == "oklch(50.00% 0.100 120.0 / 0.5)"
    assert format_color(color, "oklab").endswith(" / 0.5)")
    assert format_color(color, "rgb").endswith(", 0.5)")
    assert format_color(color, "hex").endswith("80")


def test_undefined_hue_renders_as_none() -> None:
    assert format_color(OKLCHColor(0.5, 0.0, math.nan), "oklch") == "oklch(50.00% 0.000 none)"


def test_formatted_values_parse_back() -> None:
    color = to_oklch("#238551")
    for fmt in ColorFormat:
        again = to_oklch(format_color(color, fmt))
        assert again.l == pytest.approx(color.l, abs=5e-3)
        assert again.c == pytest.approx(color.c, abs=5e-3)


def test_from_value() -> None:
    assert ColorFormat.from_value(" OKLCH ") is ColorFormat.OKLCH
    assert ColorFormat.from_value(ColorFormat.HEX) is ColorFormat.HEX
    with pytest.raises(ValueError):
        ColorFormat.from_value("cmyk")


def test_format_palette_stops_keeps_order() -> None:
    stops = [PaletteStop(100, to_oklch("#E5EEFB")), PaletteStop(500, to_oklch("#2D72D2"))]
    out = format_palette_stops(stops, "hex")
    assert [(s.position, s.value) for s in out] == [(100, "#e5eefb"), (500, "#2d72d2")]
    assert out[1].color == stops[1].color
