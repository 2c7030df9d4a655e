import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings as hsettings, strategies as st  # type: ignore

from huescale.color_types import STOP_POSITIONS, OKLCHColor, RGBColor
from huescale.convert import normalize_hue, oklch_to_hex, rgb_to_oklch
from huescale.gamut import clamp_to_gamut, is_displayable
from huescale.generator import generate_palette_from_stop
from huescale.loader import load_pattern

_u8 = st.integers(0, 255)


@given(l=st.floats(0.0, 1.0), c=st.floats(0.0, 0.5), h=st.floats(0.0, 359.999))
def test_clamp_always_displayable(l, c, h):
    out = clamp_to_gamut(OKLCHColor(l, c, h))
    assert is_displayable(out)
    assert out.l == l
    assert out.c <= c


@given(r=_u8, g=_u8, b=_u8)
def test_hex_round_trip(r, g, b):
    expected = f"#{r:02x}{g:02x}{b:02x}"
    assert oklch_to_hex(rgb_to_oklch(RGBColor(r, g, b))) == expected


@given(h=st.floats(-1e6, 1e6))
def test_normalize_hue_range(h):
    out = normalize_hue(h)
    assert 0.0 <= out < 360.0


@hsettings(max_examples=50, deadline=None)
@given(r=_u8, g=_u8, b=_u8, stop=st.sampled_from(STOP_POSITIONS))
def test_generation_totality_and_gamut(r, g, b, stop):
    anchor = rgb_to_oklch(RGBColor(r, g, b))
    palette = generate_palette_from_stop(anchor, stop, load_pattern(), "prop")
    assert tuple(s.position for s in palette.stops) == STOP_POSITIONS
    assert all(is_displayable(s.color) for s in palette.stops)
    assert oklch_to_hex(palette.color_at(stop)) == oklch_to_hex(anchor)
