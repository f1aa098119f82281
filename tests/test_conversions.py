import math

import pytest

from hypothesis import given, strategies as st

from scalelab.core import conversions as conv
from scalelab.core.okhsl import okhsl_to_hex, okhsl_to_srgb, srgb_to_okhsl, toe, toe_inv


def _hue_diff(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


def test_toe_reference_value():
    assert toe(0.5) == pytest.approx(0.42114, abs=1e-5)


@given(x=st.floats(0.0, 1.0))
def test_toe_inverse(x):
    assert toe_inv(toe(x)) == pytest.approx(x, abs=1e-9)


def test_okhsl_extremes():
    assert okhsl_to_hex(0.0, 0.0, 1.0) == "#ffffff"
    assert okhsl_to_hex(123.0, 1.0, 1.0) == "#ffffff"
    assert okhsl_to_hex(0.0, 0.0, 0.0) == "#000000"
    assert okhsl_to_hex(240.0, 0.7, 0.0) == "#000000"


def test_black_has_no_hue():
    assert srgb_to_okhsl(0.0, 0.0, 0.0) == (None, 0.0, 0.0)


@pytest.mark.parametrize("v", [0.02, 0.5, 1.0])
def test_grays_have_no_hue(v):
    h, s, _ = srgb_to_okhsl(v, v, v)
    assert h is None
    assert s == 0.0


def test_middle_gray_lightness():
    _, _, l = srgb_to_okhsl(0.5, 0.5, 0.5)
    assert l == pytest.approx(0.53376, abs=1e-4)


@given(
    h=st.floats(0.0, 359.9),
    s=st.floats(0.05, 0.95),
    l=st.floats(0.05, 0.95),
)
def test_okhsl_srgb_round_trip(h, s, l):
    h2, s2, l2 = srgb_to_okhsl(*okhsl_to_srgb(h, s, l))
    assert h2 is not None
    assert _hue_diff(h, h2) < 0.05
    assert s2 == pytest.approx(s, abs=1e-4)
    assert l2 == pytest.approx(l, abs=1e-6)


def test_lstar_of_middle_gray():
    assert conv.y_to_lstar(0.18) == pytest.approx(49.496, abs=1e-2)
    assert conv.lstar_to_y(conv.y_to_lstar(0.18)) == pytest.approx(0.18)
    assert conv.y_to_lstar(1.0) == pytest.approx(100.0)


def test_white_xyz():
    x, y, z = conv.srgb_to_xyz(1.0, 1.0, 1.0)
    assert y == pytest.approx(1.0)
    assert x == pytest.approx(0.95047, abs=1e-3)
    assert z == pytest.approx(1.08883, abs=1e-3)


def test_oklab_of_white():
    L, a, b = conv.srgb_to_oklab(1.0, 1.0, 1.0)
    assert L == pytest.approx(1.0, abs=1e-6)
    assert math.hypot(a, b) < 1e-6


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#00897b", (0, 137, 123)),
        ("00897B", (0, 137, 123)),
        ("#fff", (255, 255, 255)),
        ("#0f08", (0, 255, 0)),
        ("#11223344", (17, 34, 51)),
        ("  #abcdef ", (171, 205, 239)),
    ],
)
def test_parse_hex(value, expected):
    assert conv.parse_hex(value) == expected


@pytest.mark.parametrize("value", ["", "#12", "#12345", "teal", "#gggggg", None, 42])
def test_parse_hex_rejects(value):
    assert conv.parse_hex(value) is None


def test_srgb_to_hex_clamps_and_lowercases():
    assert conv.srgb_to_hex(1.2, -0.1, 0.5) == "#ff0080"


def test_hsl_round_trip():
    r, g, b = conv.hsl_to_rgb(210.0, 0.6, 0.4)
    h, s, l = conv.rgb_to_hsl(r, g, b)
    assert h == pytest.approx(210.0)
    assert s == pytest.approx(0.6)
    assert l == pytest.approx(0.4)


def test_normalize_hue_wraps():
    assert conv.normalize_hue(-30.0) == pytest.approx(330.0)
    assert conv.normalize_hue(720.0) == 0.0
    assert conv.normalize_hue(-1e-20) == 0.0


@given(y=st.floats(0.0, 1.0))
def test_lstar_round_trip(y):
    assert conv.lstar_to_y(conv.y_to_lstar(y)) == pytest.approx(y, abs=1e-12)


def test_lstar_linear_segment():
    # Below 216/24389 L* is the straight kappa * Y segment
    assert conv.y_to_lstar(0.001) == pytest.approx(24389.0 / 27.0 * 0.001)
