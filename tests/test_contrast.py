import pytest

from hypothesis import given, strategies as st

from scalelab.core.contrast import (
    get_contrast_ratio,
    get_contrast_ratio_hex,
    get_overlay_text_color,
    get_wcag_levels,
)
from scalelab.core.luminance import get_luminance_of
from scalelab.core.types import OKHslColor

hex_colors = st.integers(0, 0xFFFFFF).map(lambda v: f"#{v:06x}")


def test_black_on_white_is_21():
    assert get_contrast_ratio_hex("#000000", "#FFFFFF") == pytest.approx(21.0)


def test_white_luminance():
    assert get_luminance_of("#FFFFFF") == pytest.approx(1.0)
    assert get_luminance_of(OKHslColor(0.0, 0.0, 1.0)) == pytest.approx(1.0)
    assert get_luminance_of("#000000") == 0.0


@pytest.mark.parametrize("value", ["not a color", "#12345", "", None, 12])
def test_unparseable_counts_as_white(value):
    assert get_luminance_of(value) == 1.0


@given(a=hex_colors, b=hex_colors)
def test_contrast_is_symmetric_and_bounded(a, b):
    ratio = get_contrast_ratio_hex(a, b)
    assert ratio == pytest.approx(get_contrast_ratio_hex(b, a))
    assert 1.0 <= ratio <= 21.0 + 1e-9


@given(a=hex_colors)
def test_contrast_with_itself_is_one(a):
    assert get_contrast_ratio_hex(a, a) == pytest.approx(1.0)


def test_ratio_from_luminances_orders_arguments():
    assert get_contrast_ratio(0.0, 1.0) == get_contrast_ratio(1.0, 0.0)


@pytest.mark.parametrize(
    "background, expected",
    [
        ("#FFFFFF", "#000000"),
        ("#000000", "#FFFFFF"),
        ("#ffff00", "#000000"),
        ("#0000ff", "#FFFFFF"),
        ("#00897b", "#000000"),
        ("#145a50", "#FFFFFF"),
        ("#70d4c6", "#000000"),
    ],
)
def test_overlay_text_color(background, expected):
    assert get_overlay_text_color(background) == expected


def test_wcag_levels():
    assert get_wcag_levels(21.0) == {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Pass"}
    assert get_wcag_levels(4.5) == {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Fail"}
    assert get_wcag_levels(3.2)["AA"] == "Fail"
    assert get_wcag_levels(3.2)["AA-Large"] == "Pass"
    assert get_wcag_levels(1.0)["AA-Large"] == "Fail"
