import argparse

import pytest

from scalelab.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#00897b", "#00897B"),
        ("fff", "#FFFFFF"),
        ("a", "#AAAAAA"),
        ("ab", "#ABABAB"),
        ("abcd", "#ABCD00"),
        ("#11223344", "#112233"),
    ],
)
def test_normalize_hex(value, expected):
    assert normalize_hex(value) == expected


def test_hex_handler_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["hex"]("zzz")


@pytest.mark.parametrize("value, expected", [("370", 10.0), ("-30", 330.0), ("180deg", 180.0)])
def test_hue_handler_wraps(value, expected):
    assert INPUT_HANDLERS["hue"](value) == pytest.approx(expected)


def test_range_handlers_clamp():
    assert INPUT_HANDLERS["hue_shift"]("45") == 20.0
    assert INPUT_HANDLERS["saturation"]("-5") == 0.0
    assert INPUT_HANDLERS["saturation"]("150%") == 100.0


def test_css_name_handler():
    assert INPUT_HANDLERS["css_name"]("--brand blue") == "brandblue"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["css_name"]("!!!")


def test_format_handler_lowercases():
    assert INPUT_HANDLERS["format"]("OKLCH") == "oklch"
