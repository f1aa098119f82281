import pytest

from scalelab.core.types import OKHslColor, PaletteEntry
from scalelab.logic.export.engine import (
    _round,
    format_color,
    generate_css_variables,
    to_hex,
    to_hsl,
    to_oklch,
    to_rgb,
)


def _middle(palette):
    return palette[5]


def test_hex_format_returns_cached_hex(teal_palette):
    entry = _middle(teal_palette)
    assert format_color(entry, "hex") == "#00897b"
    assert to_hex(entry.color) == entry.hex


@pytest.mark.parametrize(
    "fmt, wrapped, expected",
    [
        ("oklch", True, "oklch(0.56 0.1 182)"),
        ("oklch", False, "0.56 0.1 182"),
        ("hsl", True, "hsl(173.9 100% 26.8%)"),
        ("hsl", False, "173.9 100% 26.8%"),
        ("rgb", True, "rgb(0 137 123)"),
        ("rgb", False, "0 137 123"),
    ],
)
def test_middle_step_formats(teal_palette, fmt, wrapped, expected):
    assert format_color(_middle(teal_palette), fmt, wrapped) == expected


def test_formatters_called_directly(teal_palette):
    color = teal_palette[2].color
    assert to_hsl(color) == "hsl(171.8 53.6% 63.5%)"
    assert to_rgb(color) == "rgb(112 212 198)"
    assert to_oklch(teal_palette[0].color) == "oklch(0.95 0.01 185)"


def test_unknown_format_falls_back_to_hex(teal_palette):
    entry = _middle(teal_palette)
    assert format_color(entry, "cmyk") == entry.hex


def test_white_and_black():
    white = PaletteEntry(5, OKHslColor(0.0, 0.0, 1.0), "#ffffff")
    black = PaletteEntry(95, OKHslColor(0.0, 0.0, 0.0), "#000000")
    assert format_color(white, "rgb") == "rgb(255 255 255)"
    assert format_color(black, "rgb") == "rgb(0 0 0)"
    assert format_color(black, "oklch") == "oklch(0 0 0)"
    assert format_color(white, "hsl") == "hsl(0 0% 100%)"


def test_css_variables(teal_palette):
    lines = generate_css_variables(teal_palette, "primary").split("\n")
    assert len(lines) == 11
    assert lines[0] == "--primary-50: oklch(0.95 0.01 185);"
    assert lines[1] == "--primary-100: oklch(0.9 0.04 184);"
    assert lines[5] == "--primary-500: oklch(0.56 0.1 182);"
    names = [line.split(":")[0] for line in lines]
    assert names == [
        f"--primary-{step}"
        for step in (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
    ]


def test_css_variables_hex(teal_palette):
    text = generate_css_variables(teal_palette, "teal", "hex")
    assert text.startswith("--teal-50: #e8f0ee;\n")
    assert text.endswith("--teal-950: #111917;")


def test_css_variables_unwrapped(teal_palette):
    text = generate_css_variables(teal_palette, fmt="rgb", wrapped=False)
    assert "--color-500: 0 137 123;" in text.split("\n")


@pytest.mark.parametrize(
    "value, decimals, expected",
    [(2.5, 0, 3.0), (0.5, 0, 1.0), (0.125, 2, 0.13), (-2.5, 0, -3.0), (182.49, 0, 182.0)],
)
def test_round_half_away_from_zero(value, decimals, expected):
    assert _round(value, decimals) == expected
