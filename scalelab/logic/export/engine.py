#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/export/engine.py

import math
from typing import List

from scalelab.core import config as c
from scalelab.core import conversions as conv
from scalelab.core.okhsl import okhsl_to_hex, okhsl_to_srgb
from scalelab.core.types import OKHslColor, PaletteEntry
from scalelab.shared.clamping import _clamp01


def _round(value: float, decimals: int) -> float:
    """Round half away from zero; the built-in round() rounds half to even."""
    factor = 10 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def _num(value: float) -> str:
    """Shortest text for an already rounded value: 0.1, 182, 100."""
    text = f"{value:g}"
    return "0" if text == "-0" else text


def _wrap(fn: str, values: str, wrapped: bool) -> str:
    return f"{fn}({values})" if wrapped else values


def to_hex(color: OKHslColor) -> str:
    return okhsl_to_hex(*color)


def to_oklch(color: OKHslColor, wrapped: bool = True) -> str:
    L, chroma, hue = conv.oklab_to_oklch(*conv.srgb_to_oklab(*okhsl_to_srgb(*color)))
    values = " ".join((
        _num(_round(L, c.OKLCH_LC_DECIMALS)),
        _num(_round(chroma, c.OKLCH_LC_DECIMALS)),
        _num(_round(hue, c.OKLCH_H_DECIMALS)),
    ))
    return _wrap("oklch", values, wrapped)


def to_hsl(color: OKHslColor, wrapped: bool = True) -> str:
    h, s, l = conv.rgb_to_hsl(*okhsl_to_srgb(*color))
    values = (
        f"{_num(_round(h, c.HSL_DECIMALS))} "
        f"{_num(_round(s * c.PERCENT, c.HSL_DECIMALS))}% "
        f"{_num(_round(l * c.PERCENT, c.HSL_DECIMALS))}%"
    )
    return _wrap("hsl", values, wrapped)


def to_rgb(color: OKHslColor, wrapped: bool = True) -> str:
    channels = (int(_round(_clamp01(ch) * c.RGB_MAX, 0)) for ch in okhsl_to_srgb(*color))
    return _wrap("rgb", " ".join(str(ch) for ch in channels), wrapped)


FORMATTERS = {
    "oklch": to_oklch,
    "hsl": to_hsl,
    "rgb": to_rgb,
}


def format_color(entry: PaletteEntry, fmt: str, wrapped: bool = True) -> str:
    """Render a palette entry as hex, oklch, hsl or rgb; anything else yields its hex."""
    if fmt == "hex" or fmt not in FORMATTERS:
        return entry.hex
    try:
        return FORMATTERS[fmt](entry.color, wrapped)
    except (ArithmeticError, ValueError):
        return entry.hex


def generate_css_variables(
    palette: List[PaletteEntry],
    name: str = c.DEFAULT_EXPORT_NAME,
    fmt: str = c.DEFAULT_EXPORT_FORMAT,
    wrapped: bool = True,
) -> str:
    """
    CSS custom property declarations, one per step:

        --primary-50: oklch(0.95 0.01 185);
        --primary-100: oklch(0.9 0.04 184);
    """
    return "\n".join(
        f"--{name}-{entry.scale}0: {format_color(entry, fmt, wrapped)};"
        for entry in palette
    )
