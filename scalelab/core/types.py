#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/types.py

from typing import NamedTuple

from . import config as c


class OKHslColor(NamedTuple):
    """A color in OKHsl: hue in degrees, saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float


class PaletteEntry(NamedTuple):
    """One generated palette step. ``hex`` is a cache of ``color`` as ``#rrggbb``."""

    scale: int
    color: OKHslColor
    hex: str


class PaletteParameters(NamedTuple):
    """
    Inputs of a palette generation.

    Saturations are percentages. ``min_saturation <= max_saturation`` is a
    caller precondition: an inverted pair is passed through as is and the
    resulting curve is clamped to [0, 1].
    """

    base_hue: float = c.DEFAULT_BASE_HUE
    hue_shift: float = c.PALETTE_PRESETS[c.DEFAULT_PALETTE_TYPE][0]
    max_saturation: float = c.PALETTE_PRESETS[c.DEFAULT_PALETTE_TYPE][1]
    min_saturation: float = c.PALETTE_PRESETS[c.DEFAULT_PALETTE_TYPE][2]
    background_hex: str = c.DEFAULT_BACKGROUND
