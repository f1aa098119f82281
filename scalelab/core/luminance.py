#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/luminance.py

from typing import Union

from . import config as c
from . import conversions as conv
from .okhsl import okhsl_to_srgb
from .types import OKHslColor


def get_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance (CIE XYZ Y, D65) of gamma-encoded sRGB floats."""
    return conv.srgb_to_xyz(r, g, b)[1]


def get_luminance_of(color: Union[str, OKHslColor]) -> float:
    """
    Relative luminance of a hex string or an OKHsl color.

    Unparseable input is treated as white (luminance 1.0).
    """
    if isinstance(color, OKHslColor):
        srgb = okhsl_to_srgb(color.h, color.s, color.l)
    elif isinstance(color, str):
        srgb = conv.hex_to_srgb(color)
    else:
        srgb = None

    if srgb is None:
        return c.DEFAULT_LUMINANCE
    return get_luminance(*srgb)
