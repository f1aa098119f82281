#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/hue_bridge.py
#
# Hue correspondence between standard HSL and OKHsl. Near the achromatic
# axis hue depends on saturation and lightness in both models, so the
# mapping is taken at a fixed reference point (s = 0.8, l = 0.5 in HSL).

import math

from . import config as c
from . import conversions as conv
from .okhsl import srgb_to_okhsl


def hsl_hue_to_okhsl_hue(h: float) -> float:
    """OKHsl hue of the HSL color (h, 0.8, 0.5); ``h`` unchanged if that hue is undefined."""
    if not math.isfinite(h):
        return h
    hue = conv.normalize_hue(h)
    ok_h, _, _ = srgb_to_okhsl(*conv.hsl_to_rgb(hue, c.HUE_BRIDGE_SATURATION, c.HUE_BRIDGE_LIGHTNESS))
    if ok_h is None or not math.isfinite(ok_h):
        return h
    return ok_h


def okhsl_hue_to_hsl_hue(h: float) -> float:
    """
    HSL hue whose OKHsl counterpart is ``h``, the inverse of
    hsl_hue_to_okhsl_hue.

    The forward mapping is strictly increasing around the circle, so the
    inverse is found by bisection on hue offsets measured from the image of
    HSL hue 0.
    """
    if not math.isfinite(h):
        return h
    target = conv.normalize_hue(h)
    origin = hsl_hue_to_okhsl_hue(0.0)
    offset = (target - origin) % c.HUE_MAX

    lo, hi = 0.0, c.HUE_MAX
    for _ in range(c.HUE_BRIDGE_ITERATIONS):
        mid = (lo + hi) / 2.0
        if (hsl_hue_to_okhsl_hue(mid) - origin) % c.HUE_MAX < offset:
            lo = mid
        else:
            hi = mid
    return conv.normalize_hue((lo + hi) / 2.0)
