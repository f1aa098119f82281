#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/engine.py

import math
from typing import List

from scalelab.core import config as c
from scalelab.core import conversions as conv
from scalelab.core.contrast import get_contrast_ratio
from scalelab.core.luminance import get_luminance_of
from scalelab.core.okhsl import okhsl_to_hex, xyz_to_okhsl
from scalelab.core.types import OKHslColor, PaletteEntry, PaletteParameters
from scalelab.shared.clamping import _clamp01


def calculate_hue(base_hue: float, hue_shift: float, n: float) -> float:
    """
    Hue at scale position n, compensating the Bezold-Brücke shift: lighter
    steps get more of the shift, darker steps less.
    """
    return conv.normalize_hue(base_hue + hue_shift * (1.0 - n))


def calculate_saturation(max_saturation: float, min_saturation: float, n: float) -> float:
    """Parabola through (0, Smin), (0.5, Smax), (1, Smin); inputs in percent."""
    s_max = max_saturation / c.PERCENT
    s_min = min_saturation / c.PERCENT
    span = s_max - s_min
    return _clamp01(-4.0 * span * n * n + 4.0 * span * n + s_min)


def calculate_target_contrast(n: float) -> float:
    return math.exp(c.CONTRAST_CURVE_K * n)


def calculate_lightness(background_y: float, n: float) -> float:
    """
    OKHsl lightness whose luminance sits at the target contrast against the
    background, darker than a light background or lighter than a dark one.
    """
    ratio = calculate_target_contrast(n)
    offset = c.WCAG_LUMINANCE_OFFSET
    if background_y > c.LIGHT_BACKGROUND_TH:
        y = (background_y + offset) / ratio - offset
    else:
        y = ratio * (background_y + offset) - offset
    y = _clamp01(y)

    # OKHsl lightness is not a rescaling of Y, go through the full chain
    _, _, l = xyz_to_okhsl(c.D65_X * y, y, c.D65_Z * y)
    return _clamp01(l)


def generate_palette(
    base_hue: float,
    hue_shift: float,
    max_saturation: float,
    min_saturation: float,
    background_hex: str = c.DEFAULT_BACKGROUND,
) -> List[PaletteEntry]:
    """Generate the eleven palette steps, ordered by scale."""
    background_y = get_luminance_of(background_hex)

    palette: List[PaletteEntry] = []
    for scale in c.SCALES:
        n = scale / c.SCALE_DIVISOR
        color = OKHslColor(
            h=calculate_hue(base_hue, hue_shift, n),
            s=calculate_saturation(max_saturation, min_saturation, n),
            l=calculate_lightness(background_y, n),
        )
        palette.append(PaletteEntry(scale=scale, color=color, hex=okhsl_to_hex(*color)))
    return palette


def generate_palette_from(params: PaletteParameters) -> List[PaletteEntry]:
    return generate_palette(
        params.base_hue,
        params.hue_shift,
        params.max_saturation,
        params.min_saturation,
        params.background_hex,
    )


def get_preset_parameters(
    base_hue: float,
    palette_type: str = c.DEFAULT_PALETTE_TYPE,
    background_hex: str = c.DEFAULT_BACKGROUND,
) -> PaletteParameters:
    """Parameters of the 'color' or 'neutral' palette type for a base hue."""
    hue_shift, max_saturation, min_saturation = c.PALETTE_PRESETS[palette_type]
    return PaletteParameters(
        base_hue=base_hue,
        hue_shift=hue_shift,
        max_saturation=max_saturation,
        min_saturation=min_saturation,
        background_hex=background_hex,
    )


def get_curve_series(palette: List[PaletteEntry]) -> List[dict]:
    """Per-step hue, saturation and lightness series, with CIE L* of the rendered hex."""
    series = []
    for entry in palette:
        series.append({
            "scale": entry.scale,
            "hue": entry.color.h,
            "saturation": entry.color.s * c.PERCENT,
            "lightness": entry.color.l * c.PERCENT,
            "lstar": conv.y_to_lstar(get_luminance_of(entry.hex)),
            "hex": entry.hex,
        })
    return series


def get_step_contrasts(palette: List[PaletteEntry], background_hex: str) -> List[float]:
    """Contrast ratio of every step against the background."""
    background_y = get_luminance_of(background_hex)
    return [get_contrast_ratio(get_luminance_of(entry.hex), background_y) for entry in palette]
