#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/contrast.py

from . import config as c
from .luminance import get_luminance_of


def get_contrast_ratio(lum1: float, lum2: float) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two relative luminances.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter of the two.
    """
    l1, l2 = (lum1, lum2) if lum1 > lum2 else (lum2, lum1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def get_contrast_ratio_hex(hex1: str, hex2: str) -> float:
    """Contrast ratio between two hex colors, unparseable colors count as white."""
    return get_contrast_ratio(get_luminance_of(hex1), get_luminance_of(hex2))


def get_wcag_levels(ratio: float) -> dict:
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }


def get_overlay_text_color(background_hex: str) -> str:
    """
    Black or white, whichever reads better on the given background.

    0.179 is the luminance at which black and white text give the same
    contrast ratio: (L + 0.05) / 0.05 == 1.05 / (L + 0.05).
    """
    if get_luminance_of(background_hex) > c.OVERLAY_LUMINANCE_TH:
        return c.OVERLAY_DARK
    return c.OVERLAY_LIGHT
