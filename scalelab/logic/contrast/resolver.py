#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/contrast/resolver.py

import argparse
import sys

from scalelab.core.contrast import get_contrast_ratio_hex, get_overlay_text_color, get_wcag_levels
from scalelab.shared.logger import log
from .renderer import render_contrast


def resolve_contrast_input(args: argparse.Namespace) -> None:
    """Validate the two input colors and report their contrast."""
    colors = args.hex or []
    if len(colors) != 2:
        log("error", "exactly two hex codes are required for a contrast check")
        log("info", "use -H HEX twice")
        sys.exit(2)

    first, second = colors
    ratio = get_contrast_ratio_hex(first, second)
    render_contrast(
        first,
        second,
        ratio,
        get_wcag_levels(ratio),
        {h: get_overlay_text_color(h) for h in colors},
    )
