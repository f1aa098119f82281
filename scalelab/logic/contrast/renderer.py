#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/contrast/renderer.py

from scalelab.core import config as c
from scalelab.shared.preview import print_color_block


def render_contrast(first: str, second: str, ratio: float, levels: dict, overlays: dict) -> None:
    """Print both colors with their overlay text, then the ratio and WCAG levels."""
    print()
    for title, hex_code in (("color 1", first), ("color 2", second)):
        print_color_block(hex_code, title, f"text {overlays[hex_code]}")
    print()
    print(f"{'contrast':<18}{c.BOLD_WHITE}:{c.RESET}   {c.BOLD_WHITE}{ratio:.2f}:1{c.RESET}")
    for level, result in levels.items():
        color = c.MSG_BOLD_COLORS["success"] if result == "Pass" else c.MSG_BOLD_COLORS["error"]
        print(f"{level:<18}{c.BOLD_WHITE}:{c.RESET}   {color}{result}{c.RESET}")
    print()
