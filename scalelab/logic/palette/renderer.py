#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/renderer.py

from typing import List, Optional

from scalelab.core import config as c
from scalelab.core.contrast import get_wcag_levels
from scalelab.core.types import PaletteEntry, PaletteParameters
from scalelab.shared.preview import print_color_block


def _bold(t) -> str:
    return f"{c.BOLD_WHITE}{t}{c.RESET}"


def _pass_fail(result: str) -> str:
    color = c.MSG_BOLD_COLORS["success"] if result == "Pass" else c.MSG_BOLD_COLORS["error"]
    return f"{color}{result}{c.RESET}"


def render_palette(
    palette: List[PaletteEntry],
    params: PaletteParameters,
    contrasts: Optional[List[float]] = None,
) -> None:
    """Print every step as a swatch, optionally with its contrast against the background."""
    print()
    print(
        f"hue {_bold(f'{params.base_hue:.2f}')}  "
        f"shift {_bold(f'{params.hue_shift:g}')}  "
        f"saturation {_bold(f'{params.min_saturation:g}-{params.max_saturation:g}%')}  "
        f"background {_bold(params.background_hex)}"
    )
    print()
    for i, entry in enumerate(palette):
        title = f"{c.MSG_BOLD_COLORS['info']}scale {entry.scale}{c.RESET}"
        label = str(entry.scale * 10)
        if contrasts is None:
            print_color_block(entry.hex, title, label)
            continue
        print_color_block(entry.hex, title, label, end="")
        ratio = contrasts[i]
        print(f"  {ratio:5.2f}:1  AA {_pass_fail(get_wcag_levels(ratio)['AA'])}")
    print()


def render_curves(series: List[dict]) -> None:
    """Print the hue, saturation and lightness curves as a table."""
    print(f"{c.BOLD_WHITE}{'scale':>7}{'hue':>10}{'sat %':>9}{'light %':>10}{'L*':>8}{c.RESET}")
    for point in series:
        print(
            f"{point['scale']:>7}"
            f"{point['hue']:>10.2f}"
            f"{point['saturation']:>9.1f}"
            f"{point['lightness']:>10.1f}"
            f"{point['lstar']:>8.1f}"
        )
    print()
