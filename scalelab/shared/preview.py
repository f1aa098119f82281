#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/preview.py

import os
import re
import sys

from scalelab.core import config as c
from scalelab.core.contrast import get_overlay_text_color
from scalelab.core.conversions import hex_to_rgb

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

SWATCH_WIDTH = 16
TITLE_WIDTH = 18


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub("", s))


def paint(hex_code: str, text: str) -> str:
    """``text`` on a truecolor background, in whichever of black/white reads better."""
    r, g, b = hex_to_rgb(hex_code)
    fr, fg, fb = hex_to_rgb(get_overlay_text_color(hex_code))
    return f"\033[48;2;{r};{g};{b}m\033[38;2;{fr};{fg};{fb}m{text}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", label: str = "", end: str = "\n") -> None:
    padding = " " * max(0, TITLE_WIDTH - get_visible_len(title))
    swatch = paint(hex_code, f" {label:<{SWATCH_WIDTH - 1}}")
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)
