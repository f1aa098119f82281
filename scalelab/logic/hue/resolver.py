#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/hue/resolver.py

import argparse

from scalelab.core import config as c
from scalelab.core.hue_bridge import hsl_hue_to_okhsl_hue, okhsl_hue_to_hsl_hue


def resolve_hue_input(args: argparse.Namespace) -> None:
    """Map a hue dial value between HSL and OKHsl and print both sides."""
    if args.hsl is not None:
        src, dst, value = "hsl", "okhsl", hsl_hue_to_okhsl_hue(args.hsl)
        source = args.hsl
    else:
        src, dst, value = "okhsl", "hsl", okhsl_hue_to_hsl_hue(args.okhsl)
        source = args.okhsl

    if args.verbose:
        print(
            f"{src} {c.BOLD_WHITE}{source:.2f}{c.RESET} "
            f"{c.MSG_BOLD_COLORS['info']}->{c.RESET} {dst} {c.BOLD_WHITE}{value:.2f}{c.RESET}"
        )
    else:
        print(f"{value:.2f}")
