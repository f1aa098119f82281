#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/resolver.py

import argparse
import random

from scalelab.core import config as c
from scalelab.core.types import PaletteParameters
from scalelab.shared.logger import log
from scalelab.shared.sanitizer import INPUT_HANDLERS
from .engine import generate_palette_from, get_curve_series, get_preset_parameters, get_step_contrasts
from .renderer import render_curves, render_palette


def add_palette_arguments(parser: argparse.ArgumentParser) -> None:
    """Palette inputs shared by the main command and 'export'."""
    hue_group = parser.add_mutually_exclusive_group()
    hue_group.add_argument(
        "-H",
        "--hue",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help=f"base hue in OKHsl degrees (default: {c.DEFAULT_BASE_HUE:g})",
    )
    hue_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base hue",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="palette_type",
        type=INPUT_HANDLERS["palette_type"],
        choices=list(c.PALETTE_PRESETS),
        default=c.DEFAULT_PALETTE_TYPE,
        help="palette preset providing hue shift and saturation defaults (default: color)",
    )
    parser.add_argument(
        "-hs",
        "--hue-shift",
        type=INPUT_HANDLERS["hue_shift"],
        default=None,
        help=f"extra hue added toward the light end ({c.HUE_SHIFT_MIN:g}-{c.HUE_SHIFT_MAX:g})",
    )
    parser.add_argument(
        "-smax",
        "--max-saturation",
        type=INPUT_HANDLERS["saturation"],
        default=None,
        help="saturation at the middle of the scale in percent (0-100)",
    )
    parser.add_argument(
        "-smin",
        "--min-saturation",
        type=INPUT_HANDLERS["saturation"],
        default=None,
        help="saturation at both ends of the scale in percent (0-100)",
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default=c.DEFAULT_BACKGROUND,
        help=f"background the contrast curve is measured against (default: {c.DEFAULT_BACKGROUND})",
    )


def resolve_palette_params(args: argparse.Namespace) -> PaletteParameters:
    """Turn parsed arguments into palette parameters, preset first then overrides."""
    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        base_hue = random.uniform(0.0, c.HUE_MAX)
    elif args.hue is not None:
        base_hue = args.hue
    else:
        base_hue = c.DEFAULT_BASE_HUE

    params = get_preset_parameters(base_hue, args.palette_type, args.background)
    overrides = {
        "hue_shift": args.hue_shift,
        "max_saturation": args.max_saturation,
        "min_saturation": args.min_saturation,
    }
    params = params._replace(**{k: v for k, v in overrides.items() if v is not None})

    if params.min_saturation > params.max_saturation:
        log(
            "warning",
            f"min saturation {params.min_saturation:g} exceeds max saturation "
            f"{params.max_saturation:g}, the curve will dip toward the middle",
        )
    return params


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution, palette generation and rendering."""
    params = resolve_palette_params(args)
    palette = generate_palette_from(params)

    contrasts = get_step_contrasts(palette, params.background_hex) if args.contrast else None
    render_palette(palette, params, contrasts)

    if args.curves:
        render_curves(get_curve_series(palette))
