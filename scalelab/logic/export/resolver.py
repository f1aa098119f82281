#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/export/resolver.py

import argparse

from scalelab.logic.palette.engine import generate_palette_from
from scalelab.logic.palette.resolver import resolve_palette_params
from .engine import generate_css_variables


def resolve_export_input(args: argparse.Namespace) -> None:
    """Generate the palette described by ``args`` and print it as CSS variables."""
    palette = generate_palette_from(resolve_palette_params(args))
    print(generate_css_variables(palette, args.name, args.format, not args.no_wrapper))
