#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/hue.py

import argparse
import sys

from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.logic.hue.resolver import resolve_hue_input


def get_hue_parser() -> argparse.ArgumentParser:
    """Create argument parser for hue command."""
    parser = ScalelabArgumentParser(
        prog="scalelab hue",
        description="scalelab hue: convert a hue angle between HSL and OKHsl",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "--hsl",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help="HSL hue to express in OKHsl",
    )
    source_group.add_argument(
        "--okhsl",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help="OKHsl hue to express in HSL",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show the source hue next to the result",
    )
    return parser


def main() -> None:
    """Main entry point for hue command."""
    parser = get_hue_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_hue_input(args)


if __name__ == "__main__":
    main()
