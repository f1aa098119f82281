#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/contrast.py

import argparse
import sys

from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.preview import ensure_truecolor
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.logic.contrast.resolver import resolve_contrast_input


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ScalelabArgumentParser(
        prog="scalelab contrast",
        description="scalelab contrast: WCAG contrast ratio and overlay text color of two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX twice for the two colors",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_contrast_input(args)


if __name__ == "__main__":
    main()
