#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/export.py

import argparse
import sys

from scalelab.core import config as c
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.logic.palette.resolver import add_palette_arguments
from scalelab.logic.export.resolver import resolve_export_input


def get_export_parser() -> argparse.ArgumentParser:
    """Create argument parser for export command."""
    parser = ScalelabArgumentParser(
        prog="scalelab export",
        description="scalelab export: print a palette as CSS custom properties",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_palette_arguments(parser)
    parser.add_argument(
        "-n",
        "--name",
        type=INPUT_HANDLERS["css_name"],
        default=c.DEFAULT_EXPORT_NAME,
        help=f"variable name prefix, --NAME-500 (default: {c.DEFAULT_EXPORT_NAME})",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["format"],
        choices=c.EXPORT_FORMATS,
        default=c.DEFAULT_EXPORT_FORMAT,
        help=f"color format of the values (default: {c.DEFAULT_EXPORT_FORMAT})",
    )
    parser.add_argument(
        "-nw",
        "--no-wrapper",
        action="store_true",
        help="emit bare components instead of oklch(...), hsl(...), rgb(...)",
    )
    return parser


def main() -> None:
    """Main entry point for export command."""
    parser = get_export_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_export_input(args)


if __name__ == "__main__":
    main()
