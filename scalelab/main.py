#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/main.py

import argparse
import sys

from scalelab import __version__
from scalelab.logic.palette.resolver import add_palette_arguments, resolve_palette_input
from scalelab.subcommands.command_registry import SUBCOMMANDS
from scalelab.shared.logger import log, ScalelabArgumentParser
from scalelab.shared.preview import ensure_truecolor


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main palette command."""
    parser = ScalelabArgumentParser(
        prog="scalelab",
        description="scalelab: perceptual OKHsl palette scales with a contrast-driven lightness curve",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"scalelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    add_palette_arguments(parser)

    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast ratio of every step against the background",
    )
    info_group.add_argument(
        "-c",
        "--curves",
        action="store_true",
        help="show hue, saturation and lightness curves",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def print_full_help() -> None:
    """Main help followed by the help of every subcommand."""
    get_palette_parser().print_help()
    for name, module in SUBCOMMANDS.items():
        getter = getattr(module, f"get_{name}_parser", None)
        if getter is None:
            log("info", f"help for '{name}' not available")
            continue
        print("\n" * 2)
        getter().print_help()


def handle_palette_command(args: argparse.Namespace) -> None:
    """Entry point for the core palette command."""
    if args.help_full:
        print_full_help()
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    resolve_palette_input(args)


def main() -> None:
    """Main entry point for scalelab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_palette_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_palette_command(args)
    sys.exit(0)


if __name__ == "__main__":
    main()
