#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/logger.py

import argparse
import sys

from scalelab.core import config as c

# Levels routed to stdout, everything else goes to stderr
STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Print ``[level] message`` with the level's ANSI colors."""
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag = f"{c.MSG_BOLD_COLORS.get(level, c.RESET)}[{level}]{c.RESET}"
    print(f"{tag} {c.MSG_COLORS.get(level, c.RESET)}{message}{c.RESET}", file=stream)


class ScalelabArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors go through ``log`` instead of argparse's plain stderr dump."""

    def error(self, message):
        log("error", message)
        log("info", f"run '{self.prog} -h' for usage")
        sys.exit(2)
