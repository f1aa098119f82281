#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/command_registry.py

from . import (
    contrast,
    export,
    hue,
)

SUBCOMMANDS = {
    'export': export,
    'contrast': contrast,
    'hue': hue,
}
