#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/sanitizer.py
#
# argparse ``type=`` handlers. Numbers are dug out of loose input such as
# "180deg" or "40%" and clamped into range; only input with nothing usable
# in it is rejected.

import argparse
import re

from scalelab.core import config as c

_HEX_DIGITS = re.compile(r"[0-9A-F]")
_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and newlines so the value prints on one log line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalize loose hex input to '#RRGGBB'.

    1, 2 and 3 digit shorthands are repeated ('A' -> 'AAAAAA', 'AB' ->
    'ABABAB', 'ABC' -> 'AABBCC'), 4 and 5 digits are right-padded with
    zeros, and anything past 6 digits (an alpha pair) is dropped.
    """
    if value is None:
        return ""
    digits = "".join(_HEX_DIGITS.findall(str(value).upper()))
    if not digits:
        return ""

    if len(digits) in (1, 2):
        digits = digits * (6 // len(digits))
    elif len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.ljust(6, '0')[:6]}"


def _extract_number(value: str, integer: bool = False):
    """First number found in ``value``, negative when the input starts with '-'."""
    if value is None:
        return None
    s = str(value).strip()
    match = _NUMBER.search(s)
    if not match:
        return None
    text = match.group(0)
    number = int(text.split(".")[0] or 0) if integer else float(text)
    return -number if s.startswith("-") else number


def _extract_alpha_only(value: str) -> str:
    """Lowercased letters of ``value``, used for preset and format names."""
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    cleaned = normalize_hex(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_string_clean(v: str) -> str:
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid string value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_css_name(v: str) -> str:
    """Keep the characters allowed in a CSS custom property name."""
    cleaned = "".join(re.findall(r"[A-Za-z0-9_-]", str(v or ""))).strip("-")
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid variable name: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_hue(v: str) -> float:
    """Hue angle in degrees, wrapped into [0, 360)."""
    val = _extract_number(v)
    if val is None:
        raise argparse.ArgumentTypeError(f"invalid hue value: '{_sanitize_for_log(v)}'")
    return val % c.HUE_MAX


def handle_range(min_v, max_v, integer: bool = False):
    """
    Factory returning a validator that clamps a number into [min_v, max_v]
    instead of rejecting it.
    """
    kind = "integer" if integer else "number"

    def validator(v: str):
        val = _extract_number(v, integer)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid {kind} value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "hue": handle_hue,
    "palette_type": handle_string_clean,
    "format": handle_string_clean,
    "css_name": handle_css_name,

    "hue_shift": handle_range(c.HUE_SHIFT_MIN, c.HUE_SHIFT_MAX),
    "saturation": handle_range(c.SATURATION_MIN, c.SATURATION_MAX),

    "seed": handle_range(0, 999_999_999_999_999_999, integer=True),
}
