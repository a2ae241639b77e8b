#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/shared/sanitizer.py

import argparse
import re

from swatchbook.core import config as c

_HEX_DIGITS = re.compile(r"#?([0-9A-Fa-f]+)")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color string into the 8-character uppercase RRGGBBAA form.

    Accepts an optional leading '#' followed by exactly 3, 4, 6 or 8 hex digits.
    Shorthand forms have every digit doubled ('F08' -> 'FF0088FF') and a missing
    alpha becomes 'FF'. Returns an empty string for anything else.
    """
    if not isinstance(value, str):
        return ""

    match = _HEX_DIGITS.fullmatch(value)
    if not match:
        return ""

    digits = match.group(1).upper()
    L = len(digits)
    if L not in c.HEX_LENGTHS:
        return ""
    if L in (3, 4):
        # e.g., 'ABC' becomes 'AABBCC'
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "FF"
    return digits


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(str(v).strip())
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_name(v: str) -> str:
    """Validator for palette and color names."""
    cleaned = _sanitize_for_log(v)
    if not cleaned:
        raise argparse.ArgumentTypeError("name must not be empty")
    return cleaned


INPUT_HANDLERS = {
    "hex": handle_hex,
    "name": handle_name,
}
