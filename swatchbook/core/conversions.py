#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/core/conversions.py

import math
from typing import Tuple

from . import config as c
from swatchbook.shared.clamping import _clamp01
from swatchbook.shared.sanitizer import normalize_hex


def srgb_to_linear(srgb: float) -> float:
    """Linearize a gamma-encoded sRGB component."""
    if srgb <= c.SRGB_TO_LINEAR_TH:
        return srgb / c.SRGB_SLOPE
    return ((srgb + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(linear: float) -> float:
    """Apply sRGB gamma to a linear component."""
    if linear <= c.LINEAR_TO_SRGB_TH:
        return linear * c.SRGB_SLOPE
    return (linear ** (c.UNIT / c.SRGB_GAMMA)) * c.SRGB_DIVISOR - c.SRGB_OFFSET


def round_to_precision(value: float, digits: int = c.PRECISION_DIGITS) -> float:
    """
    Round half up to a fixed number of decimal places.

    Raises OverflowError when the scaled value is not a finite float.
    """
    multiplier = 10 ** digits
    scaled = value * multiplier + c.HALF
    if not math.isfinite(scaled):
        raise OverflowError("value out of range for rounding")
    return math.floor(scaled) / multiplier


def clamp_opacity(value: float) -> float:
    return _clamp01(value)


def hex_to_rgba(hex_code: str) -> Tuple[float, float, float, float]:
    """Convert a hex color string to normalized (r, g, b, a) channels."""
    if not isinstance(hex_code, str):
        raise TypeError("Invalid hex color format: expected a string")
    h = normalize_hex(hex_code)
    if not h:
        raise ValueError("Invalid hex color format")
    return tuple(int(h[i : i + 2], 16) / c.HEX_BYTE_MAX for i in (0, 2, 4, 6))


def hex_number_to_rgba(value: int) -> Tuple[float, float, float, float]:
    """
    Convert a packed hex integer to normalized (r, g, b, a) channels.

    The layout is chosen by magnitude: 0xRGB, 0xRGBA, 0xRRGGBB or 0xRRGGBBAA.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError("Invalid hex value")
    if value < 0 or value > c.MAX_HEX_RGBA:
        raise ValueError("Invalid hex value")

    if value <= c.MAX_HEX_RGB_SHORT:
        nibbles = ((value >> 8) & 0xF, (value >> 4) & 0xF, value & 0xF)
        return tuple(n / c.HEX_NIBBLE_MAX for n in nibbles) + (c.UNIT,)
    if value <= c.MAX_HEX_RGBA_SHORT:
        nibbles = ((value >> 12) & 0xF, (value >> 8) & 0xF, (value >> 4) & 0xF, value & 0xF)
        return tuple(n / c.HEX_NIBBLE_MAX for n in nibbles)
    if value <= c.MAX_HEX_RGB:
        channels = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        return tuple(b / c.HEX_BYTE_MAX for b in channels) + (c.UNIT,)
    channels = ((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    return tuple(b / c.HEX_BYTE_MAX for b in channels)
