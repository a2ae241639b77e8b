#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
HALF = 0.5                         # Rounding bias for half-up rounding

# ==========================================
# Storage & Precision
# ==========================================

PRECISION_DIGITS = 4               # Decimal places kept for stored and serialized values
OPACITY_MIN = 0.0                  # Fully transparent
OPACITY_MAX = 1.0                  # Fully opaque
DEFAULT_OPACITY = 1.0              # Opacity used when none is given

# ==========================================
# Hex Notation Limits
# ==========================================

HEX_NIBBLE_MAX = 15.0              # Max value of a 4-bit channel
HEX_BYTE_MAX = 255.0               # Max value of an 8-bit channel
MAX_HEX_RGB_SHORT = 0xFFF          # Largest 12-bit value, read as #RGB
MAX_HEX_RGBA_SHORT = 0xFFFF        # Largest 16-bit value, read as #RGBA
MAX_HEX_RGB = 0xFFFFFF             # Largest 24-bit value, read as #RRGGBB
MAX_HEX_RGBA = 0xFFFFFFFF          # Largest 32-bit value, read as #RRGGBBAA
HEX_LENGTHS = (3, 4, 6, 8)         # Accepted digit counts for hex strings

# ==========================================
# Serialization
# ==========================================

JSON_INDENT = "\t"                 # Indentation for serialized palettes
MIN_COMPONENTS = 3                 # [r, g, b]
MAX_COMPONENTS = 4                 # [r, g, b, a]

# ==========================================
# Terminal Output
# ==========================================

BLOCK_WIDTH = 16                   # Width of a preview color block in cells
TITLE_WIDTH = 18                   # Column reserved for color names
NO_COLOR_ENV = "NO_COLOR"          # Set to any value to disable ANSI styling in log output
STDOUT_LEVELS = ("info", "success")  # Log levels written to stdout; the rest go to stderr

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
