#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/shared/formatting.py

from typing import Dict

from swatchbook.core import config as c


def format_components(components: Dict[str, float], linear: bool = False) -> str:
    d = c.PRECISION_DIGITS
    r, g, b = components["red"], components["green"], components["blue"]
    a = components["opacity"]
    space = "srgb-linear" if linear else "srgb"
    return f"color({space} {r:.{d}f} {g:.{d}f} {b:.{d}f} / {a:.{d}f})"
