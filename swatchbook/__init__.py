#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/__init__.py

from swatchbook.color import Color
from swatchbook.palette import InvalidPaletteJSON, Palette

__version__ = "0.1.0"

__all__ = ["Color", "Palette", "InvalidPaletteJSON", "__version__"]
