#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/shared/preview.py

import re

from swatchbook.color import Color
from swatchbook.core import config as c
from swatchbook.shared.clamping import _clamp255
from swatchbook.shared.formatting import format_components


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def _to_byte(v: float) -> int:
    return int(round(_clamp255(v * c.RGB_MAX)))


def render_color_line(color: Color, title: str = "color", linear: bool = False, hide_bars: bool = False) -> str:
    """Compose one preview line: title, truecolor block, formatted components."""
    vis_len = get_visible_len(title)
    padding = " " * max(0, c.TITLE_WIDTH - vis_len)
    components = color.linear_components if linear else color.components
    values = f"{c.BOLD_WHITE}{format_components(components, linear)}{c.RESET}"

    if hide_bars:
        return f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {values}"

    # Wide-gamut channels are clipped for display only.
    r, g, b = _to_byte(color.red), _to_byte(color.green), _to_byte(color.blue)
    block = f"\033[48;2;{r};{g};{b}m{' ' * c.BLOCK_WIDTH}{c.RESET}"
    return f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {block}  {values}"


def print_color_block(color: Color, title: str = "color", linear: bool = False, hide_bars: bool = False, end: str = "\n") -> None:
    print(render_color_line(color, title, linear, hide_bars), end=end)
