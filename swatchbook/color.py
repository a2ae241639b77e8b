#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/color.py

import math
from numbers import Real
from typing import Any, Dict, Optional

from swatchbook.core import config as c
from swatchbook.core import conversions as conv


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _validate_component(value, name: str) -> None:
    if not _is_number(value):
        raise TypeError(f"{name} component must be a number")


def _to_linear(value: float, name: str, is_linear: bool = False) -> float:
    """Validate a channel and return its linear value, unrounded."""
    _validate_component(value, name)
    try:
        linear = value if is_linear else conv.srgb_to_linear(value)
        # Stored values must stay roundable for serialization.
        conv.round_to_precision(linear)
    except OverflowError as exc:
        raise TypeError(f"{name} component must be a number") from exc
    return linear


class Color:
    """
    A single color in extended sRGB.

    Channels are stored in linear sRGB and may fall outside 0...1 for
    wide-gamut colors. The red, green and blue properties read and write
    the gamma-encoded (non-linear) values.

    Values given to the constructor are rounded to 4 decimal places and
    opacity is clamped to 0...1. Setters do not round, so incremental edits
    such as ``color.red += 0.1`` keep full precision until serialization.
    """

    def __init__(
        self,
        red: float,
        green: float,
        blue: float,
        opacity: float = c.DEFAULT_OPACITY,
        name: Optional[str] = None,
        is_linear: bool = False,
    ):
        red = _to_linear(red, "Red", is_linear)
        green = _to_linear(green, "Green", is_linear)
        blue = _to_linear(blue, "Blue", is_linear)
        _validate_component(opacity, "Opacity")

        self.name = name
        self._linear_red = conv.round_to_precision(red)
        self._linear_green = conv.round_to_precision(green)
        self._linear_blue = conv.round_to_precision(blue)
        self._opacity = conv.round_to_precision(conv.clamp_opacity(opacity))

    @classmethod
    def from_hex_string(cls, value: str, name: Optional[str] = None) -> "Color":
        """Create a color from '#RGB', '#RGBA', '#RRGGBB' or '#RRGGBBAA' (the '#' is optional)."""
        r, g, b, a = conv.hex_to_rgba(value)
        return cls(red=r, green=g, blue=b, opacity=a, name=name)

    @classmethod
    def from_hex_number(cls, value: int, name: Optional[str] = None) -> "Color":
        """Create a color from a packed integer such as 0xF00 or 0xFF000080."""
        r, g, b, a = conv.hex_number_to_rgba(value)
        return cls(red=r, green=g, blue=b, opacity=a, name=name)

    @property
    def red(self) -> float:
        return conv.linear_to_srgb(self._linear_red)

    @red.setter
    def red(self, value: float) -> None:
        self._linear_red = _to_linear(value, "Red")

    @property
    def green(self) -> float:
        return conv.linear_to_srgb(self._linear_green)

    @green.setter
    def green(self, value: float) -> None:
        self._linear_green = _to_linear(value, "Green")

    @property
    def blue(self) -> float:
        return conv.linear_to_srgb(self._linear_blue)

    @blue.setter
    def blue(self, value: float) -> None:
        self._linear_blue = _to_linear(value, "Blue")

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        if not _is_number(value):
            raise TypeError("Opacity must be a number")
        self._opacity = conv.clamp_opacity(value)

    @property
    def components(self) -> Dict[str, float]:
        """Components in non-linear sRGB."""
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "opacity": self.opacity,
        }

    @property
    def linear_components(self) -> Dict[str, float]:
        """Components in linear sRGB."""
        return {
            "red": self._linear_red,
            "green": self._linear_green,
            "blue": self._linear_blue,
            "opacity": self._opacity,
        }

    def to_json(self) -> Dict[str, Any]:
        """Canonical serialized form: rounded linear components, alpha only when not opaque."""
        components = [
            conv.round_to_precision(self._linear_red),
            conv.round_to_precision(self._linear_green),
            conv.round_to_precision(self._linear_blue),
        ]
        if self._opacity != c.OPACITY_MAX:
            components.append(conv.round_to_precision(self._opacity))

        result = {"components": components}
        if self.name:
            result["name"] = self.name
        return result

    def __repr__(self) -> str:
        lin = self.linear_components
        return (
            f"Color(name={self.name!r}, linear=({lin['red']}, {lin['green']}, {lin['blue']}), "
            f"opacity={lin['opacity']})"
        )
