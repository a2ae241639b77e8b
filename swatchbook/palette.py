#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/palette.py

import json
import math
from typing import Any, Dict, List, Optional, Sequence

from swatchbook.color import Color
from swatchbook.core import config as c
from swatchbook.core import conversions as conv


class InvalidPaletteJSON(ValueError):
    """Raised when serialized palette text cannot be parsed as JSON."""


def _is_component_value(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        if not math.isfinite(value):
            return False
        conv.round_to_precision(value)
    except OverflowError:
        return False
    return value >= 0


def _validate_color_entry(entry: Any) -> None:
    components = entry.get("components") if isinstance(entry, dict) else None
    if not isinstance(components, list):
        raise TypeError("Components must be an array")

    if len(components) not in (c.MIN_COMPONENTS, c.MAX_COMPONENTS):
        raise ValueError("Components must have 3 or 4 values")

    for value in components:
        if not _is_component_value(value):
            raise ValueError("Component values must be numbers")


def _validate_document(document: Any) -> None:
    colors = document.get("colors") if isinstance(document, dict) else None
    if not isinstance(colors, list):
        raise TypeError("Colors must be an array")

    for entry in colors:
        _validate_color_entry(entry)


class Palette:
    """
    An ordered, optionally named collection of colors.

    The palette keeps its own list but shares the Color objects, so
    mutating a color after adding it is visible through ``palette.colors``.
    """

    def __init__(self, colors: Optional[Sequence[Color]] = None, name: Optional[str] = None):
        if colors is None:
            colors = []
        if not isinstance(colors, (list, tuple)):
            raise TypeError("Colors must be an array")

        for color in colors:
            if not isinstance(color, Color):
                raise TypeError("Each color must be an instance of Color")

        self.name = name
        self.colors: List[Color] = list(colors)

    @staticmethod
    def create_color(**options) -> Color:
        """Create a new color. Values are non-linear sRGB unless is_linear=True."""
        return Color(**options)

    @classmethod
    def deserialize(cls, data: str) -> "Palette":
        """Create a palette from text produced by serialize()."""
        try:
            document = json.loads(data)
        except (json.JSONDecodeError, ValueError, RecursionError) as exc:
            reason = getattr(exc, "msg", None) or str(exc) or type(exc).__name__
            raise InvalidPaletteJSON(f"Palette data is not valid JSON: {reason}") from exc

        _validate_document(document)

        colors = []
        for entry in document["colors"]:
            red, green, blue, *rest = entry["components"]
            opacity = rest[0] if rest else c.DEFAULT_OPACITY
            colors.append(
                Color(
                    name=entry.get("name"),
                    red=conv.round_to_precision(red),
                    green=conv.round_to_precision(green),
                    blue=conv.round_to_precision(blue),
                    opacity=conv.round_to_precision(opacity),
                    is_linear=True,
                )
            )

        return cls(colors=colors, name=document.get("name"))

    def to_json(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.name:
            result["name"] = self.name
        result["colors"] = [color.to_json() for color in self.colors]
        return result

    def serialize(self) -> str:
        """Serialize the palette to a tab-indented JSON document."""
        return json.dumps(self.to_json(), indent=c.JSON_INDENT, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"Palette(name={self.name!r}, colors={len(self.colors)})"
