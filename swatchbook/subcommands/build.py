#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/subcommands/build.py

import argparse
import sys
from typing import List

from swatchbook.color import Color
from swatchbook.palette import Palette
from swatchbook.shared.logger import log, SwatchbookArgumentParser
from swatchbook.shared.sanitizer import INPUT_HANDLERS


def build_palette(hex_codes: List[str], labels: List[str], name: str = None) -> Palette:
    """Labels name the colors positionally; extra colors stay unnamed."""
    colors = []
    for i, hex_code in enumerate(hex_codes):
        label = labels[i] if i < len(labels) else None
        colors.append(Color.from_hex_string(hex_code, name=label))
    return Palette(colors=colors, name=name)


def handle_build_command(args: argparse.Namespace) -> None:
    labels = args.label or []
    if len(labels) > len(args.hex):
        log("warning", f"{len(labels) - len(args.hex)} label(s) without a color were ignored")

    try:
        palette = build_palette(args.hex, labels, args.name)
    except (TypeError, ValueError) as exc:
        log("error", str(exc))
        sys.exit(2)

    print(palette.serialize())


def get_build_parser() -> argparse.ArgumentParser:
    parser = SwatchbookArgumentParser(
        prog="swatchbook build",
        description="swatchbook build: serialize a palette from hex color codes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "hex",
        nargs="+",
        type=INPUT_HANDLERS["hex"],
        help="hex colors: RGB, RGBA, RRGGBB or RRGGBBAA (# optional)",
    )
    parser.add_argument(
        "-n",
        "--name",
        type=INPUT_HANDLERS["name"],
        default=None,
        help="palette name",
    )
    parser.add_argument(
        "-l",
        "--label",
        action="append",
        type=INPUT_HANDLERS["name"],
        help="color name, repeat once per color in order",
    )
    return parser


def main(argv: List[str] = None) -> None:
    parser = get_build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_build_command(args)


if __name__ == "__main__":
    main()
