#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/subcommands/show.py

import argparse
import sys
from typing import List

from swatchbook.core import config as c
from swatchbook.palette import Palette
from swatchbook.shared.logger import log, SwatchbookArgumentParser
from swatchbook.shared.preview import print_color_block


def handle_show_command(args: argparse.Namespace) -> None:
    data = sys.stdin.read()
    try:
        palette = Palette.deserialize(data)
    except (TypeError, ValueError) as exc:
        log("error", str(exc))
        sys.exit(2)

    print()
    print(f"{c.BOLD_WHITE}{palette.name or 'untitled'}{c.RESET} ({len(palette.colors)} colors)")
    for i, color in enumerate(palette.colors, start=1):
        title = color.name or f"color {i}"
        print_color_block(color, title, linear=args.linear, hide_bars=args.hide_bars)
    print()


def get_show_parser() -> argparse.ArgumentParser:
    parser = SwatchbookArgumentParser(
        prog="swatchbook show",
        description="swatchbook show: preview a serialized palette read from stdin",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--linear",
        action="store_true",
        help="print linear sRGB components instead of gamma-encoded ones",
    )
    parser.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    return parser


def main(argv: List[str] = None) -> None:
    parser = get_show_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_show_command(args)


if __name__ == "__main__":
    main()
