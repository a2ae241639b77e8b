#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/main.py

import argparse
import sys

from swatchbook import __version__
from swatchbook.subcommands.command_registry import SUBCOMMANDS
from swatchbook.shared.logger import log, SwatchbookArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    parser = SwatchbookArgumentParser(
        prog="swatchbook",
        description="swatchbook: build and preview linear sRGB color palettes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"swatchbook {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="one of: " + ", ".join(SUBCOMMANDS),
    )
    return parser


def main() -> None:
    """Main entry point for swatchbook CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)
    parser.print_help()


if __name__ == "__main__":
    main()
