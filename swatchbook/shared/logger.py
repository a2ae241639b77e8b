#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/shared/logger.py

import argparse
import os
import sys

from swatchbook.core import config as c


def _colors_enabled() -> bool:
    """Honors the NO_COLOR convention (https://no-color.org)."""
    return not os.environ.get(c.NO_COLOR_ENV)


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in c.STDOUT_LEVELS else sys.stderr
    message = " ".join(str(message).split())
    if not _colors_enabled():
        print(f"[{level}] {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class SwatchbookArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Reports argument errors through the color-coded logger,
        then exits with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
