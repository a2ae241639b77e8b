#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: swatchbook/subcommands/command_registry.py

from . import (
    build,
    show,
)

SUBCOMMANDS = {
    'build': build,
    'show': show,
}
