#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/subcommands/command_registry.py

from . import (
    convert,
    notations
)

SUBCOMMANDS = {
    'convert': convert,
    'notations': notations
}
