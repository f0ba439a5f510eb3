#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/logic/convert/renderer.py

from pipette.core import config as c
from pipette.core.color import Color
from pipette.core.options import ColorConfig
from pipette.notation import Notation


def render_convert_info(color: Color, notation: Notation, config: ColorConfig) -> str:
    """Formats the color in the given notation for terminal output."""
    text = notation.format(color, config)
    if notation is Notation.NAME and text == c.NOT_NAMED:
        return f"{c.MSG_BOLD_COLORS['error']}{text}{c.RESET}"
    return f"{c.BOLD_WHITE}{text}{c.RESET}"
