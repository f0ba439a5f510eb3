#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/preview.py

import os
import re
import sys

from pipette.core import config as c
from pipette.core.color import Color

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(color: Color, title: str = "color", label: str = "", end: str = "\n") -> None:
    """Prints an aligned title, a 24-bit background swatch and the given label."""
    r, g, b = color.rgb
    padding = " " * max(0, 18 - get_visible_len(title))
    text = label or f"#{color.hex}"
    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}"
        f"  {c.BOLD_WHITE}{text}{c.RESET}",
        end=end,
    )
