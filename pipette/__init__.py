#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/__init__.py

__version__ = "0.1.0"

from pipette.core.color import Color, ColorError
from pipette.core.options import AlphaPosition, ColorConfig, Illuminant, Observer
from pipette.notation import Notation, format_color, parse
from pipette.shared.naming import DEFAULT_REGISTRY, ColorNameRegistry, CssColorNames

__all__ = [
    "__version__",
    "AlphaPosition",
    "Color",
    "ColorConfig",
    "ColorError",
    "ColorNameRegistry",
    "CssColorNames",
    "DEFAULT_REGISTRY",
    "Illuminant",
    "Notation",
    "Observer",
    "format_color",
    "parse",
]
