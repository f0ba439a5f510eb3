#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/naming.py

import re
from typing import Dict, Mapping, Optional, Protocol, Tuple

from pipette.core import config as c
from pipette.core.color import Color
from .sanitizer import strip_quotes


class ColorNameRegistry(Protocol):
    """
    Bidirectional lookup between color names and colors.

    The tolerance flags loosen matching: ``tolerant_case`` ignores letter
    case, ``tolerant_whitespace`` ignores spaces, ``tolerant_punct`` ignores
    punctuation and ``tolerant_partial`` accepts an unambiguous prefix
    (for text) or ignores alpha (for colors).
    """

    def lookup_by_text(
        self,
        text: str,
        tolerant_case: bool,
        tolerant_whitespace: bool,
        tolerant_punct: bool,
        tolerant_partial: bool,
    ) -> Optional[Color]:
        ...

    def lookup_by_color(
        self,
        color: Color,
        tolerant_case: bool,
        tolerant_whitespace: bool,
        tolerant_punct: bool,
        tolerant_partial: bool,
    ) -> Optional[str]:
        ...


def _normalize_name(text: str, tolerant_case: bool, tolerant_whitespace: bool, tolerant_punct: bool) -> str:
    s = strip_quotes(text)
    if tolerant_case:
        s = s.lower()
    if tolerant_whitespace:
        s = re.sub(r"\s+", "", s)
    if tolerant_punct:
        s = re.sub(r"[^\w\s]|_", "", s)
    return s


class CssColorNames:
    """Registry over the CSS named colors (or any name -> 'RRGGBB' mapping)."""

    def __init__(self, colors: Mapping[str, str] = c.WEB_COLORS) -> None:
        self._names: Dict[str, Color] = {}
        self._by_rgb: Dict[Tuple[int, int, int], str] = {}
        for name, hex_code in colors.items():
            color = Color(int(hex_code[0:2], 16), int(hex_code[2:4], 16), int(hex_code[4:6], 16))
            self._names[name] = color
            # First name wins for aliases such as aqua/cyan and gray/grey
            self._by_rgb.setdefault(color.rgb, name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name) -> bool:
        return name in self._names

    def names(self):
        return list(self._names)

    def lookup_by_text(
        self,
        text: str,
        tolerant_case: bool = True,
        tolerant_whitespace: bool = True,
        tolerant_punct: bool = True,
        tolerant_partial: bool = True,
    ) -> Optional[Color]:
        key = _normalize_name(text, tolerant_case, tolerant_whitespace, tolerant_punct)
        if not key:
            return None

        candidates = {}
        for name, color in self._names.items():
            normalized = _normalize_name(name, tolerant_case, tolerant_whitespace, tolerant_punct)
            if normalized == key:
                return color
            if tolerant_partial and normalized.startswith(key):
                candidates[name] = color

        # A prefix is accepted only when every match names the same color
        if len(set(candidates.values())) == 1:
            return next(iter(candidates.values()))
        return None

    def lookup_by_color(
        self,
        color: Color,
        tolerant_case: bool = True,
        tolerant_whitespace: bool = True,
        tolerant_punct: bool = True,
        tolerant_partial: bool = True,
    ) -> Optional[str]:
        if not color.is_opaque and not tolerant_partial:
            return None
        return self._by_rgb.get(color.rgb)


DEFAULT_REGISTRY = CssColorNames()
