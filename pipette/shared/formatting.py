#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/formatting.py

from typing import List

from pipette.core import config as c
from pipette.core import conversions as conv
from pipette.core.color import Color
from pipette.core.options import AlphaPosition, Illuminant, Observer


def _num(value: float, places: int) -> str:
    """Fixed precision with trailing zeros (and a bare '-0') trimmed."""
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _pct(fraction: float) -> str:
    return f"{_num(fraction * c.PERCENT, c.PRECISION_UNIT)}%"


def _functional(name: str, parts: List[str], color: Color, alpha_position: AlphaPosition) -> str:
    if alpha_position == AlphaPosition.NONE:
        return f"{name}({', '.join(parts)})"
    alpha = _num(color.unit_alpha, c.PRECISION_ALPHA)
    parts = [alpha] + parts if alpha_position == AlphaPosition.START else parts + [alpha]
    return f"{name}a({', '.join(parts)})"


def format_hex(color: Color, alpha_position: AlphaPosition = AlphaPosition.END) -> str:
    alpha = f"{color.alpha:02X}"
    if alpha_position == AlphaPosition.START:
        return f"#{alpha}{color.hex}"
    if alpha_position == AlphaPosition.END:
        return f"#{color.hex}{alpha}"
    return f"#{color.hex}"


def format_rgb(color: Color, alpha_position: AlphaPosition = AlphaPosition.END) -> str:
    parts = [str(v) for v in color.rgb]
    return _functional("rgb", parts, color, alpha_position)


def format_hsl(color: Color, alpha_position: AlphaPosition = AlphaPosition.END) -> str:
    h, s, l_val = conv.rgb_to_hsl(*color.rgb)
    parts = [_num(h, c.PRECISION_UNIT), _pct(s), _pct(l_val)]
    return _functional("hsl", parts, color, alpha_position)


def format_hsv(color: Color, alpha_position: AlphaPosition = AlphaPosition.END) -> str:
    h, s, v = conv.rgb_to_hsv(*color.rgb)
    parts = [_num(h, c.PRECISION_UNIT), _pct(s), _pct(v)]
    return _functional("hsv", parts, color, alpha_position)


def format_hwb(color: Color, alpha_position: AlphaPosition = AlphaPosition.END) -> str:
    h, w, b = conv.rgb_to_hwb(*color.rgb)
    parts = [_num(h, c.PRECISION_UNIT), _pct(w), _pct(b)]
    return _functional("hwb", parts, color, alpha_position)


def format_cmyk(color: Color) -> str:
    cy, m, y, k = conv.rgb_to_cmyk(*color.rgb)
    return f"cmyk({_pct(cy)}, {_pct(m)}, {_pct(y)}, {_pct(k)})"


def format_xyz(color: Color) -> str:
    x, y, z = conv.rgb_to_xyz(*color.rgb)
    p = c.PRECISION_XYZ
    return f"xyz({_num(x, p)}, {_num(y, p)}, {_num(z, p)})"


def format_cielab(
    color: Color,
    illuminant: Illuminant = Illuminant.D65,
    observer: Observer = Observer.TWO_DEGREE,
) -> str:
    L, a, b = conv.rgb_to_lab(*color.rgb, white=illuminant.white_point(observer))
    p = c.PRECISION_LAB
    return f"lab({_num(L, p)}, {_num(a, p)}, {_num(b, p)})"


def format_lch(color: Color) -> str:
    L, chroma, hue = conv.rgb_to_lch(*color.rgb)
    p = c.PRECISION_LAB
    return f"lch({_num(L, p)}, {_num(chroma, p)}, {_num(hue, p)})"


def format_lms(color: Color) -> str:
    l_val, m, s = conv.rgb_to_lms(*color.rgb)
    p = c.PRECISION_LMS
    return f"lms({_num(l_val, p)}, {_num(m, p)}, {_num(s, p)})"


def format_hunter_lab(
    color: Color,
    illuminant: Illuminant = Illuminant.D65,
    observer: Observer = Observer.TWO_DEGREE,
) -> str:
    L, a, b = conv.rgb_to_hunter_lab(*color.rgb, white=illuminant.white_point(observer))
    p = c.PRECISION_LAB
    return f"hunterlab({_num(L, p)}, {_num(a, p)}, {_num(b, p)})"


def format_oklab(color: Color) -> str:
    L, a, b = conv.rgb_to_oklab(*color.rgb)
    p = c.PRECISION_OKLAB
    return f"oklab({_num(L, p)}, {_num(a, p)}, {_num(b, p)})"


def format_oklch(color: Color) -> str:
    L, chroma, hue = conv.rgb_to_oklch(*color.rgb)
    p = c.PRECISION_OKLAB
    return f"oklch({_num(L, p)}, {_num(chroma, p)}, {_num(hue, c.PRECISION_OKLCH_HUE)})"
