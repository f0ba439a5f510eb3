#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/parser.py

"""
Text to Color parsers, one per notation.

Every parser takes raw user text and returns ``(remaining_text, color)``:
the color expression is consumed from the start of the text and whatever
follows it is handed back so callers can embed a color in a larger
grammar. Standalone callers must check that the remainder is blank.

Accepted shapes, for a notation named ``xyz``::

    xyz(1, 2, 3)      xyz(1 2 3)      xyz(1 2 3 / 0.5)
    (1, 2, 3)         1, 2, 3         1 2 3

Components may carry ``%`` and, for hues, ``deg``/``°``/``rad``/``grad``/
``turn``. Out-of-domain numbers raise ColorError; hues wrap modulo 360.
"""

import math
import re
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pipette.core import config as c
from pipette.core import conversions as conv
from pipette.core.color import Color, ColorError
from pipette.core.options import AlphaPosition, Illuminant, Observer
from .sanitizer import _sanitize_for_log, normalize_input

ParseResult = Tuple[str, Color]

# Regex breakdown:
# [-+]?                  -> Optional positive or negative sign
# (?:\d+\.?\d*|\.\d+)    -> Integer ("12"), decimal ("12.5", "12.") or leading-dot (".5")
# (?:[eE][-+]?\d+)?      -> Optional scientific notation suffix (e.g., "e-4", "E10")
_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_COMPONENT_RE = re.compile(rf"(?P<num>{_NUMBER})(?P<unit>%|°|[a-zA-Z]+)?")
_FUNCTION_RE = re.compile(r"(?P<name>[a-zA-Z][a-zA-Z0-9-]*)\s*\(")
_SEPARATOR_RE = re.compile(r"\s*[,/]\s*|\s+")
_WHITESPACE_RE = re.compile(r"\s*")
_TOKEN_RE = re.compile(r"[^\s,/()]+|\S?")
_HEX_RE = re.compile(r"#?(?P<digits>[0-9a-fA-F]+)")

RGB_NAMES = ("rgb", "rgba")
HSL_NAMES = ("hsl", "hsla")
HSV_NAMES = ("hsv", "hsva", "hsb", "hsba")
HWB_NAMES = ("hwb", "hwba")
CMYK_NAMES = ("cmyk", "device-cmyk")
XYZ_NAMES = ("xyz", "ciexyz", "xyz-d65")
LAB_NAMES = ("lab", "cielab")
LCH_NAMES = ("lch", "hcl", "cielch", "lchab")
LMS_NAMES = ("lms",)
HUNTER_LAB_NAMES = ("hunterlab", "hunter-lab", "hlab")
OKLAB_NAMES = ("oklab",)
OKLCH_NAMES = ("oklch",)


class _Component(NamedTuple):
    value: float
    unit: str
    raw: str


# ==========================================
# Tokenizer
# ==========================================


def _scan(text: str, names: Sequence[str], model_name: str) -> Tuple[str, List[_Component]]:
    """
    Reads an optional ``name(`` wrapper and the numeric components after it.
    Returns the unconsumed text and the components found.
    """
    s = normalize_input(text)
    pos = 0
    closing = False

    func = _FUNCTION_RE.match(s)
    if func:
        name = func.group("name").lower()
        if name not in names:
            raise ColorError(f"unknown {model_name} prefix '{_sanitize_for_log(func.group('name'))}'")
        pos = func.end()
        closing = True
    elif s.startswith("("):
        pos = 1
        closing = True

    components: List[_Component] = []
    while True:
        after_ws = _WHITESPACE_RE.match(s, pos).end()
        if closing and s.startswith(")", after_ws):
            return s[after_ws + 1:], components

        if components:
            sep = _SEPARATOR_RE.match(s, pos)
            if sep is None:
                failed_at = after_ws
                break
            start = sep.end()
        else:
            start = after_ws

        m = _COMPONENT_RE.match(s, start)
        if m is None:
            failed_at = start
            break
        components.append(_to_component(m, model_name))
        pos = m.end()

    if closing:
        token = _TOKEN_RE.match(s, failed_at).group(0)
        if not token:
            raise ColorError(f"invalid {model_name} string: missing closing parenthesis")
        if token == ")":
            raise ColorError(f"invalid {model_name} string: trailing separator before ')'")
        raise ColorError(f"invalid {model_name} string: unexpected '{_sanitize_for_log(token)}'")
    return s[pos:], components


def _to_component(m: "re.Match", model_name: str) -> _Component:
    raw = m.group(0)
    unit = (m.group("unit") or "").lower()
    if unit and unit != "%" and unit not in c.ANGLE_UNITS:
        raise ColorError(f"unrecognized unit '{_sanitize_for_log(m.group('unit'))}' in {model_name} value '{raw}'")
    value = float(m.group("num"))
    if not math.isfinite(value):
        raise ColorError(f"non-finite numeric value '{raw}'")
    return _Component(value, unit, raw)


def _split_alpha(
    components: List[_Component],
    expected: int,
    model_name: str,
    alpha_position: Optional[AlphaPosition] = None,
) -> Tuple[List[_Component], Optional[_Component]]:
    """Separates the alpha component according to the configured position."""
    count = len(components)
    if count == expected:
        return components, None
    if alpha_position not in (None, AlphaPosition.NONE) and count == expected + 1:
        if alpha_position == AlphaPosition.START:
            return components[1:], components[0]
        return components[:-1], components[-1]
    raise ColorError(f"invalid {model_name} string: expected {expected} values, got {count}")


# ==========================================
# Component Interpreters
# ==========================================


def _reject_unit(comp: _Component, model_name: str, allowed: Sequence[str] = ("",)) -> None:
    if comp.unit not in allowed:
        raise ColorError(f"unexpected unit in {model_name} value '{comp.raw}'")


def _out_of_range(comp: _Component, channel: str, bounds: str) -> ColorError:
    return ColorError(f"{channel} value '{comp.raw}' is out of range {bounds}")


def _rgb_channel(comp: _Component, model_name: str) -> float:
    """0-255, or 0-100% scaled to 0-255."""
    _reject_unit(comp, model_name, ("", "%"))
    if comp.unit == "%":
        if not 0.0 <= comp.value <= c.PERCENT:
            raise _out_of_range(comp, model_name, "0%-100%")
        return comp.value / c.PERCENT * c.RGB_MAX
    if not 0.0 <= comp.value <= c.RGB_MAX:
        raise _out_of_range(comp, model_name, "0-255")
    return comp.value


def _fraction(comp: _Component, channel: str) -> float:
    """
    Percentage-like channel as a 0-1 fraction. Percent-suffixed values and
    bare values above 1 are read as percentages; anything outside
    0-100% is rejected rather than clamped.

    The switch is at 1 exactly: a bare ``1`` is 100% while a bare ``1.01``
    is 1.01%. CSS reads every bare number as a percentage, so write ``1%``
    for one percent.
    """
    _reject_unit(comp, channel, ("", "%"))
    v = comp.value
    if v < 0.0 or v > c.PERCENT:
        raise _out_of_range(comp, channel, "0%-100%")
    if comp.unit == "%" or v > c.UNIT:
        return v / c.PERCENT
    return v


def _hue(comp: _Component, channel: str = "hue") -> float:
    """Hue in degrees, wrapped into [0, 360)."""
    _reject_unit(comp, channel, ("",) + tuple(c.ANGLE_UNITS))
    degrees = comp.value * c.ANGLE_UNITS.get(comp.unit, 1.0)
    return degrees % c.HUE_MAX


def _alpha(comp: _Component) -> float:
    """Alpha as 0-1 or 0-100%."""
    _reject_unit(comp, "alpha", ("", "%"))
    if comp.unit == "%":
        if not 0.0 <= comp.value <= c.PERCENT:
            raise _out_of_range(comp, "alpha", "0%-100%")
        return comp.value / c.PERCENT
    if not 0.0 <= comp.value <= c.UNIT:
        raise _out_of_range(comp, "alpha", "0-1")
    return comp.value


def _bounded(comp: _Component, channel: str, low: float, high: float, percent_ref: Optional[float] = None) -> float:
    """Value within [low, high]; '%' scales by percent_ref when given."""
    allowed = ("", "%") if percent_ref is not None else ("",)
    _reject_unit(comp, channel, allowed)
    v = comp.value
    if comp.unit == "%":
        v = v / c.PERCENT * percent_ref
    if not low <= v <= high:
        raise _out_of_range(comp, channel, f"{low:g}-{high:g}")
    return v


def _finite(comp: _Component, channel: str, percent_ref: Optional[float] = None) -> float:
    return _bounded(comp, channel, -math.inf, math.inf, percent_ref)


def _signed(comp: _Component, channel: str, limit: float, percent_ref: Optional[float] = None) -> float:
    return _bounded(comp, channel, -limit, limit, percent_ref)


def _non_negative(comp: _Component, channel: str, percent_ref: Optional[float] = None) -> float:
    v = _finite(comp, channel, percent_ref)
    if v < 0.0:
        raise _out_of_range(comp, channel, "0 or greater")
    return v


def _alpha_255(alpha_comp: Optional[_Component]) -> float:
    if alpha_comp is None:
        return c.RGB_MAX
    return _alpha(alpha_comp) * c.RGB_MAX


# ==========================================
# Notation Parsers
# ==========================================


def parse_hex(text: str, alpha_position: AlphaPosition = AlphaPosition.END) -> ParseResult:
    """
    Parses #RGB and #RRGGBB, plus #RGBA/#RRGGBBAA (END) or
    #ARGB/#AARRGGBB (START) when an alpha position is configured.
    """
    s = normalize_input(text)
    m = _HEX_RE.match(s)
    if not m:
        raise ColorError(f"invalid hex color: '{_sanitize_for_log(text)}'")
    digits = m.group("digits").upper()

    allowed = (3, 6) if alpha_position == AlphaPosition.NONE else (3, 4, 6, 8)
    if len(digits) not in allowed:
        raise ColorError(f"invalid hex color length {len(digits)}: '{_sanitize_for_log(text)}'")
    if len(digits) in (3, 4):
        # e.g., 'ABC' becomes 'AABBCC'
        digits = "".join(ch * 2 for ch in digits)

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 4:
        if alpha_position == AlphaPosition.START:
            a, r, g, b = channels
        else:
            r, g, b, a = channels
        return s[m.end():], Color(r, g, b, a)
    r, g, b = channels
    return s[m.end():], Color(r, g, b)


def parse_rgb(text: str, alpha_position: AlphaPosition = AlphaPosition.END) -> ParseResult:
    rest, comps = _scan(text, RGB_NAMES, "rgb")
    channels, alpha = _split_alpha(comps, 3, "rgb", alpha_position)
    r, g, b = (_rgb_channel(comp, "rgb") for comp in channels)
    return rest, Color.from_rgb255(r, g, b, _alpha_255(alpha))


def _parse_hue_model(text, names, model_name, second, third, to_rgb, alpha_position):
    rest, comps = _scan(text, names, model_name)
    channels, alpha = _split_alpha(comps, 3, model_name, alpha_position)
    h = _hue(channels[0])
    x = _fraction(channels[1], second)
    y = _fraction(channels[2], third)
    r, g, b = to_rgb(h, x, y)
    return rest, Color.from_rgb255(r, g, b, _alpha_255(alpha))


def parse_hsl(text: str, alpha_position: AlphaPosition = AlphaPosition.END) -> ParseResult:
    return _parse_hue_model(text, HSL_NAMES, "hsl", "saturation", "lightness", conv.hsl_to_rgb, alpha_position)


def parse_hsv(text: str, alpha_position: AlphaPosition = AlphaPosition.END) -> ParseResult:
    return _parse_hue_model(text, HSV_NAMES, "hsv", "saturation", "value", conv.hsv_to_rgb, alpha_position)


def parse_hwb(text: str, alpha_position: AlphaPosition = AlphaPosition.END) -> ParseResult:
    return _parse_hue_model(text, HWB_NAMES, "hwb", "whiteness", "blackness", conv.hwb_to_rgb, alpha_position)


def parse_cmyk(text: str) -> ParseResult:
    """Parses CMYK strings which require exactly 4 values; never carries alpha."""
    rest, comps = _scan(text, CMYK_NAMES, "cmyk")
    channels, _ = _split_alpha(comps, 4, "cmyk")
    cy, m, y, k = (_fraction(comp, name) for comp, name in zip(channels, ("cyan", "magenta", "yellow", "key")))
    return rest, Color.from_rgb255(*conv.cmyk_to_rgb(cy, m, y, k))


def parse_xyz(text: str) -> ParseResult:
    rest, comps = _scan(text, XYZ_NAMES, "xyz")
    channels, _ = _split_alpha(comps, 3, "xyz")
    x, y, z = (_non_negative(comp, f"xyz {axis}", c.PERCENT) for comp, axis in zip(channels, "XYZ"))
    return rest, Color.from_rgb255(*conv.xyz_to_rgb(x, y, z))


def parse_cielab(
    text: str,
    illuminant: Illuminant = Illuminant.D65,
    observer: Observer = Observer.TWO_DEGREE,
) -> ParseResult:
    """CIE L*a*b* relative to the white point of the illuminant and observer."""
    rest, comps = _scan(text, LAB_NAMES, "cielab")
    channels, _ = _split_alpha(comps, 3, "cielab")
    L = _bounded(channels[0], "lightness", 0.0, c.LAB_L_MAX, c.LAB_L_MAX)
    a = _signed(channels[1], "a*", c.LAB_AB_MAX, c.LAB_PERCENT_REF)
    b = _signed(channels[2], "b*", c.LAB_AB_MAX, c.LAB_PERCENT_REF)
    white = illuminant.white_point(observer)
    return rest, Color.from_rgb255(*conv.lab_to_rgb(L, a, b, white=white))


def parse_lch(text: str) -> ParseResult:
    """CIELCh(ab), D65 / 2 degree."""
    rest, comps = _scan(text, LCH_NAMES, "lch")
    channels, _ = _split_alpha(comps, 3, "lch")
    L = _bounded(channels[0], "lightness", 0.0, c.LAB_L_MAX, c.LAB_L_MAX)
    chroma = _bounded(channels[1], "chroma", 0.0, c.LAB_AB_MAX, c.LCH_CHROMA_PERCENT_REF)
    hue = _hue(channels[2])
    return rest, Color.from_rgb255(*conv.lch_to_rgb(L, chroma, hue))


def parse_lms(text: str) -> ParseResult:
    rest, comps = _scan(text, LMS_NAMES, "lms")
    channels, _ = _split_alpha(comps, 3, "lms")
    l_val, m, s = (_finite(comp, f"lms {cone}") for comp, cone in zip(channels, "LMS"))
    return rest, Color.from_rgb255(*conv.lms_to_rgb(l_val, m, s))


def parse_hunter_lab(
    text: str,
    illuminant: Illuminant = Illuminant.D65,
    observer: Observer = Observer.TWO_DEGREE,
) -> ParseResult:
    """Hunter L, a, b relative to the white point of the illuminant and observer."""
    rest, comps = _scan(text, HUNTER_LAB_NAMES, "hunter lab")
    channels, _ = _split_alpha(comps, 3, "hunter lab")
    L = _bounded(channels[0], "lightness", 0.0, c.LAB_L_MAX, c.LAB_L_MAX)
    a = _finite(channels[1], "a")
    b = _finite(channels[2], "b")
    white = illuminant.white_point(observer)
    return rest, Color.from_rgb255(*conv.hunter_lab_to_rgb(L, a, b, white=white))


def parse_oklab(text: str) -> ParseResult:
    rest, comps = _scan(text, OKLAB_NAMES, "oklab")
    channels, _ = _split_alpha(comps, 3, "oklab")
    L = _bounded(channels[0], "lightness", 0.0, c.OKLAB_L_MAX, c.OKLAB_L_MAX)
    a = _signed(channels[1], "a", c.OKLAB_AB_MAX, c.OKLAB_PERCENT_REF)
    b = _signed(channels[2], "b", c.OKLAB_AB_MAX, c.OKLAB_PERCENT_REF)
    return rest, Color.from_rgb255(*conv.oklab_to_rgb(L, a, b))


def parse_oklch(text: str) -> ParseResult:
    rest, comps = _scan(text, OKLCH_NAMES, "oklch")
    channels, _ = _split_alpha(comps, 3, "oklch")
    L = _bounded(channels[0], "lightness", 0.0, c.OKLAB_L_MAX, c.OKLAB_L_MAX)
    chroma = _bounded(channels[1], "chroma", 0.0, c.OKLAB_AB_MAX, c.OKLAB_PERCENT_REF)
    hue = _hue(channels[2])
    return rest, Color.from_rgb255(*conv.oklch_to_rgb(L, chroma, hue))
