#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/notation.py

"""
Notation dispatcher.

``Notation`` is the closed set of textual color notations. Each member
delegates to a handler that knows which parser and formatter to call and
which parts of the ColorConfig they take: the alpha position goes only to
the alpha-capable notations and the illuminant/observer pair only to
CIELAB and Hunter Lab.
"""

from enum import Enum
from typing import Callable, Optional

from pipette.core import config as c
from pipette.core.color import Color, ColorError
from pipette.core.options import ColorConfig
from pipette.shared import formatting as fmt
from pipette.shared import parser as prs
from pipette.shared.logger import log
from pipette.shared.naming import DEFAULT_REGISTRY, ColorNameRegistry
from pipette.shared.sanitizer import _sanitize_for_log


class _NotationHandler:
    def __init__(
        self,
        label: str,
        display_label: str,
        parser: Callable,
        formatter: Callable,
        supports_alpha: bool = False,
        uses_illuminant: bool = False,
    ) -> None:
        self.label = label
        self.display_label = display_label
        self.parser = parser
        self.formatter = formatter
        self.supports_alpha = supports_alpha
        self.uses_illuminant = uses_illuminant

    def _options(self, config: ColorConfig) -> dict:
        if self.supports_alpha:
            return {"alpha_position": config.alpha_position}
        if self.uses_illuminant:
            return {"illuminant": config.illuminant, "observer": config.observer}
        return {}

    def parse(self, text: str, config: ColorConfig, registry: ColorNameRegistry) -> Color:
        try:
            rest, color = self.parser(text, **self._options(config))
        except OverflowError as e:
            raise ColorError(f"{self.label} value is too large to convert") from e
        if rest.strip():
            raise ColorError(f"unexpected trailing input '{_sanitize_for_log(rest)}' after {self.label} color")
        return color

    def format(self, color: Color, config: ColorConfig, registry: ColorNameRegistry) -> str:
        return self.formatter(color, **self._options(config))


class _NameHandler(_NotationHandler):
    def __init__(self) -> None:
        super().__init__("name", "Copy Name", None, None)

    def parse(self, text: str, config: ColorConfig, registry: ColorNameRegistry) -> Color:
        color = registry.lookup_by_text(text, True, True, True, True)
        if color is None:
            raise ColorError("No name found")
        return color

    def format(self, color: Color, config: ColorConfig, registry: ColorNameRegistry) -> str:
        name = registry.lookup_by_color(color, True, True, True, True)
        return name if name is not None else c.NOT_NAMED


def _config(config: Optional[ColorConfig]) -> ColorConfig:
    return ColorConfig() if config is None else config


def _registry(registry: Optional[ColorNameRegistry]) -> ColorNameRegistry:
    return DEFAULT_REGISTRY if registry is None else registry


class Notation(Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"
    XYZ = "xyz"
    LAB = "cielab"
    HWB = "hwb"
    HCL = "hcl"
    NAME = "name"
    LMS = "lms"
    HUNTER_LAB = "hunterlab"
    OKLAB = "oklab"
    OKLCH = "oklch"

    @classmethod
    def default(cls) -> "Notation":
        return cls.HEX

    @classmethod
    def from_label(cls, text: str) -> "Notation":
        """Case-insensitive look-up of a notation by its label."""
        key = str(text).strip().lower()
        try:
            return cls(key)
        except ValueError:
            log('error', f"Failed to parse notation: {_sanitize_for_log(text)}")
            raise ColorError("Failed to get color notation") from None

    @property
    def _handler(self) -> _NotationHandler:
        return _HANDLERS[self]

    @property
    def label(self) -> str:
        return self.value

    @property
    def display_label(self) -> str:
        return self._handler.display_label

    @property
    def supports_alpha(self) -> bool:
        return self._handler.supports_alpha

    @property
    def uses_illuminant(self) -> bool:
        return self._handler.uses_illuminant

    def parse(
        self,
        text: str,
        config: Optional[ColorConfig] = None,
        registry: Optional[ColorNameRegistry] = None,
    ) -> Color:
        """Parse text in this notation; raises ColorError on any malformed input."""
        return self._handler.parse(text, _config(config), _registry(registry))

    def format(
        self,
        color: Color,
        config: Optional[ColorConfig] = None,
        registry: Optional[ColorNameRegistry] = None,
    ) -> str:
        return self._handler.format(color, _config(config), _registry(registry))

    def __str__(self) -> str:
        return self.value


_HANDLERS = {
    Notation.HEX: _NotationHandler("hex", "Copy Hex Code", prs.parse_hex, fmt.format_hex, supports_alpha=True),
    Notation.RGB: _NotationHandler("rgb", "Copy RGB", prs.parse_rgb, fmt.format_rgb, supports_alpha=True),
    Notation.HSL: _NotationHandler("hsl", "Copy HSL", prs.parse_hsl, fmt.format_hsl, supports_alpha=True),
    Notation.HSV: _NotationHandler("hsv", "Copy HSV", prs.parse_hsv, fmt.format_hsv, supports_alpha=True),
    Notation.CMYK: _NotationHandler("cmyk", "Copy CMYK", prs.parse_cmyk, fmt.format_cmyk),
    Notation.XYZ: _NotationHandler("xyz", "Copy Xyz", prs.parse_xyz, fmt.format_xyz),
    Notation.LAB: _NotationHandler("cielab", "Copy CIELAB", prs.parse_cielab, fmt.format_cielab, uses_illuminant=True),
    Notation.HWB: _NotationHandler("hwb", "Copy HWB", prs.parse_hwb, fmt.format_hwb, supports_alpha=True),
    Notation.HCL: _NotationHandler("hcl", "Copy CIELCh / HCL", prs.parse_lch, fmt.format_lch),
    Notation.NAME: _NameHandler(),
    Notation.LMS: _NotationHandler("lms", "Copy LMS", prs.parse_lms, fmt.format_lms),
    Notation.HUNTER_LAB: _NotationHandler(
        "hunterlab", "Copy Hunter Lab", prs.parse_hunter_lab, fmt.format_hunter_lab, uses_illuminant=True
    ),
    Notation.OKLAB: _NotationHandler("oklab", "Copy Oklab", prs.parse_oklab, fmt.format_oklab),
    Notation.OKLCH: _NotationHandler("oklch", "Copy Oklch", prs.parse_oklch, fmt.format_oklch),
}


def parse(
    notation: Notation,
    text: str,
    config: Optional[ColorConfig] = None,
    registry: Optional[ColorNameRegistry] = None,
) -> Color:
    return notation.parse(text, config, registry)


def format_color(
    notation: Notation,
    color: Color,
    config: Optional[ColorConfig] = None,
    registry: Optional[ColorNameRegistry] = None,
) -> str:
    return notation.format(color, config, registry)
