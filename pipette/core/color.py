#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/core/color.py

from typing import Tuple

from . import config as c
from pipette.shared.clamping import _clamp01, _clamp255


class ColorError(ValueError):
    """Raised when text cannot be turned into a color or notation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Color:
    """
    Canonical 8-bit sRGB color with alpha.

    Every notation parses into and formats from this value. Channels are
    integers in [0, 255]; alpha 255 is fully opaque. Instances are frozen
    once constructed and compare and hash by their channels.
    """

    __slots__ = ("red", "green", "blue", "alpha")

    def __init__(self, red: int, green: int, blue: int, alpha: int = c.ALPHA_MAX) -> None:
        for name, value in (("red", red), ("green", green), ("blue", blue), ("alpha", alpha)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} channel must be an integer, got {value!r}")
            if not 0 <= value <= c.ALPHA_MAX:
                raise ValueError(f"{name} channel {value} is outside 0-255")
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    @classmethod
    def from_rgb255(cls, r: float, g: float, b: float, alpha: float = c.ALPHA_MAX) -> "Color":
        """Build a color from possibly fractional 0-255 channels, rounding and clamping."""
        return cls(
            int(round(_clamp255(r))),
            int(round(_clamp255(g))),
            int(round(_clamp255(b))),
            int(round(_clamp255(alpha))),
        )

    @classmethod
    def from_unit(cls, r: float, g: float, b: float, alpha: float = c.UNIT) -> "Color":
        """Build a color from 0-1 channels."""
        return cls.from_rgb255(
            _clamp01(r) * c.RGB_MAX,
            _clamp01(g) * c.RGB_MAX,
            _clamp01(b) * c.RGB_MAX,
            _clamp01(alpha) * c.RGB_MAX,
        )

    def with_alpha(self, alpha: int) -> "Color":
        return Color(self.red, self.green, self.blue, alpha)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def unit_alpha(self) -> float:
        return self.alpha / c.RGB_MAX

    @property
    def is_opaque(self) -> bool:
        return self.alpha == c.ALPHA_MAX

    @property
    def hex(self) -> str:
        """Uppercase RRGGBB without alpha."""
        return f"{self.red:02X}{self.green:02X}{self.blue:02X}"

    def _key(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __iter__(self):
        return iter(self._key())

    def __repr__(self):
        return f"Color(red={self.red}, green={self.green}, blue={self.blue}, alpha={self.alpha})"
