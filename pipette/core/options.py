#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/core/options.py

from enum import IntEnum
from typing import Any, Mapping, Optional, Tuple

from . import config as c
from .color import ColorError


def _from_index(cls, index, what: str):
    # Settings store plain integers; floats, strings and bools are rejected
    if isinstance(index, bool) or not isinstance(index, int):
        raise ColorError(f"{what} index must be an integer, got {index!r}")
    try:
        return cls(index)
    except ValueError:
        raise ColorError(f"unknown {what} index '{index}'") from None


class Illuminant(IntEnum):
    """CIE standard illuminants, numbered as stored in the settings."""

    A = 0
    B = 1
    C = 2
    D50 = 3
    D55 = 4
    D65 = 5
    D75 = 6
    E = 7
    F1 = 8
    F2 = 9
    F3 = 10
    F4 = 11
    F5 = 12
    F6 = 13
    F7 = 14
    F8 = 15
    F9 = 16
    F10 = 17
    F11 = 18
    F12 = 19

    @classmethod
    def from_index(cls, index: int) -> "Illuminant":
        return _from_index(cls, index, "illuminant")

    @classmethod
    def from_name(cls, name: str) -> "Illuminant":
        key = str(name).strip().upper()
        if key not in cls.__members__:
            raise ColorError(f"unknown illuminant '{name}'")
        return cls[key]

    def white_point(self, observer: "Observer") -> Tuple[float, float, float]:
        """Reference white (X, Y, Z) with Y = 100 for the given observer."""
        return observer.white_points()[self.name]


class Observer(IntEnum):
    """CIE standard observer: 1931 2 degree or 1964 10 degree."""

    TWO_DEGREE = 0
    TEN_DEGREE = 1

    @classmethod
    def from_index(cls, index: int) -> "Observer":
        return _from_index(cls, index, "observer")

    @classmethod
    def from_degrees(cls, degrees) -> "Observer":
        value = str(degrees).strip().rstrip("°")
        if value == "2":
            return cls.TWO_DEGREE
        if value == "10":
            return cls.TEN_DEGREE
        raise ColorError(f"unknown observer angle '{degrees}'")

    @property
    def degrees(self) -> int:
        return 10 if self is Observer.TEN_DEGREE else 2

    def white_points(self):
        return c.WHITE_POINTS_10 if self is Observer.TEN_DEGREE else c.WHITE_POINTS_2


class AlphaPosition(IntEnum):
    """Where the alpha channel is read from and written to in text."""

    NONE = 0
    END = 1
    START = 2

    @classmethod
    def from_index(cls, index: int) -> "AlphaPosition":
        return _from_index(cls, index, "alpha position")

    @classmethod
    def from_name(cls, name: str) -> "AlphaPosition":
        key = str(name).strip().upper()
        if key not in cls.__members__:
            raise ColorError(f"unknown alpha position '{name}'")
        return cls[key]


class ColorConfig:
    """
    Per-call configuration for parsing and formatting.

    Holds the illuminant and observer used by the CIE-relative notations
    (CIELAB, Hunter Lab) and the alpha position used by the notations that
    can carry alpha. Immutable; build a new one whenever settings change.
    """

    __slots__ = ("illuminant", "observer", "alpha_position")

    def __init__(
        self,
        illuminant: Illuminant = Illuminant.D65,
        observer: Observer = Observer.TWO_DEGREE,
        alpha_position: AlphaPosition = AlphaPosition.END,
    ) -> None:
        object.__setattr__(self, "illuminant", Illuminant.from_index(illuminant))
        object.__setattr__(self, "observer", Observer.from_index(observer))
        object.__setattr__(self, "alpha_position", AlphaPosition.from_index(alpha_position))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]] = None) -> "ColorConfig":
        """
        Build a config from a settings mapping.

        Reads the integer keys 'cie-illuminants', 'cie-standard-observer'
        and 'alpha-position'. Missing keys fall back to the defaults;
        unknown values raise ColorError.
        """
        settings = settings or {}
        return cls(
            illuminant=Illuminant.from_index(settings.get(c.SETTING_ILLUMINANT, Illuminant.D65)),
            observer=Observer.from_index(settings.get(c.SETTING_OBSERVER, Observer.TWO_DEGREE)),
            alpha_position=AlphaPosition.from_index(settings.get(c.SETTING_ALPHA_POSITION, AlphaPosition.END)),
        )

    def replace(self, **changes) -> "ColorConfig":
        values = {
            "illuminant": self.illuminant,
            "observer": self.observer,
            "alpha_position": self.alpha_position,
        }
        values.update(changes)
        return ColorConfig(**values)

    def __eq__(self, other):
        if not isinstance(other, ColorConfig):
            return NotImplemented
        return (self.illuminant, self.observer, self.alpha_position) == (
            other.illuminant, other.observer, other.alpha_position
        )

    def __hash__(self):
        return hash((self.illuminant, self.observer, self.alpha_position))

    def __repr__(self):
        return (
            f"ColorConfig(illuminant={self.illuminant.name}, "
            f"observer={self.observer.degrees}deg, alpha_position={self.alpha_position.name})"
        )
