#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/logic/convert/resolver.py

import argparse
import sys

from pipette.core.color import Color, ColorError
from pipette.core.options import AlphaPosition, ColorConfig, Illuminant, Observer
from pipette.notation import Notation
from pipette.shared.logger import exit_with_error, log


def resolve_notation(label: str) -> Notation:
    """Resolves a CLI notation label, exiting with status 2 when unknown."""
    try:
        return Notation.from_label(label)
    except ColorError:
        # from_label has already logged the failure
        log("info", "use 'pipette notations' to see all notations")
        sys.exit(2)


def resolve_config(args: argparse.Namespace) -> ColorConfig:
    try:
        return ColorConfig(
            illuminant=Illuminant.from_name(args.illuminant),
            observer=Observer.from_degrees(args.observer),
            alpha_position=AlphaPosition.from_name(args.alpha_position),
        )
    except ColorError as e:
        exit_with_error(e.message)


def resolve_convert_input(value: str, notation: Notation, config: ColorConfig) -> Color:
    """Parses the input value, exiting with status 2 on malformed input."""
    try:
        return notation.parse(value, config)
    except ColorError as e:
        exit_with_error(
            f"invalid {notation.label} value: {e.message}",
            hint=f"expected e.g. '{notation.format(Color(255, 99, 71), config)}'",
        )
