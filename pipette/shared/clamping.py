#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/shared/clamping.py

import math

from pipette.core import config as c


def _clamp(v: float, low: float, high: float) -> float:
    """Clamp into [low, high]; NaN collapses to low."""
    if math.isnan(v):
        return low
    return max(low, min(high, v))


def _clamp01(v: float) -> float:
    return _clamp(v, 0.0, c.UNIT)


def _clamp255(v: float) -> float:
    return _clamp(v, 0.0, c.RGB_MAX)
