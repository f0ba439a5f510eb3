#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from pipette.shared.clamping import _clamp01

Vector = Tuple[float, float, float]
Matrix = Tuple[Vector, Vector, Vector]


# ==========================================
# Matrix Helpers
# ==========================================


def _mat_vec(m: Matrix, v: Vector) -> Vector:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _mat_mul(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def _mat_inv(m: Matrix) -> Matrix:
    """Invert a 3x3 matrix using cofactors."""
    (a, b, cc), (d, e, f), (g, h, i) = m
    co_a = e * i - f * h
    co_b = -(d * i - f * g)
    co_c = d * h - e * g
    det = a * co_a + b * co_b + cc * co_c
    if abs(det) < c.EPS:
        raise ValueError("matrix is singular")
    inv_det = 1.0 / det
    return (
        (co_a * inv_det, -(b * i - cc * h) * inv_det, (b * f - cc * e) * inv_det),
        (co_b * inv_det, (a * i - cc * g) * inv_det, -(a * f - cc * d) * inv_det),
        (co_c * inv_det, -(a * h - b * g) * inv_det, (a * e - b * d) * inv_det),
    )


M_LMS_XYZ = _mat_inv(c.M_XYZ_LMS)
M_BRADFORD_INV = _mat_inv(c.M_BRADFORD)


# ==========================================
# sRGB Cylindrical Models
# ==========================================


def _channels01(r: float, g: float, b: float) -> Vector:
    return r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX


def _hue_and_extrema(r: float, g: float, b: float) -> Vector:
    """Hue in degrees plus the largest and smallest 0-1 channel."""
    r_f, g_f, b_f = _channels01(r, g, b)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    if delta == 0:
        return 0.0, cmax, cmin
    if cmax == r_f:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
    elif cmax == g_f:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
    return h % c.HUE_MAX, cmax, cmin


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL (hue in degrees, saturation and lightness 0-1)."""
    h, cmax, cmin = _hue_and_extrema(r, g, b)
    L = (cmax + cmin) / c.DIV_2
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = (cmax - cmin) / denom if denom > c.EPS else 0.0
    return h, _clamp01(s), L


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB using the CSS Color 4 piecewise form."""
    h = h % c.HUE_MAX
    amp = s * min(L, c.UNIT - L)

    def channel(n: int) -> float:
        k = (n + h / 30.0) % 12
        return L - amp * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return tuple(_clamp01(channel(n)) * c.RGB_MAX for n in (0, 8, 4))


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSV (hue in degrees, saturation and value 0-1)."""
    h, cmax, cmin = _hue_and_extrema(r, g, b)
    s = (cmax - cmin) / cmax if cmax > 0 else 0.0
    return h, s, cmax


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to RGB."""
    h = h % c.HUE_MAX

    def channel(n: int) -> float:
        k = (n + h / c.HUE_SECTOR) % 6
        return v - v * s * max(0.0, min(k, 4.0 - k, 1.0))

    return tuple(_clamp01(channel(n)) * c.RGB_MAX for n in (5, 3, 1))


def rgb_to_hwb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HWB (whiteness and blackness 0-1)."""
    h, cmax, cmin = _hue_and_extrema(r, g, b)
    return h, cmin, c.UNIT - cmax


def hwb_to_rgb(h: float, w: float, b: float) -> Tuple[float, float, float]:
    """Convert HWB to RGB. Whiteness and blackness summing past 1 are normalized."""
    w = _clamp01(w)
    b = _clamp01(b)
    if w + b > c.UNIT:
        total = w + b
        w, b = w / total, b / total
    v = c.UNIT - b
    if v <= 0.0:
        return 0.0, 0.0, 0.0
    return hsv_to_rgb(h, _clamp01(c.UNIT - w / v), v)


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """Convert RGB to CMYK (all components 0-1)."""
    channels = _channels01(r, g, b)
    k = c.UNIT - max(channels)
    if k >= c.UNIT:
        return 0.0, 0.0, 0.0, c.UNIT
    cy, m, y = ((c.UNIT - v - k) / (c.UNIT - k) for v in channels)
    return cy, m, y, k


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert CMYK to RGB."""
    white = c.RGB_MAX * (c.UNIT - _clamp01(k))
    return tuple(white * (c.UNIT - _clamp01(v)) for v in (cy, m, y))


# ==========================================
# CIE XYZ
# ==========================================


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component given on the 0-255 scale."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component; result on the 0-1 scale."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _linear_to_rgb255(linear: Vector) -> Tuple[float, float, float]:
    r, g, b = (_linear_to_srgb(v) for v in linear)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (D65, 0-100 scale)."""
    linear = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    x, y, z = _mat_vec(c.M_SRGB_XYZ, linear)
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ (D65, 0-100 scale) to RGB, clamped to the sRGB gamut."""
    scaled = (x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING)
    return _linear_to_rgb255(_mat_vec(c.M_XYZ_SRGB, scaled))


def bradford_matrix(src_white: Vector, dst_white: Vector) -> Matrix:
    """
    Bradford chromatic adaptation matrix taking XYZ relative to
    src_white to XYZ relative to dst_white.
    """
    cone_src = _mat_vec(c.M_BRADFORD, src_white)
    cone_dst = _mat_vec(c.M_BRADFORD, dst_white)
    scale = (
        (cone_dst[0] / cone_src[0], 0.0, 0.0),
        (0.0, cone_dst[1] / cone_src[1], 0.0),
        (0.0, 0.0, cone_dst[2] / cone_src[2]),
    )
    return _mat_mul(M_BRADFORD_INV, _mat_mul(scale, c.M_BRADFORD))


def adapt_xyz(xyz: Vector, src_white: Vector, dst_white: Vector) -> Vector:
    """Move XYZ between reference whites; identity when the whites match."""
    if tuple(src_white) == tuple(dst_white):
        return tuple(xyz)
    return _mat_vec(bradford_matrix(tuple(src_white), tuple(dst_white)), tuple(xyz))


# ==========================================
# CIELAB / CIELCh
# ==========================================


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    cube = t ** 3
    return cube if cube > c.LAB_E else (c.LAB_L_MULT * t - c.LAB_L_SUB) / c.LAB_KAPPA


def xyz_to_lab(x: float, y: float, z: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB relative to the given reference white."""
    x_r = _xyz_f(x / white[0])
    y_r = _xyz_f(y / white[1])
    z_r = _xyz_f(z / white[2])
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """Convert CIE LAB relative to the given reference white to XYZ."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    if L > c.LAB_KAPPA * c.LAB_E:
        y_lin = y_r ** 3
    else:
        y_lin = L / c.LAB_KAPPA
    return _xyz_f_inv(x_r) * white[0], y_lin * white[1], _xyz_f_inv(z_r) * white[2]


def rgb_to_lab(r: float, g: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """RGB to LAB, adapting from the sRGB white to the reference white."""
    xyz = adapt_xyz(rgb_to_xyz(r, g, b), c.SRGB_WHITE, white)
    return xyz_to_lab(*xyz, white=white)


def lab_to_rgb(L: float, a: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """LAB relative to the reference white back to RGB."""
    xyz = adapt_xyz(lab_to_xyz(L, a, b, white=white), white, c.SRGB_WHITE)
    return xyz_to_rgb(*xyz)


def lab_to_lch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert LAB to LCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def lch_to_lab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert LCH to LAB."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_lch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to LCH conversion (D65, 2 degree)."""
    return lab_to_lch(*rgb_to_lab(r, g, b))


def lch_to_rgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Direct LCH to RGB conversion (D65, 2 degree)."""
    return lab_to_rgb(*lch_to_lab(L, chroma, hue))


# ==========================================
# Hunter Lab
# ==========================================


def _hunter_coefficients(white: Vector) -> Tuple[float, float]:
    ka = (c.HUNTER_KA_NUM / c.HUNTER_KA_DEN) * (white[0] + white[1])
    kb = (c.HUNTER_KB_NUM / c.HUNTER_KB_DEN) * (white[1] + white[2])
    return ka, kb


def xyz_to_hunter_lab(x: float, y: float, z: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """Convert XYZ to Hunter Lab relative to the given reference white."""
    ka, kb = _hunter_coefficients(white)
    y_r = y / white[1]
    if y_r <= 0:
        return 0.0, 0.0, 0.0
    root = math.sqrt(y_r)
    L = c.PERCENT * root
    a = ka * ((x / white[0] - y_r) / root)
    b = kb * ((y_r - z / white[2]) / root)
    return L, a, b


def hunter_lab_to_xyz(L: float, a: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    """Convert Hunter Lab relative to the given reference white to XYZ."""
    ka, kb = _hunter_coefficients(white)
    root = L / c.PERCENT
    y_r = root * root
    x = (a / ka * root + y_r) * white[0]
    z = (y_r - b / kb * root) * white[2]
    return x, y_r * white[1], z


def rgb_to_hunter_lab(r: float, g: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    xyz = adapt_xyz(rgb_to_xyz(r, g, b), c.SRGB_WHITE, white)
    return xyz_to_hunter_lab(*xyz, white=white)


def hunter_lab_to_rgb(L: float, a: float, b: float, white: Vector = c.SRGB_WHITE) -> Tuple[float, float, float]:
    xyz = adapt_xyz(hunter_lab_to_xyz(L, a, b, white=white), white, c.SRGB_WHITE)
    return xyz_to_rgb(*xyz)


# ==========================================
# LMS Cone Response
# ==========================================


def rgb_to_lms(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to LMS through XYZ (Hunt-Pointer-Estevez, 0-100 scale)."""
    return _mat_vec(c.M_XYZ_LMS, rgb_to_xyz(r, g, b))


def lms_to_rgb(l_val: float, m: float, s: float) -> Tuple[float, float, float]:
    """Convert LMS (Hunt-Pointer-Estevez, 0-100 scale) to RGB."""
    return xyz_to_rgb(*_mat_vec(M_LMS_XYZ, (l_val, m, s)))


# ==========================================
# Oklab / Oklch
# ==========================================


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    linear = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    lms = _mat_vec(c.M1_OKLAB, linear)
    lms_ = tuple(math.copysign(abs(v) ** c.OKLAB_CUBE_ROOT_EXP, v) for v in lms)
    return _mat_vec(c.M2_OKLAB, lms_)


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to RGB."""
    lms_ = _mat_vec(c.M2_INV_OKLAB, (L, a, b))
    lms = tuple(v ** 3 for v in lms_)
    return _linear_to_rgb255(_mat_vec(c.M1_INV_OKLAB, lms))


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to OKLCH conversion."""
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def oklch_to_rgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Direct OKLCH to RGB conversion."""
    return oklab_to_rgb(*oklch_to_oklab(L, chroma, hue))


# Conversions are pure; memoize the public ones on their (hashable) arguments
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not _name.startswith("_"):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
