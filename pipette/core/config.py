#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pipette/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
ALPHA_MAX = 255                    # 8-bit alpha, fully opaque
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV
PERCENT = 100.0                    # Percentage scale
XYZ_SCALING = 100.0                # XYZ values are reported on a 0-100 scale

# Angle unit scales (degrees per unit)
ANGLE_UNITS = {
    "deg": 1.0,
    "°": 1.0,
    "grad": 0.9,
    "rad": 180.0 / 3.141592653589793,
    "turn": 360.0,
}

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),  # X
    (0.2126729, 0.7151522, 0.0721750),  # Y (luminance)
    (0.0193339, 0.1191920, 0.9503041),  # Z
)

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),  # linear R
    (-0.9692660, 1.8760108, 0.0415560),   # linear G
    (0.0556434, -0.2040259, 1.0572252),   # linear B
)

# CIELAB Constants (Source: CIE 15:2004, exact rational forms)
LAB_E = 216.0 / 24389.0            # (6/29)^3, switch between linear and cube-root segments
LAB_KAPPA = 24389.0 / 27.0         # (29/3)^3, slope of the linear segment
LAB_POW = 1.0 / 3.0                # Cube root
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_L_MAX = 100.0                  # Upper bound of L*
LAB_PERCENT_REF = 125.0            # 100% a* / b* in CSS Color 4 terms
LCH_CHROMA_PERCENT_REF = 150.0     # 100% chroma in CSS Color 4 terms
LAB_AB_MAX = 500.0                 # Accepted |a*|, |b*| and LCh chroma on input

# Hunter Lab Constants (Source: Hunter 1948, normalized to the C/2° reference)
HUNTER_KA_NUM = 175.0              # Ka = 175 / 198.04 * (Xn + Yn)
HUNTER_KA_DEN = 198.04
HUNTER_KB_NUM = 70.0               # Kb = 70 / 218.11 * (Yn + Zn)
HUNTER_KB_DEN = 218.11

# Hunt-Pointer-Estevez XYZ to LMS cone response (normalized to D65)
M_XYZ_LMS = (
    (0.40024, 0.70760, -0.08081),
    (-0.22630, 1.16532, 0.04570),
    (0.0, 0.0, 0.91822),
)

# Bradford cone response matrix for chromatic adaptation (Source: Lam 1985 / Lindbloom)
M_BRADFORD = (
    (0.8951, 0.2664, -0.1614),
    (-0.7502, 1.7135, 0.0367),
    (0.0389, -0.0685, 1.0296),
)

# OKLab Matrices (Source: Björn Ottosson, 2020), linear sRGB based
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
M2_INV_OKLAB = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
M1_INV_OKLAB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Non-linearity applied to cone responses
OKLAB_PERCENT_REF = 0.4            # 100% chroma / a / b in CSS Color 4 terms
OKLAB_L_MAX = 1.0
OKLAB_AB_MAX = 2.0                 # Accepted |a|, |b| and Oklch chroma on input

# ==========================================
# CIE Standard Illuminant White Points
# ==========================================

# Tristimulus values (Y = 100) for the 2 degree (CIE 1931) and
# 10 degree (CIE 1964) standard observers. Keyed by illuminant name.
WHITE_POINTS_2 = {
    "A": (109.850, 100.0, 35.585),
    "B": (99.0927, 100.0, 85.313),
    "C": (98.074, 100.0, 118.232),
    "D50": (96.422, 100.0, 82.521),
    "D55": (95.682, 100.0, 92.149),
    "D65": (95.047, 100.0, 108.883),
    "D75": (94.972, 100.0, 122.638),
    "E": (100.0, 100.0, 100.0),
    "F1": (92.834, 100.0, 103.665),
    "F2": (99.187, 100.0, 67.395),
    "F3": (103.754, 100.0, 49.861),
    "F4": (109.147, 100.0, 38.813),
    "F5": (90.872, 100.0, 98.723),
    "F6": (97.309, 100.0, 60.191),
    "F7": (95.044, 100.0, 108.755),
    "F8": (96.413, 100.0, 82.333),
    "F9": (100.365, 100.0, 67.868),
    "F10": (96.174, 100.0, 81.712),
    "F11": (100.966, 100.0, 64.370),
    "F12": (108.046, 100.0, 39.228),
}

WHITE_POINTS_10 = {
    "A": (111.144, 100.0, 35.200),
    "B": (99.178, 100.0, 84.3493),
    "C": (97.285, 100.0, 116.145),
    "D50": (96.720, 100.0, 81.427),
    "D55": (95.799, 100.0, 90.926),
    "D65": (94.811, 100.0, 107.304),
    "D75": (94.416, 100.0, 120.641),
    "E": (100.0, 100.0, 100.0),
    "F1": (94.791, 100.0, 103.191),
    "F2": (103.280, 100.0, 69.026),
    "F3": (108.968, 100.0, 51.965),
    "F4": (114.961, 100.0, 40.963),
    "F5": (93.369, 100.0, 98.636),
    "F6": (102.148, 100.0, 62.074),
    "F7": (95.792, 100.0, 107.687),
    "F8": (97.115, 100.0, 81.135),
    "F9": (102.116, 100.0, 67.826),
    "F10": (99.001, 100.0, 83.134),
    "F11": (103.866, 100.0, 65.627),
    "F12": (111.428, 100.0, 40.353),
}

# sRGB is defined relative to D65 under the 2 degree observer
SRGB_WHITE = WHITE_POINTS_2["D65"]

# ==========================================
# Application Logic & Constraints
# ==========================================

# Settings keys read by ColorConfig.from_settings
SETTING_ILLUMINANT = "cie-illuminants"
SETTING_OBSERVER = "cie-standard-observer"
SETTING_ALPHA_POSITION = "alpha-position"

# Decimal places used when rendering each notation
PRECISION_UNIT = 2                 # Hue degrees and percentages
PRECISION_ALPHA = 3                # Alpha as a 0-1 fraction
PRECISION_XYZ = 3
PRECISION_LMS = 3
PRECISION_LAB = 2                  # CIELAB, CIELCh and Hunter Lab
PRECISION_OKLAB = 5                # Oklab / Oklch lightness and chroma
PRECISION_OKLCH_HUE = 3

# Placeholder shown when the name registry has no entry for a color
NOT_NAMED = "Not named"

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Illuminant names accepted by the CLI --illuminant flag
ILLUMINANT_CHOICES = list(WHITE_POINTS_2.keys())

ALPHA_POSITION_CHOICES = ["none", "end", "start"]

OBSERVER_CHOICES = ["2", "10"]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

# ==========================================
# CSS Named Colors (Source: CSS Color Module Level 4)
# ==========================================

WEB_COLORS = {
    "aliceblue": "F0F8FF", "antiquewhite": "FAEBD7", "aqua": "00FFFF", "aquamarine": "7FFFD4",
    "azure": "F0FFFF", "beige": "F5F5DC", "bisque": "FFE4C4", "black": "000000",
    "blanchedalmond": "FFEBCD", "blue": "0000FF", "blueviolet": "8A2BE2", "brown": "A52A2A",
    "burlywood": "DEB887", "cadetblue": "5F9EA0", "chartreuse": "7FFF00", "chocolate": "D2691E",
    "coral": "FF7F50", "cornflowerblue": "6495ED", "cornsilk": "FFF8DC", "crimson": "DC143C",
    "cyan": "00FFFF", "darkblue": "00008B", "darkcyan": "008B8B", "darkgoldenrod": "B8860B",
    "darkgray": "A9A9A9", "darkgreen": "006400", "darkgrey": "A9A9A9", "darkkhaki": "BDB76B",
    "darkmagenta": "8B008B", "darkolivegreen": "556B2F", "darkorange": "FF8C00", "darkorchid": "9932CC",
    "darkred": "8B0000", "darksalmon": "E9967A", "darkseagreen": "8FBC8F", "darkslateblue": "483D8B",
    "darkslategray": "2F4F4F", "darkslategrey": "2F4F4F", "darkturquoise": "00CED1", "darkviolet": "9400D3",
    "deeppink": "FF1493", "deepskyblue": "00BFFF", "dimgray": "696969", "dimgrey": "696969",
    "dodgerblue": "1E90FF", "firebrick": "B22222", "floralwhite": "FFFAF0", "forestgreen": "228B22",
    "fuchsia": "FF00FF", "gainsboro": "DCDCDC", "ghostwhite": "F8F8FF", "gold": "FFD700",
    "goldenrod": "DAA520", "gray": "808080", "green": "008000", "greenyellow": "ADFF2F",
    "grey": "808080", "honeydew": "F0FFF0", "hotpink": "FF69B4", "indianred": "CD5C5C",
    "indigo": "4B0082", "ivory": "FFFFF0", "khaki": "F0E68C", "lavender": "E6E6FA",
    "lavenderblush": "FFF0F5", "lawngreen": "7CFC00", "lemonchiffon": "FFFACD", "lightblue": "ADD8E6",
    "lightcoral": "F08080", "lightcyan": "E0FFFF", "lightgoldenrodyellow": "FAFAD2", "lightgray": "D3D3D3",
    "lightgreen": "90EE90", "lightgrey": "D3D3D3", "lightpink": "FFB6C1", "lightsalmon": "FFA07A",
    "lightseagreen": "20B2AA", "lightskyblue": "87CEFA", "lightslategray": "778899", "lightslategrey": "778899",
    "lightsteelblue": "B0C4DE", "lightyellow": "FFFFE0", "lime": "00FF00", "limegreen": "32CD32",
    "linen": "FAF0E6", "magenta": "FF00FF", "maroon": "800000", "mediumaquamarine": "66CDAA",
    "mediumblue": "0000CD", "mediumorchid": "BA55D3", "mediumpurple": "9370DB", "mediumseagreen": "3CB371",
    "mediumslateblue": "7B68EE", "mediumspringgreen": "00FA9A", "mediumturquoise": "48D1CC", "mediumvioletred": "C71585",
    "midnightblue": "191970", "mintcream": "F5FFFA", "mistyrose": "FFE4E1", "moccasin": "FFE4B5",
    "navajowhite": "FFDEAD", "navy": "000080", "oldlace": "FDF5E6", "olive": "808000",
    "olivedrab": "6B8E23", "orange": "FFA500", "orangered": "FF4500", "orchid": "DA70D6",
    "palegoldenrod": "EEE8AA", "palegreen": "98FB98", "paleturquoise": "AFEEEE", "palevioletred": "DB7093",
    "papayawhip": "FFEFD5", "peachpuff": "FFDAB9", "peru": "CD853F", "pink": "FFC0CB",
    "plum": "DDA0DD", "powderblue": "B0E0E6", "purple": "800080", "rebeccapurple": "663399",
    "red": "FF0000", "rosybrown": "BC8F8F", "royalblue": "4169E1", "saddlebrown": "8B4513",
    "salmon": "FA8072", "sandybrown": "F4A460", "seagreen": "2E8B57", "seashell": "FFF5EE",
    "sienna": "A0522D", "silver": "C0C0C0", "skyblue": "87CEEB", "slateblue": "6A5ACD",
    "slategray": "708090", "slategrey": "708090", "snow": "FFFAFA", "springgreen": "00FF7F",
    "steelblue": "4682B4", "tan": "D2B48C", "teal": "008080", "thistle": "D8BFD8",
    "tomato": "FF6347", "turquoise": "40E0D0", "violet": "EE82EE", "wheat": "F5DEB3",
    "white": "FFFFFF", "whitesmoke": "F5F5F5", "yellow": "FFFF00", "yellowgreen": "9ACD32",
}
