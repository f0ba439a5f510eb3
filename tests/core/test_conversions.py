import pytest

from pipette.core import config as c
from pipette.core import conversions as conv
from ..samples import opaque_colors


rgb_tolerance = 0.5
lab_tolerance = 0.01
xyz_tolerance = 0.01
oklab_tolerance = 1e-4


def _assert_close(actual, expected, tolerance):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) < tolerance, f"{actual} != {expected}"


def test_rgb_to_hsl_primaries():
    assert conv.rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)
    h, s, l_val = conv.rgb_to_hsl(0, 0, 255)
    assert h == pytest.approx(240.0)
    assert conv.rgb_to_hsl(128, 128, 128)[:2] == (0.0, 0.0)


def test_hsv_and_hwb_of_gray():
    assert conv.rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)
    h, w, b = conv.rgb_to_hwb(255, 255, 255)
    assert (w, b) == (1.0, 0.0)


def test_hwb_normalizes_whiteness_plus_blackness():
    _assert_close(conv.hwb_to_rgb(0, 0.8, 0.8), (127.5, 127.5, 127.5), 1e-9)


def test_cmyk_of_black_and_red():
    assert conv.rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)
    assert conv.rgb_to_cmyk(255, 0, 0) == (0.0, 1.0, 1.0, 0.0)
    assert conv.cmyk_to_rgb(0, 1, 1, 0) == (255.0, 0.0, 0.0)


def test_white_maps_to_reference_white():
    _assert_close(conv.rgb_to_xyz(255, 255, 255), c.SRGB_WHITE, xyz_tolerance)
    _assert_close(conv.rgb_to_lab(255, 255, 255), (100.0, 0.0, 0.0), lab_tolerance)
    _assert_close(conv.rgb_to_hunter_lab(255, 255, 255), (100.0, 0.0, 0.0), lab_tolerance)
    _assert_close(conv.rgb_to_oklab(255, 255, 255), (1.0, 0.0, 0.0), oklab_tolerance)
    _assert_close(conv.rgb_to_lms(255, 255, 255), (100.0, 100.0, 100.0), 0.05)


def test_red_reference_values():
    _assert_close(conv.rgb_to_xyz(255, 0, 0), (41.2456, 21.2673, 1.9334), xyz_tolerance)
    _assert_close(conv.rgb_to_lab(255, 0, 0), (53.2408, 80.0925, 67.2032), lab_tolerance)
    _assert_close(conv.rgb_to_oklab(255, 0, 0), (0.627955, 0.224863, 0.125846), oklab_tolerance)
    L, chroma, hue = conv.rgb_to_lch(255, 0, 0)
    _assert_close((L, chroma, hue), (53.2408, 104.5518, 39.999), 0.01)


def test_lab_lch_polar_conversion():
    _assert_close(conv.lab_to_lch(50.0, 3.0, 4.0), (50.0, 5.0, 53.1301), 1e-4)
    _assert_close(conv.lch_to_lab(50.0, 5.0, 53.130102354), (50.0, 3.0, 4.0), 1e-6)
    assert conv.lab_to_lch(50.0, 0.0, -1.0)[2] == pytest.approx(270.0)


def test_bradford_identity_and_white_mapping():
    identity = conv.bradford_matrix(c.SRGB_WHITE, c.SRGB_WHITE)
    for i in range(3):
        for j in range(3):
            assert identity[i][j] == pytest.approx(1.0 if i == j else 0.0)

    d50 = c.WHITE_POINTS_2["D50"]
    _assert_close(conv.adapt_xyz(c.SRGB_WHITE, c.SRGB_WHITE, d50), d50, 1e-9)
    _assert_close(conv.adapt_xyz(d50, d50, c.SRGB_WHITE), c.SRGB_WHITE, 1e-9)


def test_lab_depends_on_white_point():
    d50 = c.WHITE_POINTS_2["D50"]
    d65_lab = conv.rgb_to_lab(255, 99, 71)
    d50_lab = conv.rgb_to_lab(255, 99, 71, white=d50)
    assert max(abs(a - b) for a, b in zip(d65_lab, d50_lab)) > 0.5
    # Reference white stays neutral under any illuminant
    _assert_close(conv.rgb_to_lab(255, 255, 255, white=d50), (100.0, 0.0, 0.0), lab_tolerance)


def test_hunter_lab_of_black():
    assert conv.rgb_to_hunter_lab(0, 0, 0) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("white", [c.SRGB_WHITE, c.WHITE_POINTS_2["D50"], c.WHITE_POINTS_10["A"]])
def test_round_trip_through_every_space(white):
    for color in opaque_colors:
        rgb = color.rgb
        _assert_close(conv.hsl_to_rgb(*conv.rgb_to_hsl(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.hsv_to_rgb(*conv.rgb_to_hsv(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.hwb_to_rgb(*conv.rgb_to_hwb(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.cmyk_to_rgb(*conv.rgb_to_cmyk(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.xyz_to_rgb(*conv.rgb_to_xyz(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.lab_to_rgb(*conv.rgb_to_lab(*rgb, white=white), white=white), rgb, rgb_tolerance)
        _assert_close(conv.lch_to_rgb(*conv.rgb_to_lch(*rgb)), rgb, rgb_tolerance)
        _assert_close(
            conv.hunter_lab_to_rgb(*conv.rgb_to_hunter_lab(*rgb, white=white), white=white), rgb, rgb_tolerance
        )
        _assert_close(conv.lms_to_rgb(*conv.rgb_to_lms(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.oklab_to_rgb(*conv.rgb_to_oklab(*rgb)), rgb, rgb_tolerance)
        _assert_close(conv.oklch_to_rgb(*conv.rgb_to_oklch(*rgb)), rgb, rgb_tolerance)
