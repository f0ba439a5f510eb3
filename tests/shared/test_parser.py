import pytest

from pipette.core.color import Color, ColorError
from pipette.core.options import AlphaPosition, Illuminant, Observer
from pipette.shared import parser as prs
from ..samples import (
    domain_edges,
    malformed_inputs,
    samples_cielab,
    samples_ciexyz,
    samples_cmyk,
    samples_hex,
    samples_hsl,
    samples_hsv,
    samples_hwb,
    samples_oklab,
    samples_oklch,
    samples_rgb,
)

PARSERS = {
    "rgb": prs.parse_rgb,
    "hsl": prs.parse_hsl,
    "cmyk": prs.parse_cmyk,
    "xyz": prs.parse_xyz,
    "lab": prs.parse_cielab,
    "lch": prs.parse_lch,
    "oklab": prs.parse_oklab,
    "oklch": prs.parse_oklch,
}


def _check(parse, samples):
    for text, expected in samples.items():
        rest, color = parse(text)
        assert rest.strip() == "", text
        assert tuple(color) == expected, text


def test_hex_samples():
    _check(prs.parse_hex, samples_hex)


def test_rgb_samples():
    _check(prs.parse_rgb, samples_rgb)


def test_hue_model_samples():
    _check(prs.parse_hsl, samples_hsl)
    _check(prs.parse_hsv, samples_hsv)
    _check(prs.parse_hwb, samples_hwb)


def test_cmyk_and_xyz_samples():
    _check(prs.parse_cmyk, samples_cmyk)
    _check(prs.parse_xyz, samples_ciexyz)


def test_cielab_and_oklab_samples():
    _check(prs.parse_cielab, samples_cielab)
    _check(prs.parse_oklab, samples_oklab)
    _check(prs.parse_oklch, samples_oklch)


@pytest.mark.parametrize("kind", sorted(malformed_inputs))
def test_malformed_inputs_raise(kind):
    for text in malformed_inputs[kind]:
        with pytest.raises(ColorError):
            PARSERS[kind](text)


@pytest.mark.parametrize("kind", sorted(domain_edges))
def test_large_components_inside_domain_parse(kind):
    for text in domain_edges[kind]:
        rest, color = PARSERS[kind](text)
        assert rest == "", text
        assert isinstance(color, Color)


def test_remaining_text_is_returned():
    assert prs.parse_rgb("rgb(1, 2, 3) tail")[0] == " tail"
    assert prs.parse_rgb("1 2 3 rest")[0] == " rest"
    assert prs.parse_hex("#ABCDEF;")[0] == ";"


def test_wrong_count_names_expected_count():
    with pytest.raises(ColorError, match="expected 4 values, got 3"):
        prs.parse_cmyk("cmyk(0, 0, 0)")


def test_unknown_unit_is_reported():
    with pytest.raises(ColorError, match="unrecognized unit"):
        prs.parse_hsl("hsl(10px, 50%, 50%)")


def test_missing_parenthesis_is_reported():
    with pytest.raises(ColorError, match="closing parenthesis"):
        prs.parse_lms("lms(1, 2, 3")


def test_trailing_separator_is_reported():
    with pytest.raises(ColorError, match="trailing separator"):
        prs.parse_rgb("rgb(1, 2, 3,)")
    with pytest.raises(ColorError, match="trailing separator"):
        prs.parse_rgb("rgb(1 2 3 / )")


def test_unreadable_token_is_reported():
    with pytest.raises(ColorError, match="unexpected 'x'"):
        prs.parse_rgb("rgb(1, x, 3)")
    with pytest.raises(ColorError, match="unexpected ';'"):
        prs.parse_rgb("rgb(1; 2; 3)")


def test_bare_one_is_a_whole_fraction():
    full = prs.parse_hsl("hsl(0, 100%, 50%)")[1]
    assert prs.parse_hsl("hsl(0, 1, 0.5)")[1] == full == Color(255, 0, 0)
    # Just above 1, bare values switch to percentages
    assert prs.parse_hsl("hsl(0, 1.01, 50)")[1] == prs.parse_hsl("hsl(0, 1.01%, 50%)")[1]
    assert prs.parse_hsl("hsl(0, 1.01, 50)")[1] != full


def test_wrong_function_name_is_rejected():
    with pytest.raises(ColorError, match="prefix"):
        prs.parse_hsl("hsv(0, 100%, 50%)")


def test_hue_wraps():
    assert prs.parse_hsl("hsl(370, 50%, 50%)")[1] == prs.parse_hsl("hsl(10, 50%, 50%)")[1]
    assert prs.parse_hwb("hwb(-350, 10%, 10%)")[1] == prs.parse_hwb("hwb(10, 10%, 10%)")[1]
    assert prs.parse_lch("lch(50, 30, 400)")[1] == prs.parse_lch("lch(50, 30, 40)")[1]
    assert prs.parse_oklch("oklch(0.6, 0.1, 1turn)")[1] == prs.parse_oklch("oklch(0.6, 0.1, 0)")[1]


def test_typographic_minus_is_accepted():
    assert prs.parse_hsl("hsl(−120, 100%, 50%)")[1] == Color(0, 0, 255)


def test_hex_alpha_positions():
    assert prs.parse_hex("#80FF0000", AlphaPosition.START)[1] == Color(255, 0, 0, 128)
    assert prs.parse_hex("#FF000080", AlphaPosition.END)[1] == Color(255, 0, 0, 128)
    assert prs.parse_hex("#8F00", AlphaPosition.START)[1] == Color(255, 0, 0, 136)
    assert prs.parse_hex("#FF0000", AlphaPosition.START)[1] == Color(255, 0, 0)


@pytest.mark.parametrize("text", ["#FF000080", "#F008", "#FF000", "#GG0000", "", "#"])
def test_hex_rejects_bad_lengths_without_alpha(text):
    with pytest.raises(ColorError):
        prs.parse_hex(text, AlphaPosition.NONE)


def test_alpha_component_positions():
    assert prs.parse_rgb("rgba(0.5, 255, 0, 0)", AlphaPosition.START)[1] == Color(255, 0, 0, 128)
    assert prs.parse_rgb("rgba(255, 0, 0, 0.5)", AlphaPosition.END)[1] == Color(255, 0, 0, 128)
    # Three components never take the first as alpha
    assert prs.parse_rgb("rgb(10, 20, 30)", AlphaPosition.START)[1] == Color(10, 20, 30)
    with pytest.raises(ColorError):
        prs.parse_rgb("rgba(255, 0, 0, 0.5)", AlphaPosition.NONE)


@pytest.mark.parametrize("alpha", ["1.5", "-0.1", "101%"])
def test_alpha_out_of_range(alpha):
    with pytest.raises(ColorError):
        prs.parse_hsl(f"hsla(0, 100%, 50%, {alpha})")


def test_non_alpha_notations_reject_extra_component():
    with pytest.raises(ColorError):
        prs.parse_oklab("oklab(0.5, 0, 0, 0.5)")


def test_cielab_uses_white_point():
    text = "lab(60, 40, 30)"
    d65 = prs.parse_cielab(text)[1]
    d50 = prs.parse_cielab(text, Illuminant.D50, Observer.TWO_DEGREE)[1]
    assert d65 != d50


def test_hunter_lab_white():
    assert prs.parse_hunter_lab("hunterlab(100, 0, 0)")[1] == Color(255, 255, 255)
    assert prs.parse_hunter_lab("hlab(0 0 0)")[1] == Color(0, 0, 0)
    with pytest.raises(ColorError):
        prs.parse_hunter_lab("hunterlab(120, 0, 0)")


def test_lms_accepts_any_finite_value():
    assert prs.parse_lms("lms(0, 0, 0)")[1] == Color(0, 0, 0)
    assert prs.parse_lms("lms(-5, 2, 1)")[1] == prs.parse_lms("lms(-5.0, 2.0, 1.0)")[1]
    with pytest.raises(ColorError):
        prs.parse_lms("lms(1%, 2, 3)")
