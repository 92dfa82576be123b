"""Tests for dracula_palette.core.colorimetry: hex parsing, transfer curve, XYZ/LMS, WCAG contrast."""

import logging

import pytest
from dracula_palette.core.colorimetry import (
    ColorParseError,
    contrast_ratio,
    gamma_encode,
    hex_to_hsl,
    hsl_to_hex,
    linearize,
    lms_to_xyz,
    normalize_hex,
    parse_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_xyz,
    round_half_up,
    safe_rgb,
    wcag_rating,
    xyz_to_lms,
    xyz_to_rgb,
)

ACCENTS = ['#8be9fd', '#50fa7b', '#ffb86c', '#ff79c6', '#bd93f9', '#ff5555', '#f1fa8c']


class TestParseHex:
    def test_long_form(self):
        assert parse_hex('#ff5555') == (255, 85, 85)

    def test_short_form(self):
        assert parse_hex('#fff') == (255, 255, 255)

    def test_no_hash_any_case(self):
        assert parse_hex('BD93F9') == (189, 147, 249)

    def test_surrounding_whitespace(self):
        assert parse_hex('  #282a36 ') == (40, 42, 54)

    @pytest.mark.parametrize('bad', ['', 'nope', '#ff', '#ffffffff', '#gggggg', None])
    def test_invalid_raises(self, bad):
        with pytest.raises(ColorParseError):
            parse_hex(bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex('xyz')


class TestHexOutput:
    def test_normalize(self):
        assert normalize_hex('#FFF') == '#ffffff'
        assert normalize_hex('FF5555') == '#ff5555'

    def test_rgb_to_hex_rounds_half_up_and_clamps(self):
        assert rgb_to_hex((255.4, 84.5, -3)) == '#ff5500'
        assert rgb_to_hex((300, 0.49, 127.5)) == '#ff0080'

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestSafeRgb:
    def test_valid(self):
        assert safe_rgb('#50fa7b') == (80, 250, 123)

    def test_invalid_falls_back_to_gray(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            assert safe_rgb('not-a-colour') == (128, 128, 128)
        assert 'fallback' in caplog.text


class TestTransferCurve:
    def test_endpoints(self):
        assert linearize(0.0) == 0.0
        assert linearize(1.0) == pytest.approx(1.0)
        assert gamma_encode(1.0) == pytest.approx(1.0)

    def test_linear_segment(self):
        assert linearize(0.04) == pytest.approx(0.04 / 12.92)
        assert gamma_encode(0.003) == pytest.approx(0.003 * 12.92)

    @pytest.mark.parametrize('c', [0.0, 0.02, 0.1, 0.5, 0.9, 1.0])
    def test_round_trip(self, c):
        assert gamma_encode(linearize(c)) == pytest.approx(c, abs=1e-9)


class TestXyz:
    def test_white_is_d65(self):
        assert rgb_to_xyz((255, 255, 255)) == pytest.approx((0.95047, 1.0, 1.08883), abs=1e-4)

    def test_black(self):
        assert rgb_to_xyz((0, 0, 0)) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize('hex_value', ACCENTS)
    def test_round_trip(self, hex_value):
        rgb = parse_hex(hex_value)
        assert xyz_to_rgb(rgb_to_xyz(rgb)) == rgb

    def test_xyz_to_rgb_clamps(self):
        assert xyz_to_rgb((2.0, 2.0, 2.0)) == (255, 255, 255)
        assert xyz_to_rgb((-1.0, -1.0, -1.0)) == (0, 0, 0)

    def test_lms_round_trip(self):
        xyz = rgb_to_xyz((189, 147, 249))
        assert lms_to_xyz(xyz_to_lms(xyz)) == pytest.approx(xyz, abs=1e-9)


class TestHsl:
    def test_red(self):
        h, s, lightness = rgb_to_hsl((255, 85, 85))
        assert h == pytest.approx(0.0)
        assert s == pytest.approx(1.0)
        assert lightness == pytest.approx(2 / 3, abs=1e-3)

    def test_achromatic_hue_is_zero(self):
        h, s, _l = hex_to_hsl('#808080')
        assert h == 0.0
        assert s == 0.0

    def test_hsl_to_hex(self):
        assert hsl_to_hex(0, 1.0, 0.5) == '#ff0000'
        assert hsl_to_hex(120, 1.0, 0.5) == '#00ff00'
        assert hsl_to_hex(240, 1.0, 0.5) == '#0000ff'

    def test_hsl_to_hex_wraps_hue_and_clamps(self):
        assert hsl_to_hex(360, 1.0, 0.5) == '#ff0000'
        assert hsl_to_hex(0, 2.0, 1.5) == '#ffffff'


class TestContrast:
    def test_luminance_extremes(self):
        assert relative_luminance('#ffffff') == pytest.approx(1.0)
        assert relative_luminance('#000000') == 0.0

    def test_black_on_white(self):
        assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)

    def test_identical_is_one(self):
        for hex_value in ACCENTS:
            assert contrast_ratio(hex_value, hex_value) == 1.0

    def test_symmetric(self):
        assert contrast_ratio('#f8f8f2', '#282a36') == contrast_ratio('#282a36', '#f8f8f2')

    def test_dracula_foreground_on_background(self):
        assert contrast_ratio('#f8f8f2', '#282a36') > 7.0

    def test_invalid_raises(self):
        with pytest.raises(ColorParseError):
            contrast_ratio('#fff', 'nope')


class TestWcagRating:
    def test_normal_text(self):
        assert wcag_rating(7.0) == 'AAA'
        assert wcag_rating(4.5) == 'AA'
        assert wcag_rating(4.49) == 'fail'

    def test_large_text(self):
        assert wcag_rating(4.5, large_text=True) == 'AAA'
        assert wcag_rating(3.0, large_text=True) == 'AA'
        assert wcag_rating(2.9, large_text=True) == 'fail'
