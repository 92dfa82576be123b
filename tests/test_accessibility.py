"""Tests for dracula_palette.core.accessibility: WCAG grading and accessible variants."""

from dataclasses import replace

import pytest
from dracula_palette import registry
from dracula_palette.core.accessibility import (
    ACCESSIBLE_SUFFIX,
    adjust_for_contrast,
    best_text_contrast,
    calculate_accessibility,
    generate_accessible_variants,
)
from dracula_palette.core.colorimetry import hex_to_hsl
from dracula_palette.core.swatches import find_color
from dracula_palette.core.types import GeneratedColor

LEVEL_ORDER = {'fail': 0, 'AA': 1, 'AAA': 2}


def _color(hex_value: str, name: str = 'c') -> GeneratedColor:
    return GeneratedColor(hex=hex_value, name=name, lightness=0.5, usage='primary')


class TestCalculateAccessibility:
    def test_all_black_is_aaa(self):
        summary = calculate_accessibility([_color('#000000')] * 4)
        assert summary.wcag_level == 'AAA'

    def test_empty_is_aaa(self):
        assert calculate_accessibility([]).wcag_level == 'AAA'

    def test_keys_per_reference(self):
        summary = calculate_accessibility([_color('#282a36'), _color('#f8f8f2')])
        assert set(summary.contrast_ratios) == {
            '0-white',
            '0-black',
            '0-foreground',
            '1-white',
            '1-black',
            '1-foreground',
        }
        assert summary.contrast_ratios['0-white'] > 14.0

    def test_mid_gray_is_aa_not_aaa(self):
        summary = calculate_accessibility([_color('#777777')] * 3)
        assert summary.wcag_level == 'AA'

    def test_unparsable_colour_records_error(self):
        summary = calculate_accessibility([_color('#000000'), _color('nope')])
        assert summary.contrast_ratios['1-error'] == 1.0
        # 1 of 2 passes AA (>= 50%) but not AAA (< 70%)
        assert summary.wcag_level == 'AA'

    def test_all_unparsable_fails(self):
        assert calculate_accessibility([_color('nope'), _color('#zzz')]).wcag_level == 'fail'

    def test_best_contrast(self):
        summary = calculate_accessibility([_color('#000000')])
        assert summary.best_contrast(0) == pytest.approx(21.0)
        assert summary.best_contrast(5) == 1.0


class TestAdjustForContrast:
    def test_passing_colour_untouched(self):
        assert adjust_for_contrast('#000000') == '#000000'

    def test_lightens_colour_where_black_text_wins(self):
        result = adjust_for_contrast('#808080', target=7.0)
        assert best_text_contrast(result) >= 7.0
        assert hex_to_hsl(result)[2] > hex_to_hsl('#808080')[2]

    def test_darkens_colour_where_white_text_wins(self):
        result = adjust_for_contrast('#666666', target=7.0)
        assert best_text_contrast(result) >= 7.0
        assert hex_to_hsl(result)[2] < hex_to_hsl('#666666')[2]

    def test_never_lowers_best_contrast(self):
        for hex_value in ('#808080', '#666666', '#ff5555', '#8be9fd', '#bd93f9'):
            assert best_text_contrast(adjust_for_contrast(hex_value, target=15.0)) >= best_text_contrast(hex_value)

    def test_unreachable_target_stops(self):
        result = adjust_for_contrast('#808080', target=22.0)
        assert best_text_contrast(result) >= best_text_contrast('#808080')


class TestAccessibleVariants:
    @pytest.fixture
    def palette(self):
        return registry.get('material').generate(find_color('purple'))

    def test_default_target_keeps_colours(self, palette):
        # every colour already reaches 4.5 against white or black
        variant = generate_accessible_variants(palette)
        assert [c.hex for c in variant.colors] == [c.hex for c in palette.colors]
        assert variant.name == palette.name + ACCESSIBLE_SUFFIX

    def test_failing_colours_are_renamed(self, palette):
        variant = generate_accessible_variants(palette, target=7.0)
        for before, after in zip(palette.colors, variant.colors):
            if best_text_contrast(before.hex) >= 7.0:
                assert after == before
            else:
                assert after.name == before.name + ACCESSIBLE_SUFFIX

    def test_best_contrast_never_decreases(self, palette):
        variant = generate_accessible_variants(palette, target=7.0)
        for before, after in zip(palette.colors, variant.colors):
            assert best_text_contrast(after.hex) >= best_text_contrast(before.hex)

    def test_level_never_worse(self, palette):
        variant = generate_accessible_variants(palette, target=7.0)
        assert LEVEL_ORDER[variant.accessibility.wcag_level] >= LEVEL_ORDER[palette.accessibility.wcag_level]

    def test_original_untouched(self, palette):
        snapshot = [c.hex for c in palette.colors]
        generate_accessible_variants(palette, target=7.0)
        assert [c.hex for c in palette.colors] == snapshot
        assert not palette.name.endswith(ACCESSIBLE_SUFFIX)

    def test_unparsable_colour_kept(self, palette):
        broken = replace(palette, colors=(_color('nope', 'Broken'),))
        variant = generate_accessible_variants(broken)
        assert variant.colors[0].hex == 'nope'
