"""Tests for dracula_palette.core.swatches: reference tables, lookup, variant ladders."""

import re

import pytest
from dracula_palette.core.colorimetry import parse_hex, relative_luminance
from dracula_palette.core.spaces import rgb_to_oklch
from dracula_palette.core.swatches import (
    ALUCARD_COLORS,
    DRACULA_COLORS,
    VARIANT_STEPS,
    find_color,
    generate_color_variants,
)
from dracula_palette.core.types import BaseColor

HEX_RE = re.compile(r'^#[0-9a-f]{6}$')


class TestTables:
    @pytest.mark.parametrize('table', [DRACULA_COLORS, ALUCARD_COLORS])
    def test_rgb_matches_hex(self, table):
        for color in table:
            assert HEX_RE.match(color.hex)
            assert color.rgb == parse_hex(color.hex)

    def test_same_names_in_both(self):
        assert [c.name for c in DRACULA_COLORS] == [c.name for c in ALUCARD_COLORS]

    def test_dracula_background(self):
        assert DRACULA_COLORS[0].hex == '#282a36'
        assert DRACULA_COLORS[0].category == 'background'

    def test_base_color_normalises_hex(self):
        assert BaseColor('X', ' #FF5555 ').hex == '#ff5555'


class TestFindColor:
    def test_case_insensitive(self):
        assert find_color('RED').hex == '#ff5555'

    def test_separators(self):
        assert find_color('current-line').name == 'Current Line'
        assert find_color('current_line').name == 'Current Line'

    def test_other_table(self):
        assert find_color('red', ALUCARD_COLORS).hex == '#cb3a2a'

    def test_missing(self):
        assert find_color('mauve') is None


class TestColorVariants:
    def test_steps(self):
        variants = generate_color_variants(find_color('purple'))
        assert tuple(variants) == VARIANT_STEPS
        assert all(HEX_RE.match(v) for v in variants.values())

    def test_light_to_dark(self):
        variants = generate_color_variants(find_color('purple'))
        assert relative_luminance(variants[50]) > relative_luminance(variants[500]) > relative_luminance(variants[950])

    def test_step_500_keeps_base_lightness(self):
        red = find_color('red')
        lightness, _c, _h = rgb_to_oklch(parse_hex(generate_color_variants(red)[500]))
        assert lightness == pytest.approx(red.oklch[0], abs=0.02)

    def test_without_stored_oklch(self):
        variants = generate_color_variants(BaseColor('Custom', '#bd93f9'))
        assert len(variants) == len(VARIANT_STEPS)
