"""Tests for dracula_palette.core.theme: the explicit theme context."""

import pytest
from dracula_palette.core.swatches import ALUCARD_COLORS, DRACULA_COLORS
from dracula_palette.core.theme import THEME_CONFIGS, ThemeContext


class TestThemeContext:
    def test_default_is_dracula(self):
        theme = ThemeContext()
        assert theme.mode == 'dracula'
        assert theme.is_dark and not theme.is_light
        assert theme.colors is DRACULA_COLORS

    def test_toggle(self):
        theme = ThemeContext()
        assert theme.toggle() == 'alucard'
        assert theme.colors is ALUCARD_COLORS
        assert theme.is_light
        assert theme.toggle() == 'dracula'

    def test_set_normalises(self):
        theme = ThemeContext()
        theme.set(' Alucard ')
        assert theme.mode == 'alucard'

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match='Unknown theme'):
            ThemeContext('solarized')

    def test_config(self):
        assert ThemeContext('alucard').config is THEME_CONFIGS['alucard']
        assert THEME_CONFIGS['dracula'].label == 'Dracula'

    def test_css_variables(self):
        variables = ThemeContext().css_variables()
        assert variables['--dracula-current-line'] == '#44475a'
        assert variables['--dracula-background'] == '#282a36'
        assert variables['--theme-mode'] == 'dracula'

    def test_css_variables_follow_mode(self):
        variables = ThemeContext('alucard').css_variables()
        assert variables['--dracula-background'] == '#fffbeb'
        assert variables['--theme-mode'] == 'alucard'

    def test_repr(self):
        assert repr(ThemeContext('alucard')) == "ThemeContext('alucard')"
