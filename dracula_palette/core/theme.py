"""Theme selection as an explicit context object.

Callers that need to know which reference table is active hold a
ThemeContext and pass it along. Palette generation never reads it.
"""

from dataclasses import dataclass
from typing import Literal, get_args

from dracula_palette.core.swatches import ALUCARD_COLORS, DRACULA_COLORS
from dracula_palette.core.types import BaseColor

ThemeMode = Literal['dracula', 'alucard']

THEME_MODES: tuple[str, ...] = get_args(ThemeMode)


@dataclass(frozen=True)
class ThemeConfig:
    mode: ThemeMode
    label: str
    description: str


THEME_CONFIGS: dict[str, ThemeConfig] = {
    'dracula': ThemeConfig('dracula', 'Dracula', 'Dark theme - The vampire that cannot stand the light'),
    'alucard': ThemeConfig('alucard', 'Alucard', 'Light theme - The dhampir bridging light and dark'),
}


class ThemeContext:
    """Current theme plus the reference colours that go with it."""

    def __init__(self, mode: str = 'dracula'):
        self._mode: str = 'dracula'
        self.set(mode)

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def config(self) -> ThemeConfig:
        return THEME_CONFIGS[self._mode]

    @property
    def colors(self) -> tuple[BaseColor, ...]:
        return DRACULA_COLORS if self._mode == 'dracula' else ALUCARD_COLORS

    @property
    def is_dark(self) -> bool:
        return self._mode == 'dracula'

    @property
    def is_light(self) -> bool:
        return self._mode == 'alucard'

    def set(self, mode: str) -> None:
        mode = mode.strip().lower()
        if mode not in THEME_MODES:
            raise ValueError(f'Unknown theme: {mode}. Available: {", ".join(THEME_MODES)}')
        self._mode = mode

    def toggle(self) -> str:
        self._mode = 'alucard' if self._mode == 'dracula' else 'dracula'
        return self._mode

    def css_variables(self) -> dict[str, str]:
        """`--dracula-<name>` custom properties for the active table, plus `--theme-mode`."""
        variables = {f'--dracula-{"-".join(c.name.lower().split())}': c.hex for c in self.colors}
        variables['--theme-mode'] = self._mode
        return variables

    def __repr__(self) -> str:
        return f'ThemeContext({self._mode!r})'
