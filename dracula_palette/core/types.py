"""Shared types for dracula-palette: BaseColor, PaletteConfig, GeneratedColor, GeneratedPalette, Standard."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, get_args

PaletteStandard = Literal[
    'material',  # Material Design 3
    'hsluv',  # HSLuv perceptually uniform
    'oklch',  # OKLCH perceptually uniform
    'hcl',  # HCL (CIE LCH)
    'cam16-ucs',  # CAM16 Uniform Color Space
    'ipt',  # IPT color space
    'color-harmony',  # Color harmony rules
    'cielab',  # CIE LAB curves
    'hpluv',  # HPLuv pastel variant
    'cubehelix',  # Cubehelix algorithm
]

HarmonyRule = Literal[
    'monochromatic',
    'analogous',
    'complementary',
    'split-complementary',
    'triadic',
    'tetradic',
    'square',
    'double-split-complementary',
]

Usage = Literal['surface', 'on-surface', 'primary', 'secondary', 'accent', 'neutral']
WcagLevel = Literal['AA', 'AAA', 'fail']
ColorCategory = Literal['background', 'foreground', 'accent', 'ansi']
StandardCategory = Literal['popular', 'scientific', 'web', 'artistic']

PALETTE_STANDARDS: tuple[str, ...] = get_args(PaletteStandard)
HARMONY_RULES: tuple[str, ...] = get_args(HarmonyRule)
STANDARD_CATEGORIES: tuple[str, ...] = get_args(StandardCategory)


class PaletteConfigError(ValueError):
    """Raised when a PaletteConfig cannot produce a palette (e.g. steps < 2)."""


@dataclass(frozen=True)
class BaseColor:
    """A reference colour a palette is generated from."""

    name: str
    hex: str  # canonical lowercase #rrggbb
    rgb: tuple[int, int, int] | None = None
    oklch: tuple[float, float, float] | None = None  # (lightness 0-1, chroma, hue degrees)
    description: str = ''
    category: ColorCategory = 'accent'

    def __post_init__(self) -> None:
        object.__setattr__(self, 'hex', self.hex.strip().lower())


@dataclass(frozen=True)
class PaletteConfig:
    """Step configuration for one standard. Validated on construction."""

    standard: str
    steps: int
    lightness_range: tuple[float, float]
    chroma_range: tuple[float, float] | None = None
    harmony_rule: str | None = None
    hue_shift: float | None = None

    def __post_init__(self) -> None:
        if self.steps < 2:
            raise PaletteConfigError(f'{self.standard}: steps must be >= 2, got {self.steps}')
        lo, hi = self.lightness_range
        if not 0.0 <= lo <= hi <= 1.0:
            raise PaletteConfigError(f'{self.standard}: lightness range must satisfy 0 <= min <= max <= 1, got {lo}, {hi}')
        object.__setattr__(self, 'lightness_range', (float(lo), float(hi)))
        if self.chroma_range is not None:
            cmin, cmax = self.chroma_range
            if cmin > cmax:
                raise PaletteConfigError(f'{self.standard}: chroma range min > max ({cmin}, {cmax})')
            object.__setattr__(self, 'chroma_range', (float(cmin), float(cmax)))
        if self.harmony_rule is not None and self.harmony_rule not in HARMONY_RULES:
            raise PaletteConfigError(
                f'{self.standard}: unknown harmony rule {self.harmony_rule!r}. Available: {", ".join(HARMONY_RULES)}'
            )


@dataclass(frozen=True)
class GeneratedColor:
    """One tonal step. Position in the palette encodes the step."""

    hex: str
    name: str
    lightness: float  # 0-1
    usage: Usage
    chroma: float | None = None  # None when the standard does not report one
    hue: float | None = None  # degrees; None when the standard does not report one


@dataclass(frozen=True)
class AccessibilitySummary:
    """Contrast ratios keyed '{index}-{reference}' plus the palette-level WCAG grade."""

    contrast_ratios: dict[str, float] = field(default_factory=dict)
    wcag_level: WcagLevel = 'fail'

    def best_contrast(self, index: int) -> float:
        """Highest recorded ratio for the colour at `index` (1.0 if none)."""
        prefix = f'{index}-'
        ratios = [v for k, v in self.contrast_ratios.items() if k.startswith(prefix)]
        return max(ratios, default=1.0)


@dataclass(frozen=True)
class GeneratedPalette:
    """Result of one generator call. Never mutated; variants are new objects."""

    name: str
    standard: str
    base_color: BaseColor
    colors: tuple[GeneratedColor, ...]
    accessibility: AccessibilitySummary


@dataclass(frozen=True)
class PaletteGenerationResult:
    """Bundle returned by the multi-standard orchestrator."""

    palettes: tuple[GeneratedPalette, ...]
    base_color: BaseColor
    total_colors: int
    standards: tuple[str, ...]  # as requested, including any that were skipped


Generator = Callable[[BaseColor, PaletteConfig], GeneratedPalette]


class Standard:
    """A self-registering palette standard.

    Usage in a standard module:

        standard = Standard(key='material', name='Material Design 3', defaults=PaletteConfig(...))

        @standard.generator
        def generate(base_color, config):
            ...
    """

    def __init__(
        self,
        key: str,
        name: str,
        defaults: PaletteConfig,
        description: str = '',
        best_for: str = '',
        color_space: str = '',
        category: StandardCategory = 'popular',
    ):
        self.key = key
        self.name = name
        self.defaults = defaults
        self.description = description
        self.best_for = best_for
        self.color_space = color_space
        self.category = category
        self._generate_fn: Generator | None = None

    def generator(self, fn: Generator) -> Generator:
        """Decorator to register the generator function."""
        self._generate_fn = fn
        return fn

    def generate(self, base_color: BaseColor, config: PaletteConfig | None = None) -> GeneratedPalette:
        """Run the generator, using this standard's defaults when no config is given."""
        if self._generate_fn is None:
            raise RuntimeError(f'Standard {self.key} has no generator function')
        return self._generate_fn(base_color, config if config is not None else self.defaults)

    def __repr__(self) -> str:
        return f'Standard({self.key!r})'
