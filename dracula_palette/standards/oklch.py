"""OKLCH-inspired ladder with a perceptual lightness warp.

Each linearly interpolated lightness is raised to the power 0.8 before use,
which lifts the dark end. Saturation is the base saturation times
1 - (|l - 0.5| * 2)^1.5 * 0.4 on the warped lightness.

Works in HSL; the stored lightness is the warped value. The configured
chroma range is carried on the config but not applied.

Reports chroma = HSL saturation, hue = base HSL hue.

Example:
    dracula-palette generate '#ff5555' -s oklch
"""

from dracula_palette.core.colorimetry import hsl_to_hex, round_half_up
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import (
    DEFAULT_SATURATION,
    base_hsl,
    build_palette,
    safe_color,
    samples,
    usage_for_lightness,
)

standard = Standard(
    key='oklch',
    name='OKLCH',
    defaults=PaletteConfig('oklch', 11, (0.05, 0.95), chroma_range=(0.02, 0.2)),
    description='Latest perceptually uniform color space (CSS Color 4)',
    best_for='Modern web design, wide gamut displays',
    color_space='OKLCH',
    category='popular',
)

LIGHTNESS_WARP = 0.8


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, s, _l = base_hsl(base_color)
    s = s or DEFAULT_SATURATION

    colors = []
    for _t, linear in samples(config):
        lightness = linear**LIGHTNESS_WARP
        saturation = s * (1 - (abs(lightness - 0.5) * 2) ** 1.5 * 0.4)
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: hsl_to_hex(h, saturation, lightness)),
                name=f'{base_color.name} OKLCH {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=saturation,
                hue=h,
            )
        )

    return build_palette('oklch', f'OKLCH {base_color.name}', base_color, colors)
