"""Cubehelix spiral (Dave Green, 2011).

Samples the cubehelix curve at each lightness in the configured range. The
spiral start comes from the base hue (hue / 360 * 3); rotations -1.5, hue
amplitude 1.0 and gamma 1.0 are the published defaults.

The result depends only on the base hue. Chroma and hue are not reported.

Example:
    dracula-palette generate cyan -s cubehelix --preview ./tmp
"""

from dracula_palette.core.colorimetry import rgb_to_hex, round_half_up
from dracula_palette.core.spaces import cubehelix
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import base_hsl, build_palette, safe_color, samples, usage_for_lightness

standard = Standard(
    key='cubehelix',
    name='Cubehelix',
    defaults=PaletteConfig('cubehelix', 10, (0.1, 0.9)),
    description='Perceptually uniform spiral through RGB cube',
    best_for='Scientific visualization, data representation',
    color_space='RGB',
    category='scientific',
)

ROTATIONS = -1.5
HUE_AMPLITUDE = 1.0
GAMMA = 1.0


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, _s, _l = base_hsl(base_color)
    start = h / 360 * 3

    colors = []
    for _t, lightness in samples(config):
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: rgb_to_hex(cubehelix(lightness, start, ROTATIONS, HUE_AMPLITUDE, GAMMA))),
                name=f'{base_color.name} Cubehelix {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
            )
        )

    return build_palette('cubehelix', f'Cubehelix {base_color.name}', base_color, colors)
