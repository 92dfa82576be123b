"""HSLuv-style ladder: evenly spaced lightness, saturation eased at the ends.

An HSL approximation of HSLuv, not an HSLuv implementation. Lightness is
spread linearly across the configured range; saturation is the base
saturation times 1 - |t - 0.5| * 0.3, so the mid step keeps the most colour.

Reports chroma = HSL saturation, hue = base HSL hue.
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
    key='hsluv',
    name='HSLuv',
    defaults=PaletteConfig('hsluv', 9, (0.1, 0.9)),
    description='Perceptually uniform HSL alternative based on CIELUV',
    best_for='Data visualization, perceptual uniformity',
    color_space='HSLuv',
    category='popular',
)


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, s, _l = base_hsl(base_color)
    s = s or DEFAULT_SATURATION

    colors = []
    for t, lightness in samples(config):
        saturation = s * (1 - abs(t - 0.5) * 0.3)
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: hsl_to_hex(h, saturation, lightness)),
                name=f'{base_color.name} HSLuv {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=saturation,
                hue=h,
            )
        )

    return build_palette('hsluv', f'HSLuv {base_color.name}', base_color, colors)
