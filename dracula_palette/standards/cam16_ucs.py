"""CAM16-inspired ladder.

Each step remaps the base colour with cam16_lightness: HSL lightness set to
target^0.67 (a J-like curve) and saturation scaled by
1 - (|target - 0.5| * 2)^1.2 * 0.4, so mid tones read most chromatic.
This is a simplification, not a CAM16 appearance model.

The stored lightness is the requested target, before the 0.67 curve.
Reports chroma = adjusted HSL saturation, hue = base HSL hue.
"""

from dracula_palette.core.colorimetry import round_half_up
from dracula_palette.core.spaces import cam16_chroma_multiplier, cam16_lightness
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
    key='cam16-ucs',
    name='CAM16-UCS',
    defaults=PaletteConfig('cam16-ucs', 9, (0.1, 0.9)),
    description='Latest CIE color appearance model with uniform color space',
    best_for='Professional color matching, scientific applications',
    color_space='CAM16-UCS',
    category='scientific',
)


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, s, _l = base_hsl(base_color)
    s = s or DEFAULT_SATURATION

    colors = []
    for _t, lightness in samples(config):
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: cam16_lightness(base_color.hex, lightness)),
                name=f'{base_color.name} CAM16 {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=s * cam16_chroma_multiplier(lightness),
                hue=h,
            )
        )

    return build_palette('cam16-ucs', f'CAM16 {base_color.name}', base_color, colors)
