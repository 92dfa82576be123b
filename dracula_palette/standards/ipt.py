"""IPT ladder (Ebner & Fairchild Image Processing Transform).

The base colour is taken to IPT once. Each step scales intensity by
2 * lightness and the opponent axes P and T by 0.8 + 0.4 * lightness, then
goes back through the exact inverse transform to sRGB (clamped).

Reports chroma = hypot(P, T), hue = atan2(T, P) in degrees, both of the
scaled coordinates.
"""

import math

from dracula_palette.core.colorimetry import rgb_to_hex, round_half_up, safe_rgb
from dracula_palette.core.spaces import ipt_to_rgb, rgb_to_ipt
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import build_palette, safe_color, samples, usage_for_lightness

standard = Standard(
    key='ipt',
    name='IPT Color Space',
    defaults=PaletteConfig('ipt', 9, (0.1, 0.9)),
    description='Image Processing Transform for HDR and wide gamut',
    best_for='HDR content, image processing, photography',
    color_space='IPT',
    category='scientific',
)


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    base_i, base_p, base_t = rgb_to_ipt(safe_rgb(base_color.hex))

    colors = []
    for _t, lightness in samples(config):
        i = base_i * lightness * 2
        p = base_p * (0.8 + 0.4 * lightness)
        t = base_t * (0.8 + 0.4 * lightness)
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: rgb_to_hex(ipt_to_rgb((i, p, t)))),
                name=f'{base_color.name} IPT {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=math.hypot(p, t),
                hue=math.degrees(math.atan2(t, p)) % 360,
            )
        )

    return build_palette('ipt', f'IPT {base_color.name}', base_color, colors)
