"""CIE LAB curve.

L* runs linearly across the configured range (scaled to 0-100). The base
a* and b* are scaled by sqrt(L / L_base) * 0.8 so hue is kept while chroma
follows lightness; a black base uses L_base = 50.

Reports chroma = hypot(a*, b*), hue = atan2(b*, a*) in degrees, of the
scaled coordinates.
"""

import math

from dracula_palette.core.colorimetry import rgb_to_hex, round_half_up, safe_rgb
from dracula_palette.core.spaces import cielab_to_rgb, rgb_to_cielab
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import build_palette, safe_color, samples, usage_for_lightness

standard = Standard(
    key='cielab',
    name='CIE LAB Curves',
    defaults=PaletteConfig('cielab', 10, (0.15, 0.85)),
    description='Bézier curves through CIE LAB color space',
    best_for='Accessible color palettes, smooth gradients',
    color_space='CIE LAB',
    category='web',
)

DEFAULT_BASE_L = 50.0
CHROMA_SCALE = 0.8


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    base_l, base_a, base_b = rgb_to_cielab(safe_rgb(base_color.hex))
    base_l = base_l or DEFAULT_BASE_L

    colors = []
    for _t, lightness in samples(config):
        lab_l = lightness * 100
        scale = math.sqrt(lab_l / base_l) * CHROMA_SCALE
        a = base_a * scale
        b = base_b * scale
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: rgb_to_hex(cielab_to_rgb((lab_l, a, b)))),
                name=f'{base_color.name} CIELAB {round_half_up(lab_l)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=math.hypot(a, b),
                hue=math.degrees(math.atan2(b, a)) % 360,
            )
        )

    return build_palette('cielab', f'CIELAB {base_color.name}', base_color, colors)
