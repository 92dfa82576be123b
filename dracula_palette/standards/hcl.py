"""HCL (CIE LCH) ladder.

Lightness L* runs linearly across the configured range (scaled to 0-100).
Chroma is the base LCH chroma (30 for achromatic bases) times
0.6 + 0.4 * (1 - |t - 0.5| * 2), peaking at the mid step. Hue is held at the
base LCH hue. Out-of-gamut results are clamped to sRGB.

Reports chroma = LCH chroma, hue = base LCH hue.
"""

from dracula_palette.core.colorimetry import rgb_to_hex, round_half_up, safe_rgb
from dracula_palette.core.spaces import cielab_to_rgb, lab_to_lch, lch_to_lab, rgb_to_cielab
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import build_palette, safe_color, samples, usage_for_lightness

standard = Standard(
    key='hcl',
    name='HCL (CIE LCH)',
    defaults=PaletteConfig('hcl', 9, (0.15, 0.85)),
    description='Cylindrical representation of CIE LAB color space',
    best_for='Print design, color science applications',
    color_space='LCH',
    category='scientific',
)

DEFAULT_CHROMA = 30.0


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    _l, base_c, base_h = lab_to_lch(rgb_to_cielab(safe_rgb(base_color.hex)))
    base_c = base_c or DEFAULT_CHROMA

    colors = []
    for t, lightness in samples(config):
        lab_l = lightness * 100
        lch_c = base_c * (0.6 + 0.4 * (1 - abs(t - 0.5) * 2))
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: rgb_to_hex(cielab_to_rgb(lch_to_lab((lab_l, lch_c, base_h))))),
                name=f'{base_color.name} HCL {round_half_up(lab_l)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=lch_c,
                hue=base_h,
            )
        )

    return build_palette('hcl', f'HCL {base_color.name}', base_color, colors)
