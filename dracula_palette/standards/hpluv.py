"""HPLuv-style pastel ladder.

Lightness always runs 0.60 -> 0.95 (the configured step count is honoured,
the configured range is not). In CIELAB, L* follows that lightness and the
base a*/b* are scaled by 0.4 * lightness / base HSL lightness, which keeps
the hue and drains chroma toward pastel. If the LAB path fails the step
falls back to HSL with saturation min(s * 0.4, 0.3).

Reports chroma = hypot(a*, b*) of the scaled coordinates (HSL saturation
on the fallback path), hue = base HSL hue.
"""

import logging
import math

from dracula_palette.core.colorimetry import hsl_to_hex, rgb_to_hex, round_half_up, safe_rgb
from dracula_palette.core.spaces import cielab_to_rgb, rgb_to_cielab
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import (
    DEFAULT_SATURATION,
    base_hsl,
    build_palette,
    lerp,
    safe_color,
    usage_for_lightness,
)

log = logging.getLogger(__name__)

standard = Standard(
    key='hpluv',
    name='HPLuv (Pastel)',
    defaults=PaletteConfig('hpluv', 8, (0.6, 0.95)),
    description='HSLuv variant optimized for soft, pastel colors',
    best_for='Pastel designs, soft UI themes, minimalist interfaces',
    color_space='HPLuv',
    category='artistic',
)

PASTEL_RANGE = (0.6, 0.95)
PASTEL_CHROMA_SCALE = 0.4
MAX_FALLBACK_SATURATION = 0.3


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    rgb = safe_rgb(base_color.hex)
    h, s, base_l = base_hsl(base_color)
    base_l = base_l or 0.5
    _lab_l, lab_a, lab_b = rgb_to_cielab(rgb)

    colors = []
    last = config.steps - 1
    for i in range(config.steps):
        lightness = lerp(*PASTEL_RANGE, i / last)
        try:
            a = lab_a * PASTEL_CHROMA_SCALE * (lightness / base_l)
            b = lab_b * PASTEL_CHROMA_SCALE * (lightness / base_l)
            hex_value = rgb_to_hex(cielab_to_rgb((lightness * 100, a, b)))
            chroma = math.hypot(a, b)
        except (ValueError, ArithmeticError) as exc:
            log.warning('HPLuv LAB step failed for %s, using HSL: %s', base_color.name, exc)
            chroma = min((s or DEFAULT_SATURATION) * PASTEL_CHROMA_SCALE, MAX_FALLBACK_SATURATION)
            hex_value = safe_color(lambda: hsl_to_hex(h, chroma, lightness))

        colors.append(
            GeneratedColor(
                hex=hex_value,
                name=f'{base_color.name} HPLuv {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=chroma,
                hue=h,
            )
        )

    return build_palette('hpluv', f'HPLuv {base_color.name}', base_color, colors)
