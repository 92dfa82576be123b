"""Colour-harmony palette: lightness ladder cycling through harmony hues.

The harmony rule (default analogous) turns the base hue, plus the optional
hue_shift, into a hue set:

  monochromatic               h
  complementary               h, h+180
  analogous                   h, h+30, h-30
  split-complementary         h, h+150, h+210
  triadic                     h, h+120, h+240
  tetradic / square           h, h+90, h+180, h+270
  double-split-complementary  h, h+30, h+150, h+210, h-30

Step i uses hue i mod len(hues); lightness runs across the configured
range and saturation is the base saturation * 0.8.

Reports chroma = HSL saturation, hue = the harmony hue used for that step.

Example:
    dracula-palette generate pink -s color-harmony --harmony triadic
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
    key='color-harmony',
    name='Color Harmony',
    defaults=PaletteConfig('color-harmony', 12, (0.2, 0.8), harmony_rule='analogous'),
    description='Traditional color harmony rules (complementary, triadic, etc.)',
    best_for='Artistic design, color theory applications',
    color_space='Various',
    category='artistic',
)

HARMONY_OFFSETS: dict[str, tuple[int, ...]] = {
    'monochromatic': (0,),
    'complementary': (0, 180),
    'analogous': (0, 30, -30),
    'split-complementary': (0, 150, 210),
    'triadic': (0, 120, 240),
    'tetradic': (0, 90, 180, 270),
    'square': (0, 90, 180, 270),
    'double-split-complementary': (0, 30, 150, 210, -30),
}

SATURATION_SCALE = 0.8


def get_harmony_hues(base_hue: float, rule: str) -> list[float]:
    """Hues in degrees [0, 360) for `rule`, base hue first. Unknown rules give just the base hue."""
    offsets = HARMONY_OFFSETS.get(rule, (0,))
    return [(base_hue + offset) % 360 for offset in offsets]


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, s, _l = base_hsl(base_color)
    saturation = (s or DEFAULT_SATURATION) * SATURATION_SCALE
    hues = get_harmony_hues(h + (config.hue_shift or 0), config.harmony_rule or 'analogous')

    colors = []
    for i, (_t, lightness) in enumerate(samples(config)):
        hue = hues[i % len(hues)]
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: hsl_to_hex(hue, saturation, lightness)),
                name=f'{base_color.name} Harmony {round_half_up(lightness * 100)}',
                lightness=lightness,
                usage=usage_for_lightness(lightness),
                chroma=saturation,
                hue=hue,
            )
        )

    return build_palette('color-harmony', f'Color Harmony {base_color.name}', base_color, colors)
