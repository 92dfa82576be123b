"""Material Design 3 tonal palette (steps 50-950).

Always emits the fixed ladder 50, 100, 200 ... 900, 950 regardless of the
configured step count. HSL lightness runs 0.95 -> 0.50 over steps 50-500
and 0.50 -> 0.05 over 500-950, so step 500 sits at mid lightness.

Saturation is the base saturation scaled by 0.7 at the extremes up to 1.0
at mid lightness. Usage comes from the step bucket, not the lightness.

Reports chroma = adjusted HSL saturation, hue = base HSL hue.

Example:
    dracula-palette generate purple -s material
"""

from dracula_palette.core.colorimetry import hsl_to_hex
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Standard
from dracula_palette.standards._common import DEFAULT_SATURATION, base_hsl, build_palette, safe_color, usage_for_step

standard = Standard(
    key='material',
    name='Material Design 3',
    defaults=PaletteConfig('material', 11, (0.05, 0.95)),
    description="Google's Material Design 3 tonal palette system",
    best_for='UI/UX design, Android apps, web interfaces',
    color_space='HCT (Hue-Chroma-Tone)',
    category='popular',
)

STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)


def step_lightness(step: int) -> float:
    if step <= 500:
        return 0.95 - (step - 50) / 450 * 0.45
    return 0.5 - (step - 500) / 450 * 0.45


@standard.generator
def generate(base_color: BaseColor, config: PaletteConfig) -> GeneratedPalette:
    h, s, _l = base_hsl(base_color)
    s = s or DEFAULT_SATURATION

    colors = []
    for step in STEPS:
        lightness = step_lightness(step)
        saturation = s * (0.7 + 0.3 * (1 - abs(lightness - 0.5) * 2))
        colors.append(
            GeneratedColor(
                hex=safe_color(lambda: hsl_to_hex(h, saturation, lightness)),
                name=f'{base_color.name} {step}',
                lightness=lightness,
                usage=usage_for_step(step),
                chroma=saturation,
                hue=h,
            )
        )

    return build_palette('material', f'Material {base_color.name}', base_color, colors)
