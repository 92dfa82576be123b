"""Reference colour tables: Dracula (dark) and Alucard (light).

Values are the published Dracula and Alucard palettes.
OKLCH triplets are (lightness 0-1, chroma, hue degrees), rounded.
"""

from dracula_palette.core.colorimetry import parse_hex, rgb_to_hex
from dracula_palette.core.spaces import oklch_to_rgb, rgb_to_oklch
from dracula_palette.core.types import BaseColor

DRACULA_COLORS: tuple[BaseColor, ...] = (
    BaseColor('Background', '#282a36', (40, 42, 54), (0.19, 0.02, 264), 'Main background color', 'background'),
    BaseColor('Current Line', '#44475a', (68, 71, 90), (0.31, 0.03, 264), 'Current line highlight', 'background'),
    BaseColor('Selection', '#6272a4', (98, 114, 164), (0.49, 0.08, 264), 'Selection background', 'background'),
    BaseColor('Foreground', '#f8f8f2', (248, 248, 242), (0.97, 0.01, 102), 'Main text color', 'foreground'),
    BaseColor('Comment', '#6272a4', (98, 114, 164), (0.49, 0.08, 264), 'Comments and secondary text', 'foreground'),
    BaseColor('Cyan', '#8be9fd', (139, 233, 253), (0.87, 0.08, 199), 'Cyan accent color', 'accent'),
    BaseColor('Green', '#50fa7b', (80, 250, 123), (0.85, 0.15, 141), 'Green accent color', 'accent'),
    BaseColor('Orange', '#ffb86c', (255, 184, 108), (0.79, 0.1, 71), 'Orange accent color', 'accent'),
    BaseColor('Pink', '#ff79c6', (255, 121, 198), (0.74, 0.15, 334), 'Pink accent color', 'accent'),
    BaseColor('Purple', '#bd93f9', (189, 147, 249), (0.72, 0.12, 293), 'Purple accent color', 'accent'),
    BaseColor('Red', '#ff5555', (255, 85, 85), (0.67, 0.17, 27), 'Red accent color', 'accent'),
    BaseColor('Yellow', '#f1fa8c', (241, 250, 140), (0.92, 0.08, 102), 'Yellow accent color', 'accent'),
)

ALUCARD_COLORS: tuple[BaseColor, ...] = (
    BaseColor('Background', '#fffbeb', (255, 251, 235), (0.99, 0.02, 95), 'Main background color', 'background'),
    BaseColor('Current Line', '#6c664b', (108, 102, 75), (0.50, 0.04, 100), 'Current line highlight', 'background'),
    BaseColor('Selection', '#cfcfde', (207, 207, 222), (0.85, 0.02, 285), 'Selection background', 'background'),
    BaseColor('Foreground', '#1f1f1f', (31, 31, 31), (0.24, 0.0, 0), 'Main text color', 'foreground'),
    BaseColor('Comment', '#6c664b', (108, 102, 75), (0.50, 0.04, 100), 'Comments and secondary text', 'foreground'),
    BaseColor('Cyan', '#036a96', (3, 106, 150), (0.50, 0.11, 235), 'Cyan accent color', 'accent'),
    BaseColor('Green', '#14710a', (20, 113, 10), (0.50, 0.15, 140), 'Green accent color', 'accent'),
    BaseColor('Orange', '#a34d14', (163, 77, 20), (0.53, 0.13, 50), 'Orange accent color', 'accent'),
    BaseColor('Pink', '#a3144d', (163, 20, 77), (0.47, 0.17, 5), 'Pink accent color', 'accent'),
    BaseColor('Purple', '#644ac9', (100, 74, 201), (0.50, 0.19, 285), 'Purple accent color', 'accent'),
    BaseColor('Red', '#cb3a2a', (203, 58, 42), (0.56, 0.19, 30), 'Red accent color', 'accent'),
    BaseColor('Yellow', '#846e15', (132, 110, 21), (0.55, 0.11, 95), 'Yellow accent color', 'accent'),
)

VARIANT_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)


def find_color(name: str, colors: tuple[BaseColor, ...] = DRACULA_COLORS) -> BaseColor | None:
    """Case-insensitive lookup by name ('current line', 'Red', ...)."""
    wanted = ' '.join(name.replace('-', ' ').replace('_', ' ').split()).lower()
    for color in colors:
        if color.name.lower() == wanted:
            return color
    return None


def generate_color_variants(base: BaseColor) -> dict[int, str]:
    """Tonal ladder 50-950 around the colour's own OKLCH lightness.

    Step 500 sits at the base lightness; 50 runs up to 0.95 and 950 down to
    0.05. Chroma and hue are held at the base values.
    """
    if base.oklch is not None:
        base_l, base_c, base_h = base.oklch
    else:
        base_l, base_c, base_h = rgb_to_oklch(parse_hex(base.hex))

    variants: dict[int, str] = {}
    for step in VARIANT_STEPS:
        if step <= 500:
            lightness = 0.95 - (step - 50) / 450 * (0.95 - base_l)
        else:
            lightness = base_l - (step - 500) / 450 * (base_l - 0.05)
        lightness = max(0.05, min(0.95, lightness))
        variants[step] = rgb_to_hex(oklch_to_rgb((lightness, base_c, base_h)))
    return variants
