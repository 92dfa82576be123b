"""WCAG accessibility evaluation for generated palettes.

calculate_accessibility grades a colour list against three text references
(white, black, Dracula foreground). generate_accessible_variants returns a
new palette in which every colour reaches the AA ratio against white or black
text, stepping HSL lightness 0.05 at a time for at most 20 iterations.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from dracula_palette.core.colorimetry import ColorParseError, contrast_ratio, hex_to_hsl, hsl_to_hex
from dracula_palette.core.types import AccessibilitySummary, GeneratedColor, GeneratedPalette, WcagLevel

log = logging.getLogger(__name__)

WHITE = '#ffffff'
BLACK = '#000000'
FOREGROUND = '#f8f8f2'  # Dracula foreground

REFERENCES: dict[str, str] = {
    'white': WHITE,
    'black': BLACK,
    'foreground': FOREGROUND,
}

AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0
AAA_PASS_RATE = 0.7
AA_PASS_RATE = 0.5

ADJUST_STEP = 0.05
MAX_ADJUST_ITERATIONS = 20
MIN_ADJUST_LIGHTNESS = 0.05
MAX_ADJUST_LIGHTNESS = 0.95

ACCESSIBLE_SUFFIX = ' (Accessible)'


def calculate_accessibility(colors: Sequence[GeneratedColor]) -> AccessibilitySummary:
    ratios: dict[str, float] = {}
    aa_count = 0
    aaa_count = 0

    for index, color in enumerate(colors):
        try:
            per_reference = {ref: contrast_ratio(color.hex, ref_hex) for ref, ref_hex in REFERENCES.items()}
        except ColorParseError as exc:
            log.warning('Contrast check failed for colour %d: %s', index, exc)
            ratios[f'{index}-error'] = 1.0
            continue

        for ref, ratio in per_reference.items():
            ratios[f'{index}-{ref}'] = ratio

        best = max(per_reference.values())
        if best >= AA_THRESHOLD:
            aa_count += 1
        if best >= AAA_THRESHOLD:
            aaa_count += 1

    total = len(colors)
    level: WcagLevel
    if aaa_count >= total * AAA_PASS_RATE:
        level = 'AAA'
    elif aa_count >= total * AA_PASS_RATE:
        level = 'AA'
    else:
        level = 'fail'

    return AccessibilitySummary(contrast_ratios=ratios, wcag_level=level)


def best_text_contrast(hex_value: str) -> float:
    """Better of white-text and black-text contrast."""
    return max(contrast_ratio(hex_value, WHITE), contrast_ratio(hex_value, BLACK))


def adjust_for_contrast(hex_value: str, target: float = AA_THRESHOLD) -> str:
    """Nudge HSL lightness until white or black text reaches `target`.

    Dark colours (white text wins) are pushed toward black, light colours
    toward white. The result never has lower best contrast than the input.
    """
    original_best = best_text_contrast(hex_value)
    if original_best >= target:
        return hex_value

    darken = contrast_ratio(hex_value, WHITE) > contrast_ratio(hex_value, BLACK)
    h, s, lightness = hex_to_hsl(hex_value)
    current = hex_value

    for _ in range(MAX_ADJUST_ITERATIONS):
        if best_text_contrast(current) >= target:
            break
        if darken:
            lightness = max(lightness - ADJUST_STEP, MIN_ADJUST_LIGHTNESS)
        else:
            lightness = min(lightness + ADJUST_STEP, MAX_ADJUST_LIGHTNESS)
        current = hsl_to_hex(h, s, lightness)

    if best_text_contrast(current) < original_best:
        return hex_value
    return current


def generate_accessible_variants(palette: GeneratedPalette, target: float = AA_THRESHOLD) -> GeneratedPalette:
    """New palette where failing colours are adjusted and renamed; passing colours are untouched."""
    colors: list[GeneratedColor] = []
    for color in palette.colors:
        try:
            passes = best_text_contrast(color.hex) >= target
        except ColorParseError as exc:
            log.warning('Cannot adjust %s: %s', color.name, exc)
            colors.append(color)
            continue

        if passes:
            colors.append(color)
        else:
            colors.append(replace(color, hex=adjust_for_contrast(color.hex, target), name=color.name + ACCESSIBLE_SUFFIX))

    return replace(
        palette,
        name=palette.name + ACCESSIBLE_SUFFIX,
        colors=tuple(colors),
        accessibility=calculate_accessibility(colors),
    )
