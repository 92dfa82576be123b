"""Helpers shared by the standard modules: sampling, usage tags, fallbacks."""

import logging
from collections.abc import Callable, Sequence

from dracula_palette.core.accessibility import calculate_accessibility
from dracula_palette.core.colorimetry import FALLBACK_GRAY, normalize_hex, rgb_to_hsl, safe_rgb
from dracula_palette.core.types import BaseColor, GeneratedColor, GeneratedPalette, PaletteConfig, Usage

log = logging.getLogger(__name__)

# Stand-in saturation for achromatic bases, so grays still produce a tinted ladder
DEFAULT_SATURATION = 0.5


def lerp(lo: float, hi: float, t: float) -> float:
    return lo + t * (hi - lo)


def samples(config: PaletteConfig) -> list[tuple[float, float]]:
    """(t, lightness) for each step; t runs 0..1 inclusive, lightness across the configured range."""
    lo, hi = config.lightness_range
    last = config.steps - 1
    return [(i / last, lerp(lo, hi, i / last)) for i in range(config.steps)]


def usage_for_lightness(lightness: float) -> Usage:
    if lightness > 0.8:
        return 'surface'
    if lightness > 0.6:
        return 'secondary'
    if lightness > 0.4:
        return 'primary'
    if lightness > 0.2:
        return 'accent'
    return 'on-surface'


def usage_for_step(step: int) -> Usage:
    """Material ladder buckets: 50-100 surface, 200-300 secondary, 500 primary, 400/600-700 accent, rest on-surface."""
    if step <= 100:
        return 'surface'
    if step <= 300:
        return 'secondary'
    if step == 500:
        return 'primary'
    if step <= 700:
        return 'accent'
    return 'on-surface'


def base_hsl(base_color: BaseColor) -> tuple[float, float, float]:
    """HSL of the base colour (hue degrees, saturation, lightness); unreadable hex reads as mid-gray."""
    return rgb_to_hsl(safe_rgb(base_color.hex))


def safe_color(convert: Callable[[], str]) -> str:
    """Run one colour conversion; any failure becomes FALLBACK_GRAY with a warning."""
    try:
        return normalize_hex(convert())
    except (ValueError, TypeError, ArithmeticError) as exc:
        log.warning('Colour conversion failed, using fallback %s: %s', FALLBACK_GRAY, exc)
        return FALLBACK_GRAY


def build_palette(standard: str, name: str, base_color: BaseColor, colors: Sequence[GeneratedColor]) -> GeneratedPalette:
    return GeneratedPalette(
        name=name,
        standard=standard,
        base_color=base_color,
        colors=tuple(colors),
        accessibility=calculate_accessibility(colors),
    )
