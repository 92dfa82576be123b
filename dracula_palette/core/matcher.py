"""Match arbitrary input colours to the nearest reference colours.

Distance is CIEDE2000 in CIELAB. Similarity maps ΔE to a 0-100 score
(ΔE < 2 is imperceptible, 2-10 perceptible, 10+ a different colour).
"""

import logging
import math
from dataclasses import dataclass

from dracula_palette.core.colorimetry import ColorParseError, parse_hex
from dracula_palette.core.export import parse_color
from dracula_palette.core.spaces import rgb_to_cielab
from dracula_palette.core.swatches import DRACULA_COLORS
from dracula_palette.core.types import BaseColor

log = logging.getLogger(__name__)

DEFAULT_COLOR = '#ff79c6'  # Dracula pink
MAX_DISTANCE = 100.0


@dataclass(frozen=True)
class ColorSuggestion:
    distance: float
    color: BaseColor
    similarity: float  # 0-100


def is_valid_color(value: str) -> bool:
    try:
        parse_color(value)
    except ColorParseError:
        return False
    return True


def normalize_color_to_hex(value: str) -> str:
    """parse_color, falling back to Dracula pink with a warning."""
    try:
        return parse_color(value)
    except ColorParseError as exc:
        log.warning('%s; using %s', exc, DEFAULT_COLOR)
        return DEFAULT_COLOR


def delta_e_ciede2000(lab1: tuple[float, float, float], lab2: tuple[float, float, float]) -> float:
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2
    g = 0.5 * (1 - math.sqrt(c_bar**7 / (c_bar**7 + 25**7)))

    a1p = (1 + g) * a1
    a2p = (1 + g) * a2
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    h1p = math.degrees(math.atan2(b1, a1p)) % 360 if c1p else 0.0
    h2p = math.degrees(math.atan2(b2, a2p)) % 360 if c2p else 0.0

    dlp = l2 - l1
    dcp = c2p - c1p

    if c1p * c2p == 0:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180:
        dhp = h2p - h1p
    elif h2p - h1p > 180:
        dhp = h2p - h1p - 360
    else:
        dhp = h2p - h1p + 360
    d_hp = 2 * math.sqrt(c1p * c2p) * math.sin(math.radians(dhp) / 2)

    lp_bar = (l1 + l2) / 2
    cp_bar = (c1p + c2p) / 2
    if c1p * c2p == 0:
        hp_bar = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        hp_bar = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        hp_bar = (h1p + h2p + 360) / 2
    else:
        hp_bar = (h1p + h2p - 360) / 2

    t = (
        1
        - 0.17 * math.cos(math.radians(hp_bar - 30))
        + 0.24 * math.cos(math.radians(2 * hp_bar))
        + 0.32 * math.cos(math.radians(3 * hp_bar + 6))
        - 0.20 * math.cos(math.radians(4 * hp_bar - 63))
    )
    sl = 1 + 0.015 * (lp_bar - 50) ** 2 / math.sqrt(20 + (lp_bar - 50) ** 2)
    sc = 1 + 0.045 * cp_bar
    sh = 1 + 0.015 * cp_bar * t
    d_theta = 30 * math.exp(-(((hp_bar - 275) / 25) ** 2))
    rc = 2 * math.sqrt(cp_bar**7 / (cp_bar**7 + 25**7))
    rt = -rc * math.sin(math.radians(2 * d_theta))

    return math.sqrt((dlp / sl) ** 2 + (dcp / sc) ** 2 + (d_hp / sh) ** 2 + rt * (dcp / sc) * (d_hp / sh))


def color_distance(a: str, b: str) -> float:
    """CIEDE2000 between two colour strings; MAX_DISTANCE if either is unreadable."""
    try:
        lab_a = rgb_to_cielab(parse_hex(parse_color(a)))
        lab_b = rgb_to_cielab(parse_hex(parse_color(b)))
    except ColorParseError as exc:
        log.warning('Error calculating colour distance: %s', exc)
        return MAX_DISTANCE
    return delta_e_ciede2000(lab_a, lab_b)


def find_closest_colors(
    value: str,
    colors: tuple[BaseColor, ...] = DRACULA_COLORS,
    limit: int = 5,
) -> list[ColorSuggestion]:
    """Closest reference colours first. Empty list for unreadable input."""
    if not is_valid_color(value):
        return []

    suggestions = []
    for color in colors:
        distance = color_distance(value, color.hex)
        similarity = max(0.0, min(100.0, 100 - distance * 4))
        suggestions.append(ColorSuggestion(distance=distance, color=color, similarity=round(similarity, 1)))

    suggestions.sort(key=lambda s: s.distance)
    return suggestions[:limit]
