"""Colorimetric primitives: sRGB transfer curve, XYZ/LMS matrices, WCAG contrast.

Every other module starts from a hex string, so hex parsing lives here too.
Strict functions raise ColorParseError; `safe_rgb` is the fallback-on-error
variant used by the generators to keep palette generation total.
"""

import colorsys
import logging
import math
import re
from collections.abc import Sequence
from typing import Literal

import numpy as np

log = logging.getLogger(__name__)

FALLBACK_GRAY = '#808080'

ContrastRating = Literal['fail', 'AA', 'AAA']

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

# sRGB <-> XYZ, D65 white point
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
XYZ_TO_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)

# Hunt-Pointer-Estevez
XYZ_TO_LMS = np.array(
    [
        [0.38971, 0.68898, -0.07868],
        [-0.22981, 1.18340, 0.04641],
        [0.0, 0.0, 1.0],
    ]
)
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)


class ColorParseError(ValueError):
    """Raised when a string cannot be read as a colour."""


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positives, matching CSS/JS channel rounding."""
    return math.floor(x + 0.5)


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))


def apply_matrix(matrix: np.ndarray, vec: Sequence[float]) -> tuple[float, float, float]:
    out = matrix @ np.asarray(vec, dtype=float)
    return float(out[0]), float(out[1]), float(out[2])


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse '#rgb' / '#rrggbb' (hash optional, any case) into 0-255 channels."""
    m = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not m:
        raise ColorParseError(f'Invalid hex colour: {value!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_int(rgb: Sequence[float]) -> tuple[int, int, int]:
    """Round half-up and clamp each channel to [0, 255]."""
    r, g, b = (max(0, min(255, round_half_up(c))) for c in rgb)
    return r, g, b


def rgb_to_hex(rgb: Sequence[float]) -> str:
    r, g, b = rgb_to_int(rgb)
    return f'#{r:02x}{g:02x}{b:02x}'


def normalize_hex(value: str) -> str:
    """Canonical lowercase '#rrggbb' form of a hex string."""
    return rgb_to_hex(parse_hex(value))


def safe_rgb(value: str) -> tuple[int, int, int]:
    """parse_hex, but falls back to mid-gray with a warning instead of raising."""
    try:
        return parse_hex(value)
    except ColorParseError as exc:
        log.warning('%s; using fallback %s', exc, FALLBACK_GRAY)
        return parse_hex(FALLBACK_GRAY)


def linearize(c: float) -> float:
    """sRGB gamma decode for one channel in [0, 1]."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def gamma_encode(c: float) -> float:
    """Inverse of linearize."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def rgb_to_xyz(rgb: Sequence[float]) -> tuple[float, float, float]:
    """0-255 sRGB -> CIE XYZ (Y of white = 1)."""
    linear = [linearize(c / 255.0) for c in rgb]
    return apply_matrix(SRGB_TO_XYZ, linear)


def xyz_to_rgb(xyz: Sequence[float]) -> tuple[int, int, int]:
    """CIE XYZ -> 0-255 sRGB, clamped and rounded."""
    linear = apply_matrix(XYZ_TO_SRGB, xyz)
    r, g, b = (round_half_up(clamp(gamma_encode(c)) * 255) for c in linear)
    return r, g, b


def xyz_to_lms(xyz: Sequence[float]) -> tuple[float, float, float]:
    return apply_matrix(XYZ_TO_LMS, xyz)


def lms_to_xyz(lms: Sequence[float]) -> tuple[float, float, float]:
    return apply_matrix(LMS_TO_XYZ, lms)


def rgb_to_hsl(rgb: Sequence[float]) -> tuple[float, float, float]:
    """0-255 sRGB -> (hue degrees, saturation 0-1, lightness 0-1). Achromatic hue is 0."""
    r, g, b = (c / 255.0 for c in rgb)
    h, lightness, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0, s, lightness


def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[float, float, float]:
    """(hue degrees, saturation, lightness) -> unrounded 0-255 channels."""
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, clamp(lightness), clamp(s))
    return r * 255.0, g * 255.0, b * 255.0


def hsl_to_hex(h: float, s: float, lightness: float) -> str:
    return rgb_to_hex(hsl_to_rgb(h, s, lightness))


def hex_to_hsl(value: str) -> tuple[float, float, float]:
    return rgb_to_hsl(parse_hex(value))


def relative_luminance(value: str) -> float:
    """WCAG 2.x relative luminance of a hex colour."""
    r, g, b = (linearize(c / 255.0) for c in parse_hex(value))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: str, b: str) -> float:
    """WCAG contrast ratio, 1.0 (identical) to 21.0 (black on white). Symmetric."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter = max(la, lb)
    darker = min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_rating(ratio: float, large_text: bool = False) -> ContrastRating:
    aa = 3.0 if large_text else 4.5
    aaa = 4.5 if large_text else 7.0
    if ratio >= aaa:
        return 'AAA'
    if ratio >= aa:
        return 'AA'
    return 'fail'
