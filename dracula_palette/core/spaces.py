"""Space-specific converters: IPT, CIELAB/LCH, OKLab/OKLCH, Cubehelix, CAM16-inspired lightness.

Each converter is a pure function pair round-tripping through the primitives
in colorimetry. Cubehelix is forward only.

OKLCH, HSLuv, HCL and CAM16 palettes are generated from HSL/LCH approximations
rather than the full perceptual models; `cam16_lightness` is that
approximation for CAM16. The exact OKLab transform here is used for export
formatting and parsing, not for palette generation.
"""

import math
from collections.abc import Sequence

import numpy as np

from dracula_palette.core.colorimetry import (
    ColorParseError,
    apply_matrix,
    clamp,
    gamma_encode,
    hex_to_hsl,
    hsl_to_hex,
    linearize,
    lms_to_xyz,
    rgb_to_int,
    rgb_to_xyz,
    round_half_up,
    xyz_to_lms,
    xyz_to_rgb,
)

# --- IPT -------------------------------------------------------------------

IPT_EXPONENT = 0.43

LMS_TO_IPT = np.array(
    [
        [0.4000, 0.4000, 0.2000],
        [4.4550, -4.8510, 0.3960],
        [0.8056, 0.3572, -1.1628],
    ]
)
IPT_TO_LMS = np.linalg.inv(LMS_TO_IPT)


def _signed_pow(x: float, p: float) -> float:
    return math.copysign(abs(x) ** p, x)


def rgb_to_ipt(rgb: Sequence[float]) -> tuple[float, float, float]:
    lms = xyz_to_lms(rgb_to_xyz(rgb))
    compressed = [_signed_pow(c, IPT_EXPONENT) for c in lms]
    return apply_matrix(LMS_TO_IPT, compressed)


def ipt_to_rgb(ipt: Sequence[float]) -> tuple[int, int, int]:
    compressed = apply_matrix(IPT_TO_LMS, ipt)
    lms = [_signed_pow(c, 1 / IPT_EXPONENT) for c in compressed]
    return xyz_to_rgb(lms_to_xyz(lms))


# --- CIELAB / LCH ----------------------------------------------------------

D65_WHITE = (0.95047, 1.0, 1.08883)
LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
_LAB_F_EPSILON = 0.206897  # LAB_EPSILON ** (1/3)


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return LAB_KAPPA * t + 16 / 116


def _lab_f_inv(f: float) -> float:
    if f > _LAB_F_EPSILON:
        return f**3
    return (f - 16 / 116) / LAB_KAPPA


def rgb_to_cielab(rgb: Sequence[float]) -> tuple[float, float, float]:
    """0-255 sRGB -> (L 0-100, a, b) relative to D65."""
    x, y, z = rgb_to_xyz(rgb)
    fx, fy, fz = (_lab_f(v / n) for v, n in zip((x, y, z), D65_WHITE))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def cielab_to_rgb(lab: Sequence[float]) -> tuple[int, int, int]:
    lightness, a, b = lab
    fy = (lightness + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    xyz = [_lab_f_inv(f) * n for f, n in zip((fx, fy, fz), D65_WHITE)]
    return xyz_to_rgb(xyz)


def lab_to_lch(lab: Sequence[float]) -> tuple[float, float, float]:
    """Hue is reported as 0 when chroma is effectively zero."""
    lightness, a, b = lab
    c = math.hypot(a, b)
    if round(c * 10000) == 0:
        return lightness, c, 0.0
    return lightness, c, math.degrees(math.atan2(b, a)) % 360.0


def lch_to_lab(lch: Sequence[float]) -> tuple[float, float, float]:
    lightness, c, h = lch
    rad = math.radians(h)
    return lightness, c * math.cos(rad), c * math.sin(rad)


# --- OKLab / OKLCH ---------------------------------------------------------

_LINEAR_TO_OKLMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_OKLMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_TO_OKLMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_OKLMS_TO_LINEAR = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def rgb_to_oklab(rgb: Sequence[float]) -> tuple[float, float, float]:
    linear = [linearize(c / 255.0) for c in rgb]
    lms = apply_matrix(_LINEAR_TO_OKLMS, linear)
    return apply_matrix(_OKLMS_TO_OKLAB, [_signed_pow(c, 1 / 3) for c in lms])


def oklab_to_rgb(lab: Sequence[float]) -> tuple[int, int, int]:
    lms = [c**3 for c in apply_matrix(_OKLAB_TO_OKLMS, lab)]
    linear = apply_matrix(_OKLMS_TO_LINEAR, lms)
    r, g, b = (round_half_up(clamp(gamma_encode(c)) * 255) for c in linear)
    return r, g, b


def rgb_to_oklch(rgb: Sequence[float]) -> tuple[float, float, float]:
    lightness, a, b = rgb_to_oklab(rgb)
    c = math.hypot(a, b)
    if c < 1e-4:
        return lightness, c, 0.0
    return lightness, c, math.degrees(math.atan2(b, a)) % 360.0


def oklch_to_rgb(lch: Sequence[float]) -> tuple[int, int, int]:
    lightness, c, h = lch
    rad = math.radians(h)
    return oklab_to_rgb((lightness, c * math.cos(rad), c * math.sin(rad)))


# --- Cubehelix -------------------------------------------------------------


def cubehelix(
    t: float,
    start: float = 0.5,
    rotations: float = -1.5,
    hue: float = 1.0,
    gamma: float = 1.0,
) -> tuple[int, int, int]:
    """Dave Green's cubehelix at position t in [0, 1], as 0-255 sRGB."""
    angle = 2 * math.pi * (start / 3.0 + 1.0 + rotations * t)
    fract = t**gamma
    amplitude = hue * fract * (1 - fract) / 2.0
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    r = fract + amplitude * (-0.14861 * cos_a + 1.78277 * sin_a)
    g = fract + amplitude * (-0.29227 * cos_a - 0.90649 * sin_a)
    b = fract + amplitude * (1.97294 * cos_a)
    return rgb_to_int((r * 255, g * 255, b * 255))


# --- CAM16-inspired --------------------------------------------------------

CAM16_LIGHTNESS_EXPONENT = 0.67


def cam16_chroma_multiplier(target: float) -> float:
    """Helmholtz-Kohlrausch style boost: colours read most chromatic at mid lightness."""
    return 1 - (abs(target - 0.5) * 2) ** 1.2 * 0.4


def cam16_lightness(base_hex: str, target: float) -> str:
    """Remap `base_hex` to `target` lightness with a J-like power curve.

    Not a CAM16 implementation: HSL lightness is set to target**0.67 and
    saturation scaled by cam16_chroma_multiplier. An unparsable base yields
    hsl(0, 0.5, target).
    """
    try:
        h, s, _lightness = hex_to_hsl(base_hex)
    except ColorParseError:
        return hsl_to_hex(0.0, 0.5, target)
    scaled = target**CAM16_LIGHTNESS_EXPONENT
    return hsl_to_hex(h, (s or 0.5) * cam16_chroma_multiplier(target), scaled)
