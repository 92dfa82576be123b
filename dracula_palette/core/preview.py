"""PNG previews of generated palettes.

render_swatch_strip draws one solid block per step, left to right.
render_gradient interpolates linearly (in sRGB) between a list of stops.
Both return PIL images; save_preview writes one to disk.

Example:
    dracula-palette generate red -s material --preview ./tmp
"""

import os
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from PIL import Image

from dracula_palette.core.colorimetry import safe_rgb
from dracula_palette.core.types import GeneratedPalette


def render_swatch_strip(palette: GeneratedPalette, swatch_width: int = 64, height: int = 64) -> Image.Image:
    """One `swatch_width` x `height` block per colour."""
    if swatch_width < 1 or height < 1:
        raise ValueError(f'swatch size must be positive, got {swatch_width}x{height}')
    count = max(len(palette.colors), 1)
    strip = np.zeros((height, swatch_width * count, 3), dtype=np.uint8)
    for i, color in enumerate(palette.colors):
        strip[:, i * swatch_width : (i + 1) * swatch_width] = safe_rgb(color.hex)
    return Image.fromarray(strip)


def render_gradient(hexes: Sequence[str], width: int = 512, height: int = 48) -> Image.Image:
    """Horizontal gradient through `hexes`, stops evenly spaced."""
    if not hexes:
        raise ValueError('gradient needs at least one colour')
    if width < 1 or height < 1:
        raise ValueError(f'gradient size must be positive, got {width}x{height}')

    stops = np.array([safe_rgb(h) for h in hexes], dtype=float)
    if len(stops) == 1:
        row = np.repeat(stops, width, axis=0)
    else:
        positions = np.linspace(0.0, 1.0, len(stops))
        x = np.linspace(0.0, 1.0, width)
        row = np.stack([np.interp(x, positions, stops[:, ch]) for ch in range(3)], axis=-1)

    image = np.repeat(np.rint(row)[np.newaxis, :, :], height, axis=0).astype(np.uint8)
    return Image.fromarray(image)


def save_preview(image: Image.Image, path: str | Path) -> Path:
    target = Path(path)
    os.makedirs(target.parent, exist_ok=True)
    image.save(target)
    return target
