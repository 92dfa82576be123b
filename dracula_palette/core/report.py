"""Report builder: text and JSON output for palette generation results."""

import json
from typing import Any

from dracula_palette.core.types import GeneratedPalette, PaletteGenerationResult


def _color_line(palette: GeneratedPalette, index: int) -> str:
    color = palette.colors[index]
    best = palette.accessibility.best_contrast(index)
    return f'  {color.hex}  {color.usage:<10}  L={color.lightness:.2f}  {best:5.2f}:1  {color.name}'


def format_text(result: PaletteGenerationResult) -> str:
    """Format a generation result as human-readable text."""
    base = result.base_color
    lines = [f'dracula-palette: {base.name} ({base.hex}), {len(result.palettes)} palettes, {result.total_colors} colours']
    lines.append('')

    for palette in result.palettes:
        lines.append(f'── {palette.name} [{palette.standard}]  WCAG {palette.accessibility.wcag_level}')
        for i in range(len(palette.colors)):
            lines.append(_color_line(palette, i))
        lines.append('')

    skipped = [s for s in result.standards if s not in {p.standard for p in result.palettes}]
    if skipped:
        lines.append(f'skipped: {", ".join(skipped)}')
    return '\n'.join(lines).rstrip() + '\n'


def palette_to_dict(palette: GeneratedPalette) -> dict[str, Any]:
    return {
        'name': palette.name,
        'standard': palette.standard,
        'wcagLevel': palette.accessibility.wcag_level,
        'colors': [
            {
                'hex': c.hex,
                'name': c.name,
                'lightness': round(c.lightness, 4),
                'chroma': None if c.chroma is None else round(c.chroma, 4),
                'hue': None if c.hue is None else round(c.hue, 2),
                'usage': c.usage,
            }
            for c in palette.colors
        ],
        'contrastRatios': {k: round(v, 2) for k, v in palette.accessibility.contrast_ratios.items()},
    }


def format_json(result: PaletteGenerationResult) -> str:
    """Format a generation result as JSON."""
    obj: dict[str, Any] = {
        'baseColor': {'name': result.base_color.name, 'hex': result.base_color.hex},
        'standards': list(result.standards),
        'totalColors': result.total_colors,
        'palettes': [palette_to_dict(p) for p in result.palettes],
    }
    return json.dumps(obj, indent=2)
