"""Colour formatting, CSS colour parsing, and palette exporters.

format_color renders one colour as hex / rgb / rgba / hsl / hsla / oklch /
lch / lab text. parse_color reads any of those forms back to hex.
The palette exporters produce CSS custom properties, SCSS variables, a
Tailwind config snippet, a JSON document and Figma design tokens.
"""

import json
import math
import re
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal, get_args

from dracula_palette.core.colorimetry import (
    ColorParseError,
    hsl_to_rgb,
    normalize_hex,
    parse_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from dracula_palette.core.spaces import cielab_to_rgb, lab_to_lch, lch_to_lab, oklch_to_rgb, rgb_to_cielab, rgb_to_oklch
from dracula_palette.core.types import GeneratedPalette

ColorFormat = Literal['hex', 'rgb', 'rgba', 'hsl', 'hsla', 'oklch', 'lch', 'lab']
COLOR_FORMATS: tuple[str, ...] = get_args(ColorFormat)
FORMAT_EXAMPLE = '#ff5555'

_HEX_RE = re.compile(r'^#?(?:[0-9a-f]{3}|[0-9a-f]{6})$')
_FUNC_RE = re.compile(r'^(rgba?|hsla?|oklch|lch|lab)\(\s*([^()]*)\)$')


def _hsl_parts(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    h, s, lightness = rgb_to_hsl(rgb)
    return round_half_up(h) % 360, round_half_up(s * 100), round_half_up(lightness * 100)


def format_color(value: str, fmt: str) -> str:
    """Render a colour in one of COLOR_FORMATS. Raises ColorParseError / ValueError."""
    rgb = parse_hex(parse_color(value))
    r, g, b = rgb

    if fmt == 'hex':
        return rgb_to_hex(rgb)
    if fmt == 'rgb':
        return f'rgb({r}, {g}, {b})'
    if fmt == 'rgba':
        return f'rgba({r}, {g}, {b}, 1)'
    if fmt == 'hsl':
        h, s, lightness = _hsl_parts(rgb)
        return f'hsl({h}, {s}%, {lightness}%)'
    if fmt == 'hsla':
        h, s, lightness = _hsl_parts(rgb)
        return f'hsla({h}, {s}%, {lightness}%, 1)'
    if fmt == 'oklch':
        ok_l, ok_c, ok_h = rgb_to_oklch(rgb)
        return f'oklch({ok_l:.3f} {ok_c:.3f} {round_half_up(ok_h) % 360})'
    if fmt == 'lch':
        lab_l, lab_c, lab_h = lab_to_lch(rgb_to_cielab(rgb))
        return f'lch({round_half_up(lab_l)} {round_half_up(lab_c)} {round_half_up(lab_h) % 360})'
    if fmt == 'lab':
        lab_l, lab_a, lab_b = rgb_to_cielab(rgb)
        return f'lab({round_half_up(lab_l)} {round_half_up(lab_a)} {round_half_up(lab_b)})'
    raise ValueError(f'Unknown colour format: {fmt}. Available: {", ".join(COLOR_FORMATS)}')


def _finite(token: str) -> float:
    """float(), but nan/inf (and overflowing literals like 1e999) are not colour components."""
    value = float(token)
    if not math.isfinite(value):
        raise ColorParseError(f'Non-finite colour component: {token!r}')
    return value


def _number(token: str, percent_of: float = 1.0) -> float:
    if token.endswith('%'):
        return _finite(token[:-1]) / 100 * percent_of
    return _finite(token)


def _percent(token: str) -> float:
    return _finite(token.rstrip('%')) / 100


def _hue(token: str) -> float:
    return _finite(token.removesuffix('deg'))


def parse_color(text: str) -> str:
    """Parse hex or a CSS colour function (rgb/hsl/oklch/lch/lab, with or without alpha) to '#rrggbb'."""
    if not isinstance(text, str):
        raise ColorParseError(f'Unrecognised colour: {text!r}')
    value = text.strip().lower()
    if _HEX_RE.match(value):
        return normalize_hex(value)

    m = _FUNC_RE.match(value)
    if not m:
        raise ColorParseError(f'Unrecognised colour: {text!r}')
    func, body = m.groups()
    args = [part for part in re.split(r'[\s,/]+', body.strip()) if part]
    if len(args) not in (3, 4):
        raise ColorParseError(f'{func}() takes 3 components (plus optional alpha): {text!r}')

    a, b, c = args[:3]
    try:
        if func in ('rgb', 'rgba'):
            rgb: tuple[float, float, float] = (_number(a, 255), _number(b, 255), _number(c, 255))
        elif func in ('hsl', 'hsla'):
            rgb = hsl_to_rgb(_hue(a), _percent(b), _percent(c))
        elif func == 'oklch':
            rgb = oklch_to_rgb((_number(a), _finite(b), _hue(c)))
        elif func == 'lch':
            rgb = cielab_to_rgb(lch_to_lab((_number(a, 100), _finite(b), _hue(c))))
        else:
            rgb = cielab_to_rgb((_number(a, 100), _finite(b), _finite(c)))
        return rgb_to_hex(rgb)
    except ColorParseError:
        raise
    # huge finite components can overflow the cube in the LAB/OKLab inverses
    except (ValueError, ArithmeticError) as exc:
        raise ColorParseError(f'Invalid {func}() arguments: {text!r}') from exc


def color_format_options(example: str = FORMAT_EXAMPLE) -> list[dict[str, str]]:
    """Format choices, each described by `example` (Dracula red by default) rendered in that format."""
    return [{'value': fmt, 'label': fmt.upper(), 'description': format_color(example, fmt)} for fmt in COLOR_FORMATS]


# --- Palette exporters -----------------------------------------------------


def _slug(name: str) -> str:
    return re.sub(r'\s+', '-', name.lower())


def generate_css_variables(palette: GeneratedPalette) -> str:
    prefix = _slug(palette.name)
    lines = [f'  --{prefix}-{_slug(c.name)}: {c.hex};' for c in palette.colors]
    return ':root {\n' + '\n'.join(lines) + '\n}'


def generate_scss_variables(palette: GeneratedPalette) -> str:
    prefix = _slug(palette.name)
    variables = [f'${prefix}-{_slug(c.name)}: {c.hex};' for c in palette.colors]
    mixin = [f'  --{prefix}-{_slug(c.name)}: #{{${prefix}-{_slug(c.name)}}};' for c in palette.colors]
    return (
        f'// {palette.name} Palette\n'
        + '\n'.join(variables)
        + f'\n\n// Usage mixin\n@mixin {prefix}-colors {{\n'
        + '\n'.join(mixin)
        + '\n}'
    )


def generate_tailwind_config(palette: GeneratedPalette) -> str:
    prefix = _slug(palette.name)
    colors = {_slug(c.name): c.hex for c in palette.colors}
    body = json.dumps(colors, indent=8)
    return (
        '// Add to your tailwind.config.js\n'
        'module.exports = {\n'
        '  theme: {\n'
        '    extend: {\n'
        '      colors: {\n'
        f"        '{prefix}': {body}\n"
        '      }\n'
        '    }\n'
        '  }\n'
        '}'
    )


def generate_json_export(palette: GeneratedPalette, generated_at: datetime | None = None) -> str:
    """JSON document with rgb/hsl per colour. chroma and hue appear only when the standard reports them."""
    colors: list[dict[str, Any]] = []
    for color in palette.colors:
        rgb = parse_hex(color.hex)
        h, s, lightness = _hsl_parts(rgb)
        entry: dict[str, Any] = {
            'name': color.name,
            'hex': color.hex.upper(),
            'rgb': {'r': rgb[0], 'g': rgb[1], 'b': rgb[2]},
            'hsl': {'h': h, 's': s, 'l': lightness},
            'usage': color.usage,
            'lightness': round_half_up(color.lightness * 100),
        }
        if color.chroma is not None:
            entry['chroma'] = round(color.chroma, 3)
        if color.hue is not None:
            entry['hue'] = round_half_up(color.hue)
        colors.append(entry)

    stamp = generated_at or datetime.now(timezone.utc)
    data = {
        'name': palette.name,
        'standard': palette.standard,
        'baseColor': {'name': palette.base_color.name, 'hex': palette.base_color.hex},
        'accessibility': {'wcagLevel': palette.accessibility.wcag_level},
        'colors': colors,
        'totalColors': len(palette.colors),
        'generatedAt': stamp.isoformat(),
    }
    return json.dumps(data, indent=2)


def generate_figma_tokens(palette: GeneratedPalette) -> str:
    prefix = _slug(palette.name)
    tokens = {
        f'{prefix}-{_slug(c.name)}': {
            'value': c.hex,
            'type': 'color',
            'description': f'{c.name} - {c.usage} color',
        }
        for c in palette.colors
    }
    return json.dumps({prefix: tokens}, indent=2)


# name -> (exporter, file extension)
EXPORT_FORMATS: dict[str, tuple[Callable[[GeneratedPalette], str], str]] = {
    'css': (generate_css_variables, '.css'),
    'scss': (generate_scss_variables, '.scss'),
    'tailwind': (generate_tailwind_config, '.js'),
    'json': (generate_json_export, '.json'),
    'figma': (generate_figma_tokens, '.tokens.json'),
}


def export_palette(palette: GeneratedPalette, fmt: str) -> str:
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f'Unknown export format: {fmt}. Available: {", ".join(EXPORT_FORMATS)}')
    exporter, _ext = EXPORT_FORMATS[fmt]
    return exporter(palette)


def palette_slug(palette: GeneratedPalette) -> str:
    """File-safe stem for a palette: 'Material Red (Accessible)' -> 'material-red-accessible'."""
    return _slug(palette.name).replace('(', '').replace(')', '')


def export_filename(palette: GeneratedPalette, fmt: str) -> str:
    _exporter, ext = EXPORT_FORMATS[fmt]
    return palette_slug(palette) + ext


def write_export(path: str | Path, content: str) -> Path:
    """Write exporter output to disk, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content + '\n', encoding='utf-8')
    return target
