"""dracula-palette: tonal and harmony palettes across ten colour standards.

Usage: dracula-palette <command> [options]

Standards are auto-discovered from dracula_palette/standards/.
Each standard module's docstring is its documentation.
Run `dracula-palette help <standard>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, dracula-palette looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from dracula_palette import registry
from dracula_palette.core.accessibility import generate_accessible_variants
from dracula_palette.core.colorimetry import ColorParseError, contrast_ratio, wcag_rating
from dracula_palette.core.env import load_env, load_settings
from dracula_palette.core.export import (
    COLOR_FORMATS,
    EXPORT_FORMATS,
    export_filename,
    export_palette,
    format_color,
    palette_slug,
    parse_color,
    write_export,
)
from dracula_palette.core.matcher import find_closest_colors
from dracula_palette.core.preview import render_swatch_strip, save_preview
from dracula_palette.core.report import format_json, format_text
from dracula_palette.core.swatches import find_color, generate_color_variants
from dracula_palette.core.theme import THEME_MODES, ThemeContext
from dracula_palette.core.types import (
    HARMONY_RULES,
    PALETTE_STANDARDS,
    STANDARD_CATEGORIES,
    BaseColor,
    PaletteConfig,
    PaletteConfigError,
)
from dracula_palette.manager import generate_palettes_for_color

CUSTOM_COLOR_NAME = 'Custom'


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  dracula-palette generate red\n'
        "  dracula-palette generate '#ff5555' -s oklch -s hcl --json\n"
        '  dracula-palette generate purple --all --accessible\n'
        '  dracula-palette generate pink -s color-harmony --harmony triadic --hue-shift 15\n'
        '  dracula-palette generate cyan -s material -e css -o ./out --preview ./out\n'
        '  dracula-palette contrast "#f8f8f2" "#282a36"\n'
        "  dracula-palette format 'hsl(265, 89%, 78%)' oklch\n"
        '  dracula-palette match "#ff6e6e"\n'
        '  dracula-palette colors --theme alucard --variants\n'
        '  dracula-palette help oklch\n'
        '\n'
        'Environment (set in .env or environment):\n'
        '  DRACULA_PALETTE_THEME      dracula | alucard\n'
        '  DRACULA_PALETTE_STANDARDS  comma list, e.g. material,hsluv,oklch\n'
        '  DRACULA_PALETTE_FORMAT     default output format for `format`\n'
    )
    parser = argparse.ArgumentParser(
        prog='dracula-palette',
        description='Generate tonal and harmony palettes from a base colour and grade them for WCAG contrast.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before the subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    gen = sub.add_parser('generate', help='Generate palettes for a base colour')
    gen.add_argument('color', help='Reference colour name (red, current-line, ...) or any CSS colour')
    gen.add_argument(
        '-s',
        '--standard',
        action='append',
        choices=PALETTE_STANDARDS,
        metavar='STANDARD',
        help='Standard to run (repeatable). Default: DRACULA_PALETTE_STANDARDS or material,hsluv,oklch',
    )
    gen.add_argument('-a', '--all', action='store_true', help='Run every standard')
    gen.add_argument('--steps', type=int, default=None, help='Override step count')
    gen.add_argument('--lightness', type=float, nargs=2, metavar=('MIN', 'MAX'), help='Override lightness range')
    gen.add_argument('--harmony', choices=HARMONY_RULES, default=None, help='Harmony rule for color-harmony')
    gen.add_argument('--hue-shift', type=float, default=None, metavar='DEG', help='Rotate harmony hues by DEG')
    gen.add_argument('--accessible', action='store_true', help='Adjust colours until they reach WCAG AA')
    gen.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    gen.add_argument('-e', '--export', choices=sorted(EXPORT_FORMATS), default=None, help='Write one file per palette')
    gen.add_argument('-o', '--output', default='.', metavar='DIR', help='Directory for --export files (default: .)')
    gen.add_argument('--preview', default=None, metavar='DIR', help='Write a PNG swatch strip per palette to DIR')
    gen.add_argument('--theme', choices=THEME_MODES, default=None, help='Reference table for colour names')

    std = sub.add_parser('standards', help='List palette standards and their defaults')
    std.add_argument('--category', choices=STANDARD_CATEGORIES, default=None, help='Only this category')

    # `help` subcommand: prints full module docstring for a standard
    help_parser = sub.add_parser('help', help='Print full docs for a standard')
    help_parser.add_argument('standard', nargs='?', help='Standard key')

    con = sub.add_parser('contrast', help='WCAG contrast ratio between two colours')
    con.add_argument('foreground')
    con.add_argument('background')
    con.add_argument('--large', action='store_true', help='Grade as large text (3.0 / 4.5)')

    fmt = sub.add_parser('format', help='Convert a colour between CSS formats')
    fmt.add_argument('color')
    fmt.add_argument(
        'format', nargs='?', choices=(*COLOR_FORMATS, 'all'), default=None, help='Default: DRACULA_PALETTE_FORMAT'
    )

    match = sub.add_parser('match', help='Closest reference colours (CIEDE2000)')
    match.add_argument('color')
    match.add_argument('-n', '--limit', type=int, default=5)
    match.add_argument('--theme', choices=THEME_MODES, default=None)

    colors = sub.add_parser('colors', help='List the reference colours of a theme')
    colors.add_argument('--theme', choices=THEME_MODES, default=None)
    colors.add_argument('--variants', action='store_true', help='Include the 50-950 ladder for each colour')
    colors.add_argument('--css', action='store_true', help='Print as CSS custom properties')

    return parser


def _print_help(key: str | None) -> int:
    """Print full module docstring for a standard."""
    standards = registry.all_standards()

    if key is None:
        print('Available standards:\n')
        for name, std in standards.items():
            print(f'  {name:<14} {std.name}: {std.description}')
        print('\nRun: dracula-palette help <standard> for full docs.')
        return 0

    if key not in standards:
        print(f'Unknown standard: {key}', file=sys.stderr)
        print(f'Available: {", ".join(standards)}', file=sys.stderr)
        return 1

    doc = (registry.module_for(key).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {key!r})')
        return 0
    print(doc)
    return 0


def resolve_base_color(text: str, theme: ThemeContext) -> BaseColor:
    """A reference colour by name, else any parseable CSS colour."""
    found = find_color(text, theme.colors)
    if found is not None:
        return found
    return BaseColor(name=CUSTOM_COLOR_NAME, hex=parse_color(text))


def _overrides(args: argparse.Namespace, keys: tuple[str, ...]) -> dict[str, PaletteConfig]:
    changes: dict[str, object] = {}
    if args.steps is not None:
        changes['steps'] = args.steps
    if args.lightness is not None:
        changes['lightness_range'] = tuple(args.lightness)
    if args.harmony is not None:
        changes['harmony_rule'] = args.harmony
    if args.hue_shift is not None:
        changes['hue_shift'] = args.hue_shift
    if not changes:
        return {}
    return {key: dataclasses.replace(registry.get(key).defaults, **changes) for key in keys}


def _run_generate(args: argparse.Namespace) -> int:
    settings = load_settings()
    theme = ThemeContext(args.theme or settings.theme)
    base = resolve_base_color(args.color, theme)

    if args.all:
        keys = PALETTE_STANDARDS
    elif args.standard:
        keys = tuple(dict.fromkeys(args.standard))
    else:
        keys = settings.standards

    result = generate_palettes_for_color(base, keys, overrides=_overrides(args, keys))
    if args.accessible:
        palettes = tuple(generate_accessible_variants(p) for p in result.palettes)
        result = dataclasses.replace(result, palettes=palettes)

    if args.json:
        print(format_json(result))
    else:
        print(format_text(result), end='')

    if args.export:
        out_dir = Path(args.output)
        for palette in result.palettes:
            path = write_export(out_dir / export_filename(palette, args.export), export_palette(palette, args.export))
            print(f'dracula-palette: wrote {path}', file=sys.stderr)

    if args.preview:
        preview_dir = Path(args.preview)
        for palette in result.palettes:
            path = save_preview(render_swatch_strip(palette), preview_dir / f'{palette_slug(palette)}.png')
            print(f'dracula-palette: wrote {path}', file=sys.stderr)

    return 0


def _run_standards(args: argparse.Namespace) -> int:
    standards = registry.all_standards()
    keys = registry.standards_by_category(args.category) if args.category else list(standards)
    for key in keys:
        std = standards[key]
        lo, hi = std.defaults.lightness_range
        print(f'{key:<14} {std.name:<20} {std.category:<11} steps={std.defaults.steps:<3} L={lo:.2f}-{hi:.2f}')
        print(f'{"":<14} {std.color_space}. Best for: {std.best_for}')
    return 0


def _run_contrast(args: argparse.Namespace) -> int:
    ratio = contrast_ratio(parse_color(args.foreground), parse_color(args.background))
    print(f'{ratio:.2f}:1  {wcag_rating(ratio, large_text=args.large)}')
    return 0


def _run_format(args: argparse.Namespace) -> int:
    fmt = args.format or load_settings().color_format
    formats = COLOR_FORMATS if fmt == 'all' else (fmt,)
    for f in formats:
        line = format_color(args.color, f)
        print(f'{f:<6} {line}' if fmt == 'all' else line)
    return 0


def _run_match(args: argparse.Namespace) -> int:
    theme = ThemeContext(args.theme or load_settings().theme)
    suggestions = find_closest_colors(args.color, theme.colors, limit=args.limit)
    if not suggestions:
        print(f'error: not a colour: {args.color}', file=sys.stderr)
        return 1
    for s in suggestions:
        print(f'{s.color.hex}  {s.color.name:<13} ΔE={s.distance:6.2f}  {s.similarity:5.1f}%')
    return 0


def _run_colors(args: argparse.Namespace) -> int:
    theme = ThemeContext(args.theme or load_settings().theme)
    if args.css:
        print(':root {')
        for name, value in theme.css_variables().items():
            print(f'  {name}: {value};')
        print('}')
        return 0

    print(f'{theme.config.label}: {theme.config.description}')
    for color in theme.colors:
        print(f'  {color.hex}  {color.name:<13} {color.category:<10} {color.description}')
        if args.variants:
            ladder = generate_color_variants(color)
            print('    ' + '  '.join(f'{step}:{value}' for step, value in ladder.items()))
    return 0


_COMMANDS = {
    'generate': _run_generate,
    'standards': _run_standards,
    'contrast': _run_contrast,
    'format': _run_format,
    'match': _run_match,
    'colors': _run_colors,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'dracula-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.standard)

    try:
        return _COMMANDS[args.command](args)
    # ValueError also covers bad DRACULA_PALETTE_* values
    except (ColorParseError, PaletteConfigError, registry.UnknownStandardError, ValueError) as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
