"""Environment and .env configuration for dracula-palette.

Precedence, highest first:
  1. Variables already in the OS environment (never overwritten).
  2. The file named by --env-file.
  3. The nearest .env at or above cwd, searched no further than the repo root (.git).

Recognised keys:
  DRACULA_PALETTE_THEME      dracula | alucard (default dracula)
  DRACULA_PALETTE_STANDARDS  comma list of standard keys (default material,hsluv,oklch)
  DRACULA_PALETTE_FORMAT     hex | rgb | rgba | hsl | hsla | oklch | lch | lab (default hex)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dracula_palette.core.export import COLOR_FORMATS
from dracula_palette.core.theme import THEME_MODES
from dracula_palette.core.types import PALETTE_STANDARDS

ENV_THEME = 'DRACULA_PALETTE_THEME'
ENV_STANDARDS = 'DRACULA_PALETTE_STANDARDS'
ENV_FORMAT = 'DRACULA_PALETTE_FORMAT'

DEFAULT_STANDARDS: tuple[str, ...] = ('material', 'hsluv', 'oklch')


def find_dotenv(start: Path) -> Path | None:
    """First .env at or above `start`; None once a .git boundary or the filesystem root is passed."""
    here = start.resolve()
    for directory in (here, *here.parents):
        dotenv = directory / '.env'
        if dotenv.is_file():
            return dotenv
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            break
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value, KEY="value", `export KEY=value`; full-line and trailing # comments."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip()
        if value[:1] in ('"', "'"):
            quote = value[0]
            end = value.find(quote, 1)
            value = value[1:end] if end != -1 else value[1:]
        elif ' #' in value:
            value = value.split(' #', 1)[0].rstrip()
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy a .env file into os.environ without touching keys that are already set.

    `env_file` wins over the walk-up search. Returns the file used, if any.
    """
    dotenv = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if dotenv is None or not dotenv.is_file():
        return None

    for key, value in parse_dotenv(dotenv).items():
        os.environ.setdefault(key, value)
    return dotenv


@dataclass(frozen=True)
class Settings:
    theme: str = 'dracula'
    standards: tuple[str, ...] = DEFAULT_STANDARDS
    color_format: str = 'hex'


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read Settings from `environ` (default os.environ). Raises ValueError on unknown values."""
    env = os.environ if environ is None else environ

    theme = env.get(ENV_THEME, '').strip().lower() or 'dracula'
    if theme not in THEME_MODES:
        raise ValueError(f'{ENV_THEME}={theme!r} is not one of: {", ".join(THEME_MODES)}')

    raw_standards = env.get(ENV_STANDARDS, '')
    standards = tuple(s.strip().lower() for s in raw_standards.split(',') if s.strip()) or DEFAULT_STANDARDS
    unknown = [s for s in standards if s not in PALETTE_STANDARDS]
    if unknown:
        raise ValueError(f'{ENV_STANDARDS} has unknown standard(s): {", ".join(unknown)}')

    color_format = env.get(ENV_FORMAT, '').strip().lower() or 'hex'
    if color_format not in COLOR_FORMATS:
        raise ValueError(f'{ENV_FORMAT}={color_format!r} is not one of: {", ".join(COLOR_FORMATS)}')

    return Settings(theme=theme, standards=standards, color_format=color_format)
