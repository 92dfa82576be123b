"""Multi-standard orchestration: one base colour, many palettes."""

import logging
from collections.abc import Iterable, Mapping

from dracula_palette import registry
from dracula_palette.core.env import DEFAULT_STANDARDS
from dracula_palette.core.types import BaseColor, GeneratedPalette, PaletteConfig, PaletteGenerationResult

log = logging.getLogger(__name__)


def generate_palettes_for_color(
    base_color: BaseColor,
    standards: Iterable[str] | None = None,
    overrides: Mapping[str, PaletteConfig] | None = None,
) -> PaletteGenerationResult:
    """Run each requested standard against `base_color`.

    Unknown standards are skipped (debug log); a standard whose generator
    raises is logged and skipped. `overrides` replaces the default config
    per standard key. The result lists the requested standards in order,
    skipped ones included; total_colors counts only generated colours.
    """
    requested = tuple(standards) if standards is not None else DEFAULT_STANDARDS
    overrides = overrides or {}
    palettes: list[GeneratedPalette] = []

    for key in requested:
        try:
            std = registry.get(key)
        except registry.UnknownStandardError:
            log.debug('Skipping unknown standard %r', key)
            continue

        try:
            palettes.append(std.generate(base_color, overrides.get(key)))
        except (ValueError, ArithmeticError) as exc:
            log.warning('Error generating %s palette for %s: %s', key, base_color.name, exc)

    return PaletteGenerationResult(
        palettes=tuple(palettes),
        base_color=base_color,
        total_colors=sum(len(p.colors) for p in palettes),
        standards=requested,
    )
