"""Palette standard auto-discovery and lookup.

Scans dracula_palette/standards/ for modules that define a `standard`
object of type Standard and collects them into a table keyed by standard
tag ('material', 'cam16-ucs', ...).

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing; falls back to the known
module list below).
"""

import importlib
import pkgutil
from types import ModuleType

from dracula_palette.core.types import PALETTE_STANDARDS, STANDARD_CATEGORIES, PaletteConfig, Standard

_registry: dict[str, Standard] = {}
_modules: dict[str, ModuleType] = {}

# Known standard module names, fallback for frozen binaries
_STANDARD_MODULES = [
    'cam16_ucs',
    'cielab',
    'color_harmony',
    'cubehelix',
    'hcl',
    'hpluv',
    'hsluv',
    'ipt',
    'material',
    'oklch',
]


class UnknownStandardError(KeyError):
    """Raised by get() for a key no standard module registers."""


def discover() -> dict[str, Standard]:
    """Import all standard modules and return the registry."""
    if _registry:
        return _registry

    import dracula_palette.standards as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _STANDARD_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'dracula_palette.standards.{modname}')
        std = getattr(module, 'standard', None)
        if isinstance(std, Standard):
            _registry[std.key] = std
            _modules[std.key] = module

    return _registry


def get(key: str) -> Standard:
    """Get a standard by key."""
    reg = discover()
    if key not in reg:
        raise UnknownStandardError(f'Unknown standard: {key}. Available: {", ".join(sorted(reg))}')
    return reg[key]


def module_for(key: str) -> ModuleType:
    """The module defining `key`; its docstring is the standard's long help."""
    get(key)
    return _modules[key]


def all_standards() -> dict[str, Standard]:
    """All registered standards, in canonical order."""
    reg = discover()
    return {key: reg[key] for key in PALETTE_STANDARDS if key in reg}


def default_configs() -> dict[str, PaletteConfig]:
    return {key: std.defaults for key, std in all_standards().items()}


def standards_by_category(category: str) -> list[str]:
    if category not in STANDARD_CATEGORIES:
        raise ValueError(f'Unknown category: {category}. Available: {", ".join(STANDARD_CATEGORIES)}')
    return [key for key, std in all_standards().items() if std.category == category]


def standard_categories() -> dict[str, list[str]]:
    return {category: standards_by_category(category) for category in STANDARD_CATEGORIES}
