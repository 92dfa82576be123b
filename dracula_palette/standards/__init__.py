"""Auto-discovery of palette standard modules.

Every .py file in this package that defines a `standard` object is
auto-registered by dracula_palette.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in a frozen binary, where pkgutil.iter_modules cannot find them.
"""

# PyInstaller hidden imports: keep this list in sync with standard modules
import dracula_palette.standards.cam16_ucs as _cam16_ucs  # noqa: F401
import dracula_palette.standards.cielab as _cielab  # noqa: F401
import dracula_palette.standards.color_harmony as _color_harmony  # noqa: F401
import dracula_palette.standards.cubehelix as _cubehelix  # noqa: F401
import dracula_palette.standards.hcl as _hcl  # noqa: F401
import dracula_palette.standards.hpluv as _hpluv  # noqa: F401
import dracula_palette.standards.hsluv as _hsluv  # noqa: F401
import dracula_palette.standards.ipt as _ipt  # noqa: F401
import dracula_palette.standards.material as _material  # noqa: F401
import dracula_palette.standards.oklch as _oklch  # noqa: F401
