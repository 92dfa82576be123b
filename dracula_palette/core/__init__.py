"""dracula_palette.core: foundation layer.

Contains the colour primitives, space converters, accessibility evaluator,
reference colour tables, exporters and type definitions.
This module has NO dependencies on dracula_palette.standards or dracula_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
