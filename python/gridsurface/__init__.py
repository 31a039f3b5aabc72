# python/gridsurface/__init__.py
# Public API for the gridsurface height-field renderer
# Exists to re-export the lattice, face, projection, surface and configuration types
# RELEVANT FILES: python/gridsurface/grid.py, python/gridsurface/surface.py, tests/test_grid.py
"""Render a height-mapped grid surface as depth-sorted, filled quads on a 2-D surface."""

from .colors import BLACK, WHITE, Color, hex_to_rgba, hsv, normalize_color
from .config import GridConfig, load_grid_config
from .errors import DegenerateGridError, GridSurfaceError, TiltRangeError
from .face import ColorFunc, Face, FaceStyle
from .grid import Grid, YFunction
from .point import GridPoint
from .projection import Projection
from .surface import DrawingSurface, RecordingSurface, SvgSurface

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "ColorFunc",
    "DegenerateGridError",
    "DrawingSurface",
    "Face",
    "FaceStyle",
    "Grid",
    "GridConfig",
    "GridPoint",
    "GridSurfaceError",
    "Projection",
    "RecordingSurface",
    "SvgSurface",
    "TiltRangeError",
    "YFunction",
    "hex_to_rgba",
    "hsv",
    "load_grid_config",
    "normalize_color",
    "__version__",
]
