# python/gridsurface/helpers/__init__.py
# Helper entry points for visualization backends (Matplotlib).
# RELEVANT FILES:python/gridsurface/helpers/mpl_display.py,tests/test_mpl_display.py
"""
Display helpers for gridsurface.

Matplotlib is optional; the helpers raise ImportError with an install hint
when it is missing.
"""

from .mpl_display import (
    MatplotlibSurface,
    show_grid,
    is_matplotlib_display_available,
)

__all__ = [
    'MatplotlibSurface',
    'show_grid',
    'is_matplotlib_display_available',
]
