# python/gridsurface/helpers/mpl_display.py
# Matplotlib drawing surface for rendering grids into Axes.
# This exists to provide a thin, optional Matplotlib bridge for interactive previews and notebooks.
# RELEVANT FILES:python/gridsurface/surface.py,python/gridsurface/grid.py,tests/test_mpl_display.py
"""
Matplotlib display helpers for gridsurface.

The surface converts cairo-style path calls into ``PathPatch`` artists.
Each fill or stroke gets the next z-order, so the painter's ordering of
faces survives Matplotlib's own artist sorting.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional, Tuple

import numpy as np

from ..surface import _GState

# Optional matplotlib dependency
try:
    import matplotlib.pyplot as plt
    from matplotlib.patches import PathPatch
    from matplotlib.path import Path as MplPath
    _HAS_MATPLOTLIB = True
except ImportError:
    _HAS_MATPLOTLIB = False


def is_matplotlib_display_available() -> bool:
    """Check if matplotlib is available for display operations."""
    return _HAS_MATPLOTLIB


def _require_matplotlib():
    """Raise ImportError with helpful message if matplotlib not available."""
    if not _HAS_MATPLOTLIB:
        raise ImportError(
            "Matplotlib is required for display helpers. "
            "Install with: pip install matplotlib"
        )


class MatplotlibSurface:
    """Drawing surface that adds patches to a Matplotlib Axes.

    Args:
        ax: Target axes. Output coordinates are used as data coordinates.
        arc_segments: Line segments used to approximate a full circle.
    """

    def __init__(self, ax: Any, arc_segments: int = 32):
        _require_matplotlib()
        if not hasattr(ax, 'add_patch'):
            raise TypeError("ax must be a matplotlib Axes object")
        self.ax = ax
        self.arc_segments = int(arc_segments)
        self.patches: List[Any] = []
        self._state = _GState()
        self._stack: List[_GState] = []
        self._vertices: List[Tuple[float, float]] = []
        self._codes: List[int] = []

    def _device(self, x: float, y: float) -> Tuple[float, float]:
        return (x + self._state.tx, y + self._state.ty)

    def move_to(self, x, y):
        self._vertices.append(self._device(x, y))
        self._codes.append(MplPath.MOVETO)

    def line_to(self, x, y):
        if not self._codes:
            self.move_to(x, y)
            return
        self._vertices.append(self._device(x, y))
        self._codes.append(MplPath.LINETO)

    def arc(self, xc, yc, radius, angle1, angle2):
        while angle2 < angle1:
            angle2 += 2 * np.pi
        count = max(2, int(np.ceil(self.arc_segments * (angle2 - angle1) / (2 * np.pi))) + 1)
        angles = np.linspace(angle1, angle2, count)
        for i, a in enumerate(angles):
            x = xc + radius * float(np.cos(a))
            y = yc + radius * float(np.sin(a))
            if i == 0 and not self._codes:
                self.move_to(x, y)
            else:
                self.line_to(x, y)

    def close_path(self):
        if self._codes:
            self._vertices.append(self._vertices[-1])
            self._codes.append(MplPath.CLOSEPOLY)

    def set_source_rgba(self, red, green, blue, alpha=1.0):
        self._state = replace(self._state, source=(float(red), float(green), float(blue), float(alpha)))

    def set_line_width(self, width):
        self._state = replace(self._state, line_width=float(width))

    def translate(self, tx, ty):
        self._state = replace(self._state, tx=self._state.tx + tx, ty=self._state.ty + ty)

    def save(self):
        self._stack.append(self._state)

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        self._state = self._stack.pop()

    def _current_path(self) -> Optional["MplPath"]:
        if not self._codes:
            return None
        return MplPath(np.asarray(self._vertices, dtype=np.float64), list(self._codes))

    def _add(self, patch: Any) -> None:
        patch.set_zorder(len(self.patches) + 1)
        self.ax.add_patch(patch)
        self.patches.append(patch)

    def _clear_path(self) -> None:
        self._vertices = []
        self._codes = []

    def fill_preserve(self):
        path = self._current_path()
        if path is not None:
            self._add(PathPatch(path, facecolor=self._state.source, edgecolor='none', linewidth=0))

    def fill(self):
        self.fill_preserve()
        self._clear_path()

    def stroke(self):
        path = self._current_path()
        if path is not None:
            self._add(PathPatch(
                path,
                fill=False,
                edgecolor=self._state.source,
                linewidth=self._state.line_width,
                joinstyle='round',
            ))
        self._clear_path()


def show_grid(grid: Any, ax: Optional[Any] = None, figsize: Tuple[float, float] = (6, 6)) -> Any:
    """
    Render a grid into Matplotlib axes with screen-style orientation.

    Args:
        grid: Configured gridsurface.Grid
        ax: Axes to draw on; a new figure is created if None
        figsize: Figure size used when creating a new figure

    Returns:
        The axes drawn on

    Example:
        >>> grid = Grid()
        >>> ax = show_grid(grid)
        >>> plt.show()
    """
    _require_matplotlib()
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    surface = MatplotlibSurface(ax)
    grid.render(surface)
    ax.set_aspect('equal')
    ax.autoscale_view()
    # y grows downward on drawing surfaces
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    return ax


__all__ = [
    'MatplotlibSurface',
    'show_grid',
    'is_matplotlib_display_available',
]
