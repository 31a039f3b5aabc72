# python/gridsurface/surface.py
# Drawing-surface capability consumed by Grid.render plus two in-process implementations
# Exists so the renderer can target cairo, SVG, Matplotlib or a test recorder through one interface
# RELEVANT FILES:python/gridsurface/face.py,python/gridsurface/grid.py,python/gridsurface/helpers/mpl_display.py,tests/test_surface.py
"""Drawing surfaces.

The :class:`DrawingSurface` protocol uses cairo's method names, so a
``cairo.Context`` can be passed to :meth:`gridsurface.Grid.render` directly.

Example usage:
    from gridsurface import Grid, SvgSurface

    grid = Grid()
    grid.set_origin(300, 300)
    surface = SvgSurface(600, 600, background=(1, 1, 1, 1))
    grid.render(surface)
    surface.save_svg("surface.svg")
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, List, Optional, Protocol, Tuple, Union, runtime_checkable

from .colors import BLACK, Color

Command = Tuple[str, Tuple[Any, ...]]


@runtime_checkable
class DrawingSurface(Protocol):
    """Minimal 2-D vector drawing capability."""

    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None: ...
    def close_path(self) -> None: ...
    def set_source_rgba(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None: ...
    def fill(self) -> None: ...
    def fill_preserve(self) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def stroke(self) -> None: ...
    def translate(self, tx: float, ty: float) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...


class RecordingSurface:
    """Surface that records every call as a ``(name, args)`` tuple.

    Two renders of the same configuration compare equal through
    :attr:`commands`.
    """

    def __init__(self):
        self.commands: List[Command] = []

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append((name, args))

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def arc(self, xc, yc, radius, angle1, angle2):
        self._record("arc", xc, yc, radius, angle1, angle2)

    def close_path(self):
        self._record("close_path")

    def set_source_rgba(self, red, green, blue, alpha=1.0):
        self._record("set_source_rgba", red, green, blue, alpha)

    def fill(self):
        self._record("fill")

    def fill_preserve(self):
        self._record("fill_preserve")

    def set_line_width(self, width):
        self._record("set_line_width", width)

    def stroke(self):
        self._record("stroke")

    def translate(self, tx, ty):
        self._record("translate", tx, ty)

    def save(self):
        self._record("save")

    def restore(self):
        self._record("restore")

    def calls(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of every recorded call named ``name``, in order."""
        return [args for cmd, args in self.commands if cmd == name]

    def polygons(self) -> List[Tuple[List[Tuple[float, float]], Optional[Color]]]:
        """Closed paths that were filled, with the source color active at fill time."""
        out: List[Tuple[List[Tuple[float, float]], Optional[Color]]] = []
        path: List[Tuple[float, float]] = []
        source: Optional[Color] = None
        for cmd, args in self.commands:
            if cmd == "move_to":
                path = [args]
            elif cmd == "line_to":
                path.append(args)
            elif cmd == "set_source_rgba":
                source = args
            elif cmd in ("fill", "fill_preserve"):
                out.append((list(path), source))
                if cmd == "fill":
                    path = []
            elif cmd == "stroke":
                path = []
        return out

    def clear(self) -> None:
        self.commands.clear()


@dataclass(frozen=True)
class _GState:
    tx: float = 0.0
    ty: float = 0.0
    source: Color = BLACK
    line_width: float = 2.0


def _color_to_css(c: Color) -> str:
    """Convert RGBA (0-1) to CSS color string."""
    r = int(max(0, min(255, round(c[0] * 255))))
    g = int(max(0, min(255, round(c[1] * 255))))
    b = int(max(0, min(255, round(c[2] * 255))))
    a = max(0.0, min(1.0, c[3]))

    if abs(a - 1.0) < 0.001:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r},{g},{b},{a:.2f})"


class SvgSurface:
    """Surface that accumulates cairo-style drawing calls into an SVG document.

    Like cairo, the current path is not part of the saved state: ``restore``
    resets translation, source color and line width but keeps the path.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Optional[Color] = None,
        precision: int = 2,
    ):
        self.width = int(width)
        self.height = int(height)
        self.background = background
        self.precision = int(precision)
        self.elements: List[str] = []
        self._state = _GState()
        self._stack: List[_GState] = []
        self._path: List[str] = []
        self._has_point = False

    def _fmt(self, v: float) -> str:
        return f"{v:.{self.precision}f}"

    def _device(self, x: float, y: float) -> Tuple[float, float]:
        return x + self._state.tx, y + self._state.ty

    def move_to(self, x, y):
        dx, dy = self._device(x, y)
        self._path.append(f"M{self._fmt(dx)},{self._fmt(dy)}")
        self._has_point = True

    def line_to(self, x, y):
        if not self._has_point:
            self.move_to(x, y)
            return
        dx, dy = self._device(x, y)
        self._path.append(f"L{self._fmt(dx)},{self._fmt(dy)}")

    def arc(self, xc, yc, radius, angle1, angle2):
        while angle2 < angle1:
            angle2 += 2 * math.pi
        sx = xc + radius * math.cos(angle1)
        sy = yc + radius * math.sin(angle1)
        if self._has_point:
            self.line_to(sx, sy)
        else:
            self.move_to(sx, sy)
        r = self._fmt(radius)
        sweep = angle2 - angle1
        # SVG cannot draw a full circle with one arc command.
        if sweep >= 2 * math.pi:
            mid = angle1 + math.pi
            mx, my = self._device(xc + radius * math.cos(mid), yc + radius * math.sin(mid))
            self._path.append(f"A{r},{r} 0 0 1 {self._fmt(mx)},{self._fmt(my)}")
            ex, ey = self._device(sx, sy)
        else:
            ex, ey = self._device(xc + radius * math.cos(angle2), yc + radius * math.sin(angle2))
        large = 1 if (sweep % (2 * math.pi)) > math.pi else 0
        self._path.append(f"A{r},{r} 0 {large} 1 {self._fmt(ex)},{self._fmt(ey)}")

    def close_path(self):
        if self._path:
            self._path.append("Z")

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

    def _clear_path(self) -> None:
        self._path = []
        self._has_point = False

    def fill_preserve(self):
        if self._path:
            d = " ".join(self._path)
            self.elements.append(
                f'<path d="{d}" fill="{_color_to_css(self._state.source)}" stroke="none"/>'
            )

    def fill(self):
        self.fill_preserve()
        self._clear_path()

    def stroke(self):
        if self._path:
            d = " ".join(self._path)
            self.elements.append(
                f'<path d="{d}" fill="none" stroke="{_color_to_css(self._state.source)}" '
                f'stroke-width="{self._fmt(self._state.line_width)}" stroke-linejoin="round"/>'
            )
        self._clear_path()

    def to_svg(self) -> str:
        """Complete SVG document for everything drawn so far."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}">',
        ]
        if self.background is not None:
            bg_color = _color_to_css(self.background)
            lines.append(f'  <rect x="0" y="0" width="{self.width}" height="{self.height}" fill="{bg_color}"/>')
        lines.extend(f"  {element}" for element in self.elements)
        lines.append('</svg>')
        return '\n'.join(lines)

    def save_svg(self, path: Union[str, Path]) -> None:
        Path(path).write_text(self.to_svg(), encoding='utf-8')

    def save_pdf(self, path: Union[str, Path], dpi: int = 300) -> None:
        """Write a PDF through cairosvg.

        Raises:
            ImportError: If cairosvg is not installed.
        """
        cairosvg = _require_cairosvg("PDF")
        cairosvg.svg2pdf(bytestring=self.to_svg().encode('utf-8'), write_to=str(path), dpi=dpi)

    def save_png(self, path: Union[str, Path], scale: float = 1.0) -> None:
        """Write a PNG through cairosvg.

        Raises:
            ImportError: If cairosvg is not installed.
        """
        cairosvg = _require_cairosvg("PNG")
        cairosvg.svg2png(bytestring=self.to_svg().encode('utf-8'), write_to=str(path), scale=scale)


def _require_cairosvg(kind: str):
    try:
        import cairosvg
    except ImportError:
        raise ImportError(
            f"cairosvg is required for {kind} export. "
            "Install with: pip install cairosvg"
        )
    return cairosvg


__all__ = [
    'DrawingSurface',
    'RecordingSurface',
    'SvgSurface',
]
