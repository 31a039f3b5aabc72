# python/gridsurface/face.py
# One quadrilateral cell of the surface, drawn as a filled and outlined closed path
# Exists to hold the depth key for painter's ordering and the per-face draw contract
# RELEVANT FILES:python/gridsurface/grid.py,python/gridsurface/projection.py,python/gridsurface/surface.py,tests/test_face.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Tuple

from .colors import BLACK, Color, ColorLike, normalize_color
from .point import GridPoint
from .projection import Projection

if TYPE_CHECKING:
    from .surface import DrawingSurface

ColorFunc = Callable[[float, float, float], ColorLike]


@dataclass(frozen=True)
class FaceStyle:
    """Outline drawn around every face."""

    stroke_color: Color = BLACK
    stroke_width: float = 1.0


class Face:
    """A grid cell made of four lattice points.

    Corners are kept in traversal order (top-left, top-right, bottom-right,
    bottom-left) so the outline never crosses itself. The points are shared
    with the owning grid's lattice, not copied.
    """

    __slots__ = ("p0", "p1", "p2", "p3")

    def __init__(self, p0: GridPoint, p1: GridPoint, p2: GridPoint, p3: GridPoint):
        self.p0 = p0
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3

    def __repr__(self) -> str:
        return f"Face(zpos={self.zpos:.4f})"

    @property
    def corners(self) -> Tuple[GridPoint, GridPoint, GridPoint, GridPoint]:
        return (self.p0, self.p1, self.p2, self.p3)

    @property
    def zpos(self) -> float:
        """Average working z of the four corners."""
        return (self.p0.z + self.p1.z + self.p2.z + self.p3.z) / 4

    def original_center(self) -> Tuple[float, float, float]:
        """Average of the corners' untransformed coordinates."""
        return (
            (self.p0.orig_x + self.p1.orig_x + self.p2.orig_x + self.p3.orig_x) / 4,
            (self.p0.orig_y + self.p1.orig_y + self.p2.orig_y + self.p3.orig_y) / 4,
            (self.p0.orig_z + self.p1.orig_z + self.p2.orig_z + self.p3.orig_z) / 4,
        )

    def projected(self, projection: Projection) -> List[Tuple[float, float]]:
        return [projection.project(p.x, p.y, p.z) for p in self.corners]

    def resolve_color(self, color_func: ColorFunc) -> Color:
        x, y, z = self.original_center()
        return normalize_color(color_func(x, y, z))

    def draw(
        self,
        surface: "DrawingSurface",
        projection: Projection,
        color_func: ColorFunc,
        style: FaceStyle = FaceStyle(),
    ) -> bool:
        """Fill and outline this face on ``surface``.

        Returns False without touching the surface when the face is culled,
        either by its average depth or because one corner is near the camera.
        """
        if projection.is_culled(self.zpos):
            return False
        if any(projection.corner_culled(p.z) for p in self.corners):
            return False
        fill = self.resolve_color(color_func)
        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = self.projected(projection)

        surface.save()
        surface.move_to(x0, y0)
        surface.line_to(x1, y1)
        surface.line_to(x2, y2)
        surface.line_to(x3, y3)
        surface.close_path()

        surface.set_source_rgba(*fill)
        surface.fill_preserve()

        surface.set_line_width(style.stroke_width)
        surface.set_source_rgba(*style.stroke_color)
        surface.stroke()
        surface.restore()
        return True
