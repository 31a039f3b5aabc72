# python/gridsurface/grid.py
# Height-mapped lattice, rigid transform, depth sort and render orchestration
# Exists to turn an elevation function over an (x, z) domain into depth-ordered quads on a 2-D surface
# RELEVANT FILES:python/gridsurface/point.py,python/gridsurface/face.py,python/gridsurface/projection.py,python/gridsurface/config.py,tests/test_grid.py

from __future__ import annotations

import logging
import math
from operator import attrgetter
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

import numpy as np

from .colors import WHITE, ColorLike, normalize_color
from .errors import DegenerateGridError, TiltRangeError
from .face import ColorFunc, Face, FaceStyle
from .point import GridPoint
from .projection import DEFAULT_FOCAL_LENGTH, DEFAULT_Z_MARGIN, Projection

if TYPE_CHECKING:
    from .config import ConfigSource
    from .surface import DrawingSurface

logger = logging.getLogger(__name__)

TAU = 2 * math.pi
HALF_PI = math.pi / 2

YFunction = Callable[[float, float], float]


def flat(x: float, z: float) -> float:
    return 0.0


def white(x: float, y: float, z: float) -> ColorLike:
    return WHITE


class Grid:
    """A parametric surface sampled on a regular (x, z) lattice.

    Configure it through the setters, then call :meth:`render` once per frame.
    Every render rebuilds the lattice from scratch, so nothing carries over
    between frames except the configuration.

    Example:
        >>> grid = Grid()
        >>> grid.set_grid_size(40)
        >>> grid.set_y_func(lambda x, z: math.sin(math.hypot(x, z) * TAU * 2) * 0.1)
        >>> grid.set_rotation_degrees(140)
        >>> grid.render(surface)
    """

    def __init__(self):
        self._columns = 20
        self._x_min, self._x_max = -1.0, 1.0
        self._z_min, self._z_max = -1.0, 1.0
        self._rotation = math.pi / 6
        self._tilt = math.pi / 6
        self._y_func: YFunction = flat
        self._color_func: ColorFunc = white
        self._y_scale = 1.0
        self._width = 400.0
        self._origin: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._perspective = False
        self._focal_length = DEFAULT_FOCAL_LENGTH
        self._z_margin = DEFAULT_Z_MARGIN
        self._style = FaceStyle()

        self._cells: List[GridPoint] = []
        self._faces: List[Face] = []
        self._shape: Tuple[int, int] = (0, 0)

    @classmethod
    def from_config(cls, config: "ConfigSource" = None, **overrides) -> "Grid":
        """Create a grid configured from a GridConfig, mapping, JSON path or None."""
        from .config import load_grid_config

        grid = cls()
        load_grid_config(config, overrides or None).apply(grid)
        return grid

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_grid_size(self, grid_size: int) -> None:
        """Set the number of columns; the row count follows the domain aspect ratio."""
        self._columns = int(grid_size)

    def set_x_range(self, x_min: float, x_max: float) -> None:
        self._x_min = float(x_min)
        self._x_max = float(x_max)

    def set_z_range(self, z_min: float, z_max: float) -> None:
        self._z_min = float(z_min)
        self._z_max = float(z_max)

    def set_y_scale(self, y_scale: float) -> None:
        self._y_scale = float(y_scale)

    def set_y_func(self, y_func: YFunction) -> None:
        """Set the function that computes the y value for a given x and z."""
        self._y_func = y_func

    def set_color_func(self, color_func: ColorFunc) -> None:
        """Set the function that computes the color for a given x, y, z."""
        self._color_func = color_func

    def set_rotation(self, t: float) -> None:
        """Set the yaw around the y axis, normalized into [0, 2pi)."""
        t = float(t) % TAU
        if t >= TAU:
            t = 0.0
        self._rotation = t

    def set_rotation_degrees(self, t: float) -> None:
        self.set_rotation(t / 180.0 * math.pi)

    def set_tilt(self, t: float) -> None:
        """Set the tilt around the x axis.

        Raises:
            TiltRangeError: if ``t`` is outside [-pi/2, pi/2]. The previous tilt is kept.
        """
        t = float(t)
        if not -HALF_PI <= t <= HALF_PI:
            raise TiltRangeError(t)
        self._tilt = t

    def set_tilt_degrees(self, t: float) -> None:
        self.set_tilt(t / 180.0 * math.pi)

    def set_width(self, w: float) -> None:
        """Set the output width of the graph along the x axis."""
        self._width = float(w)

    def set_origin(self, x: float, y: float, z: float = 0.0) -> None:
        """Translate the rendered surface to (x, y); z offsets the camera in perspective mode."""
        self._origin = (float(x), float(y), float(z))

    def set_perspective(self, perspective: bool) -> None:
        self._perspective = bool(perspective)

    def set_focal_length(self, focal_length: float) -> None:
        self._focal_length = float(focal_length)

    def set_z_margin(self, z_margin: float) -> None:
        self._z_margin = float(z_margin)

    def set_stroke(self, color: Optional[ColorLike] = None, width: Optional[float] = None) -> None:
        """Change the outline drawn around every face."""
        stroke_color = self._style.stroke_color if color is None else normalize_color(color)
        stroke_width = self._style.stroke_width if width is None else float(width)
        self._style = FaceStyle(stroke_color=stroke_color, stroke_width=stroke_width)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        """Row count derived from the column count and the domain aspect ratio."""
        x_range = self._x_max - self._x_min
        z_range = self._z_max - self._z_min
        if x_range <= 0 or z_range <= 0:
            raise DegenerateGridError(
                f"x and z ranges must be positive, got x=[{self._x_min}, {self._x_max}] "
                f"z=[{self._z_min}, {self._z_max}]"
            )
        return int(self._columns * z_range / x_range)

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self._x_min, self._x_max)

    @property
    def z_range(self) -> Tuple[float, float]:
        return (self._z_min, self._z_max)

    @property
    def y_scale(self) -> float:
        return self._y_scale

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def tilt(self) -> float:
        return self._tilt

    @property
    def width(self) -> float:
        return self._width

    @property
    def origin(self) -> Tuple[float, float, float]:
        return self._origin

    @property
    def perspective(self) -> bool:
        return self._perspective

    @property
    def focal_length(self) -> float:
        return self._focal_length

    @property
    def z_margin(self) -> float:
        return self._z_margin

    @property
    def style(self) -> FaceStyle:
        return self._style

    @property
    def scale(self) -> float:
        """Uniform output scale: output width per unit of x."""
        x_range = self._x_max - self._x_min
        if x_range <= 0:
            raise DegenerateGridError(f"x range must be positive, got [{self._x_min}, {self._x_max}]")
        return self._width / x_range

    @property
    def projection(self) -> Projection:
        return Projection(
            scale=self.scale,
            perspective=self._perspective,
            focal_length=self._focal_length,
            origin_z=self._origin[2],
            z_margin=self._z_margin,
        )

    @property
    def points(self) -> List[GridPoint]:
        """Lattice from the last rebuild, row-major from the z_max row."""
        return list(self._cells)

    @property
    def faces(self) -> List[Face]:
        """Faces from the last build_faces, in cell order."""
        return list(self._faces)

    def positions(self) -> np.ndarray:
        """Working coordinates of the current lattice as an (N, 3) array."""
        return np.asarray([p.position() for p in self._cells], dtype=np.float64).reshape(-1, 3)

    def original_positions(self) -> np.ndarray:
        """Untransformed coordinates of the current lattice as an (N, 3) array."""
        return np.asarray([p.original() for p in self._cells], dtype=np.float64).reshape(-1, 3)

    def _check_config(self) -> Tuple[int, int]:
        columns = self._columns
        if columns < 1:
            raise DegenerateGridError(f"grid size must be >= 1, got {columns}")
        rows = self.rows
        if rows < 1:
            raise DegenerateGridError(
                f"domain aspect ratio leaves no rows for {columns} columns "
                f"(x=[{self._x_min}, {self._x_max}], z=[{self._z_min}, {self._z_max}])"
            )
        if self._width <= 0:
            raise DegenerateGridError(f"width must be > 0, got {self._width}")
        if self._perspective and self._focal_length <= 0:
            raise DegenerateGridError(f"focal length must be > 0, got {self._focal_length}")
        return columns, rows

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def rebuild(self) -> List[GridPoint]:
        """Lay out a fresh lattice and apply the elevation function.

        Points run row-major from z_max to z_min, x_min to x_max within a row.
        Each point's height is snapshotted into its original y before any rotation.
        """
        columns, rows = self._check_config()
        xs = np.linspace(self._x_min, self._x_max, columns + 1)
        zs = np.linspace(self._z_max, self._z_min, rows + 1)
        cells: List[GridPoint] = []
        for zf in zs:
            for xf in xs:
                p = GridPoint(float(xf), 0.0, float(zf))
                p.elevate(self._y_func(p.x, p.z) * self._y_scale)
                cells.append(p)
        self._cells = cells
        self._faces = []
        self._shape = (columns, rows)
        return cells

    def transform(self) -> None:
        """Recenter the lattice on the domain center, then yaw, then tilt."""
        x_center = (self._x_min + self._x_max) / 2
        z_center = (self._z_min + self._z_max) / 2
        for p in self._cells:
            p.x -= x_center
            p.z -= z_center
        for p in self._cells:
            p.rotate_y(self._rotation)
        for p in self._cells:
            p.rotate_x(self._tilt)

    def _cell(self, x: int, z: int) -> GridPoint:
        return self._cells[z * (self._shape[0] + 1) + x]

    def build_faces(self) -> List[Face]:
        """One face per lattice cell, corners in (x,z) (x+1,z) (x+1,z+1) (x,z+1) order."""
        columns, rows = self._shape
        faces: List[Face] = []
        for z in range(rows):
            for x in range(columns):
                faces.append(Face(
                    self._cell(x, z),
                    self._cell(x + 1, z),
                    self._cell(x + 1, z + 1),
                    self._cell(x, z + 1),
                ))
        self._faces = faces
        return faces

    def sorted_faces(self) -> List[Face]:
        """Faces farthest first (descending average z)."""
        return sorted(self._faces, key=attrgetter("zpos"), reverse=True)

    def render(self, surface: "DrawingSurface") -> int:
        """Rebuild, transform, depth sort and draw the whole surface.

        Returns:
            Number of faces drawn; faces culled at the near plane are not counted.

        Raises:
            DegenerateGridError: if the configuration cannot produce a lattice.
        """
        self.rebuild()
        self.transform()
        self.build_faces()
        faces = self.sorted_faces()
        projection = self.projection
        origin_x, origin_y, _ = self._origin

        drawn = 0
        surface.save()
        try:
            surface.translate(origin_x, origin_y)
            for face in faces:
                if face.draw(surface, projection, self._color_func, self._style):
                    drawn += 1
        finally:
            surface.restore()

        logger.debug(
            f"Rendered {self._shape[0]}x{self._shape[1]} grid: "
            f"{drawn} faces drawn, {len(faces) - drawn} culled"
        )
        return drawn

    def draw_cells(self, surface: "DrawingSurface") -> int:
        return self.render(surface)

    def draw_points(self, surface: "DrawingSurface", radius: float) -> int:
        """Fill a circle at each projected lattice point with the surface's current source.

        Returns:
            Number of points drawn.
        """
        self.rebuild()
        self.transform()
        projection = self.projection
        origin_x, origin_y, _ = self._origin

        drawn = 0
        surface.save()
        try:
            surface.translate(origin_x, origin_y)
            for p in self._cells:
                if projection.corner_culled(p.z):
                    continue
                px, py = projection.project(p.x, p.y, p.z)
                surface.arc(px, py, radius, 0.0, TAU)
                surface.fill()
                drawn += 1
        finally:
            surface.restore()
        return drawn
