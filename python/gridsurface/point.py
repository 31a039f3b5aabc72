# python/gridsurface/point.py
# Lattice point with a working (transformed) position and an original snapshot
# Exists so faces can be drawn at the rotated position but colored by the untransformed one
# RELEVANT FILES:python/gridsurface/face.py,python/gridsurface/grid.py,tests/test_point.py

from __future__ import annotations

import math
from typing import Tuple


class GridPoint:
    """A 3-D point on the surface lattice.

    ``x``, ``y`` and ``z`` are the working coordinates that the rotation
    operators mutate in place. ``orig_x``, ``orig_y`` and ``orig_z`` hold the
    untransformed values used for color sampling; they are fixed at creation
    except for ``orig_y``, which :meth:`elevate` sets once before any rotation.
    """

    __slots__ = ("x", "y", "z", "_orig_x", "_orig_y", "_orig_z")

    def __init__(self, x: float, y: float = 0.0, z: float = 0.0):
        self.x, self.y, self.z = float(x), float(y), float(z)
        self._orig_x, self._orig_y, self._orig_z = self.x, self.y, self.z

    def __repr__(self) -> str:
        return (
            f"GridPoint(x={self.x:.4f}, y={self.y:.4f}, z={self.z:.4f}, "
            f"orig=({self._orig_x:.4f}, {self._orig_y:.4f}, {self._orig_z:.4f}))"
        )

    @property
    def orig_x(self) -> float:
        return self._orig_x

    @property
    def orig_y(self) -> float:
        return self._orig_y

    @property
    def orig_z(self) -> float:
        return self._orig_z

    def elevate(self, y: float) -> None:
        """Set the height of this point and snapshot it as the original y."""
        self.y = float(y)
        self._orig_y = self.y

    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def original(self) -> Tuple[float, float, float]:
        return (self._orig_x, self._orig_y, self._orig_z)

    def rotate_x(self, angle: float) -> None:
        """Rotate the working position around the X axis (tilt)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        y = self.y * cos - self.z * sin
        z = self.z * cos + self.y * sin
        self.y = y
        self.z = z

    def rotate_y(self, angle: float) -> None:
        """Rotate the working position around the Y axis (yaw)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        x = self.x * cos - self.z * sin
        z = self.z * cos + self.x * sin
        self.x = x
        self.z = z

    def rotate_z(self, angle: float) -> None:
        """Rotate the working position around the Z axis."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        x = self.x * cos - self.y * sin
        y = self.y * cos + self.x * sin
        self.x = x
        self.y = y
