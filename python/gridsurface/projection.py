# python/gridsurface/projection.py
# Orthographic and pinhole-perspective projection of lattice points to output coordinates
# Exists to keep the per-render projection parameters in one immutable value shared by all faces
# RELEVANT FILES:python/gridsurface/face.py,python/gridsurface/grid.py,tests/test_projection.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_FOCAL_LENGTH = 500.0
# Empirical safety margin (output units) in front of the near plane.
DEFAULT_Z_MARGIN = 20.0


@dataclass(frozen=True)
class Projection:
    """Projection parameters resolved from a grid's configuration for one render."""

    scale: float
    perspective: bool = False
    focal_length: float = DEFAULT_FOCAL_LENGTH
    origin_z: float = 0.0
    z_margin: float = DEFAULT_Z_MARGIN

    def project(self, x: float, y: float, z: float) -> Tuple[float, float]:
        """Project a working-space point to 2-D output coordinates."""
        px = x * self.scale
        py = y * self.scale
        if self.perspective:
            factor = self.focal_length / (self.focal_length + z * self.scale + self.origin_z)
            px *= factor
            py *= factor
        return px, py

    def is_culled(self, zpos: float) -> bool:
        """Whether a face at average depth ``zpos`` is too close to the camera to draw.

        Orthographic projections have no near plane and never cull.
        """
        if not self.perspective:
            return False
        return zpos * self.scale < -self.focal_length - self.origin_z + self.z_margin

    def corner_culled(self, z: float) -> bool:
        """Whether a single point at depth ``z`` lies inside the near margin.

        A point on or behind the camera plane is always culled, even with a
        negative margin, so :meth:`project` never divides by zero.
        """
        if not self.perspective:
            return False
        return z * self.scale <= -self.focal_length - self.origin_z + max(self.z_margin, 0.0)
