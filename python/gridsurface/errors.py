"""Exceptions raised by gridsurface."""

from __future__ import annotations


class GridSurfaceError(Exception):
    """Base class for gridsurface errors."""


class TiltRangeError(GridSurfaceError, ValueError):
    """Tilt outside [-pi/2, pi/2], where depth-sorted occlusion stops holding."""

    def __init__(self, tilt: float):
        self.tilt = tilt
        super().__init__(
            f"tilt must be between -90 and +90 degrees (-pi/2 to pi/2 radians), got {tilt!r} radians"
        )


class DegenerateGridError(GridSurfaceError, ValueError):
    """The current configuration cannot produce a lattice."""
