# Shared fixtures for gridsurface tests.
import pytest

from gridsurface import Grid, RecordingSurface


@pytest.fixture
def recording():
    return RecordingSurface()


@pytest.fixture
def level_grid():
    """Grid viewed straight on: no yaw, no tilt, flat elevation."""
    grid = Grid()
    grid.set_rotation(0)
    grid.set_tilt(0)
    return grid

