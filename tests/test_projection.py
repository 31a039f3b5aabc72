"""Tests for orthographic and perspective projection and near-plane culling."""

import pytest

from gridsurface import Projection


class TestOrthographic:

    @pytest.mark.parametrize("z", [-1.0, 0.0, 0.5, 100.0])
    def test_scale_independent_of_z(self, z):
        """A point at (x, 0, z) projects to (x * s, 0) whatever its depth."""
        proj = Projection(scale=200.0)
        assert proj.project(0.5, 0.0, z) == (100.0, 0.0)

    def test_y_scaled_uniformly(self):
        proj = Projection(scale=50.0)
        assert proj.project(-0.2, 0.4, 3.0) == pytest.approx((-10.0, 20.0))

    def test_never_culls(self):
        proj = Projection(scale=200.0, focal_length=100.0)
        assert not proj.is_culled(-1000.0)


class TestPerspective:

    def test_pinhole_divide(self):
        proj = Projection(scale=1.0, perspective=True, focal_length=100.0)
        assert proj.project(10.0, 20.0, 100.0) == pytest.approx((5.0, 10.0))

    def test_origin_z_pushes_surface_away(self):
        proj = Projection(scale=1.0, perspective=True, focal_length=100.0, origin_z=100.0)
        assert proj.project(10.0, 20.0, 0.0) == pytest.approx((5.0, 10.0))

    def test_point_at_depth_zero_is_unchanged(self):
        proj = Projection(scale=2.0, perspective=True, focal_length=300.0)
        assert proj.project(1.0, -1.0, 0.0) == pytest.approx((2.0, -2.0))

    def test_cull_threshold(self):
        """Faces closer than focal length minus margin are culled."""
        proj = Projection(scale=1.0, perspective=True, focal_length=100.0, z_margin=20.0)
        assert proj.is_culled(-90.0)
        assert not proj.is_culled(-70.0)

    def test_cull_threshold_uses_scale_and_origin(self):
        proj = Projection(scale=10.0, perspective=True, focal_length=100.0, origin_z=50.0, z_margin=20.0)
        # threshold in depth units: (-100 - 50 + 20) / 10 = -13
        assert proj.is_culled(-13.5)
        assert not proj.is_culled(-12.5)

    def test_corner_cull_includes_threshold(self):
        proj = Projection(scale=1.0, perspective=True, focal_length=100.0, z_margin=20.0)
        assert proj.corner_culled(-80.0)
        assert not proj.corner_culled(-79.0)

    def test_corner_on_camera_plane_culled_with_negative_margin(self):
        proj = Projection(scale=1.0, perspective=True, focal_length=100.0, z_margin=-50.0)
        assert proj.corner_culled(-100.0)
        assert not proj.corner_culled(-99.0)

    def test_orthographic_never_culls_corners(self):
        assert not Projection(scale=200.0).corner_culled(-1000.0)
