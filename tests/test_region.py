"""Tests for spherical region surface building."""

from math import pi, tan, cos

import numpy as np
import pytest

from sphregion.config import CAP_EPSILON, DEFAULT_RESOLUTION
from sphregion.errors import InvalidArgument
from sphregion.region import (
    RegionBounds, Surface, build, build_region, spherical_to_cartesian,
    needs_cone, needs_wedges,
)


def names(surfaces):
    return [s.name for s in surfaces]


class TestRegionBounds:
    """Test the bounds record."""

    def test_fields_are_floats(self):
        b = RegionBounds(0, 1, 0, 2, 0, 3)
        assert b.as_tuple() == (0.0, 1.0, 0.0, 2.0, 0.0, 3.0)
        assert all(isinstance(v, float) for v in b.as_tuple())

    def test_intervals(self):
        b = RegionBounds(0.5, 1, 0.1, 0.2, 0.3, 0.4)
        assert b.rho == (0.5, 1.0)
        assert b.phi == (0.1, 0.2)
        assert b.theta == (0.3, 0.4)

    def test_immutable(self):
        b = RegionBounds(0, 1, 0, 1, 0, 1)
        with pytest.raises(AttributeError):
            b.rho_max = 2.0


class TestSphericalToCartesian:
    """Test the coordinate transform."""

    def test_axes(self):
        x, y, z = spherical_to_cartesian(2.0, pi / 2, 0.0)
        assert (float(x), float(y), float(z)) == pytest.approx((2.0, 0.0, 0.0), abs=1e-12)
        x, y, z = spherical_to_cartesian(2.0, pi / 2, pi / 2)
        assert (float(x), float(y), float(z)) == pytest.approx((0.0, 2.0, 0.0), abs=1e-12)
        x, y, z = spherical_to_cartesian(2.0, 0.0, 1.0)
        assert (float(x), float(y), float(z)) == pytest.approx((0.0, 0.0, 2.0), abs=1e-12)

    def test_scalar_broadcast_fills_grid(self):
        grid = np.ones((3, 4))
        x, y, z = spherical_to_cartesian(grid, 0.5, 0.25)
        assert x.shape == y.shape == z.shape == (3, 4)
        assert not np.shares_memory(x, z)


class TestSurface:
    """Test the surface record."""

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            Surface(np.zeros((2, 2)), np.zeros((2, 2)), np.zeros((2, 3)), 'bad')

    def test_points(self):
        s = Surface(np.zeros((2, 3)), np.ones((2, 3)), np.zeros((2, 3)), 'ok')
        assert s.shape == (2, 3)
        assert s.points[1] is s.y


class TestSurfaceSelection:
    """Test which surfaces are produced."""

    def test_full_polar_range_sphere_only(self):
        surfaces = build(0, 1, 0, 3.14, 0, 6.28, 10)
        assert names(surfaces) == ['Sphere']

    def test_wedges_without_cone(self):
        """Wedges depend on the azimuth range alone."""
        surfaces = build(0, 1, 0, 3.14, 0, 1.0, 10)
        assert names(surfaces) == ['Sphere', 'Wedge 1', 'Wedge 2']

    def test_all_four(self):
        surfaces = build(0, 1, 0, 1.0, 0, 3.0, 10)
        assert names(surfaces) == ['Sphere', 'Cone', 'Wedge 1', 'Wedge 2']

    def test_cone_without_wedges(self):
        surfaces = build(0, 1, 0, 1.0, 0, 2 * pi, 10)
        assert names(surfaces) == ['Sphere', 'Cone']

    def test_cone_threshold(self):
        """The cone is dropped once phi_max comes within epsilon of pi."""
        assert 'Cone' in names(build(0, 1, 0, pi - 0.011, 0, 2 * pi, 5))
        assert 'Cone' not in names(build(0, 1, 0, pi - 0.009, 0, 2 * pi, 5))

    def test_wedge_threshold(self):
        assert 'Wedge 1' in names(build(0, 1, 0, pi, 0, 2 * pi - 0.011, 5))
        assert 'Wedge 1' not in names(build(0, 1, 0, pi, 0, 2 * pi - 0.009, 5))

    def test_epsilon_override(self):
        bounds = RegionBounds(0, 1, 0, pi - 0.05, 0, 2 * pi)
        assert 'Cone' in names(build_region(bounds, 5))
        assert 'Cone' not in names(build_region(bounds, 5, epsilon=0.1))

    def test_predicates(self):
        assert needs_cone(pi - 2 * CAP_EPSILON)
        assert not needs_cone(pi)
        assert needs_wedges(pi)
        assert not needs_wedges(2 * pi)


class TestSurfaceGeometry:
    """Test the generated points."""

    bounds = RegionBounds(0.5, 2.0, 0.2, 1.2, 0.5, 2.5)

    def surfaces(self, n=12):
        return {s.name: s for s in build_region(self.bounds, n)}

    def test_default_resolution(self):
        for s in build_region(self.bounds):
            assert s.shape == (DEFAULT_RESOLUTION, DEFAULT_RESOLUTION)

    def test_shapes(self):
        for s in self.surfaces(7).values():
            assert s.shape == (7, 7)

    def test_sphere_on_outer_radius(self):
        x, y, z = self.surfaces()['Sphere'].points
        np.testing.assert_allclose(np.sqrt(x**2 + y**2 + z**2), 2.0)

    def test_sphere_grid_convention(self):
        """Columns sweep phi, rows sweep theta."""
        s = self.surfaces(5)['Sphere']
        np.testing.assert_allclose(s.z[0], 2.0 * np.cos(np.linspace(0.2, 1.2, 5)))
        np.testing.assert_allclose(s.z[:, 0], 2.0 * cos(0.2))

    def test_cone_at_phi_max(self):
        x, y, z = self.surfaces()['Cone'].points
        r = np.sqrt(x**2 + y**2 + z**2)
        np.testing.assert_allclose(z, r * cos(1.2))

    def test_cone_rows_sweep_rho(self):
        x, y, z = self.surfaces(6)['Cone'].points
        r = np.sqrt(x**2 + y**2 + z**2)
        np.testing.assert_allclose(r[:, 0], np.linspace(0.5, 2.0, 6))

    def test_wedge_1_in_theta_min_half_plane(self):
        x, y, _ = self.surfaces()['Wedge 1'].points
        mask = np.abs(x) > 1e-12
        np.testing.assert_allclose(y[mask] / x[mask], tan(0.5))

    def test_wedge_2_in_theta_max_half_plane(self):
        x, y, _ = self.surfaces()['Wedge 2'].points
        mask = np.abs(x) > 1e-12
        np.testing.assert_allclose(y[mask] / x[mask], tan(2.5))

    def test_styles(self):
        s = self.surfaces()
        assert s['Sphere'].style['opacity'] == 1.0
        assert s['Cone'].style['opacity'] == 0.95
        assert s['Wedge 1'].style['colorscale'] == s['Wedge 2'].style['colorscale']
        assert s['Sphere'].style['colorscale'][0][1] == 'rgb(0, 0, 180)'
        assert s['Cone'].style['colorscale'][0][1] == 'rgb(150, 0, 0)'

    def test_surfaces_own_their_data(self):
        """No two surfaces share arrays or style dicts."""
        surfaces = build_region(self.bounds, 8)
        arrays = [a for s in surfaces for a in s.points]
        for i, a in enumerate(arrays):
            for b in arrays[i + 1:]:
                assert not np.shares_memory(a, b)
        assert surfaces[2].style is not surfaces[3].style
        surfaces[2].style['opacity'] = 0.1
        assert surfaces[3].style['opacity'] == 0.95

    def test_deterministic(self):
        first = build_region(self.bounds, 9)
        second = build_region(self.bounds, 9)
        assert names(first) == names(second)
        for a, b in zip(first, second):
            for ga, gb in zip(a.points, b.points):
                np.testing.assert_array_equal(ga, gb)


class TestDegenerateInput:
    """Bounds are never rejected; only the resolution is."""

    def test_reversed_radius(self):
        surfaces = build(2, 1, 0, 1, 0, 1, 4)
        cone = surfaces[1]
        r = np.sqrt(cone.x**2 + cone.y**2 + cone.z**2)
        np.testing.assert_allclose(r[:, 0], [2.0, 5 / 3, 4 / 3, 1.0])

    def test_out_of_range_angles(self):
        surfaces = build(0, 1, -1, 4, -7, 9, 4)
        assert names(surfaces) == ['Sphere']

    def test_single_sample(self):
        surfaces = build(0, 1, 0, 1, 0, 1, 1)
        assert len(surfaces) == 4
        for s in surfaces:
            assert s.shape == (1, 1)

    @pytest.mark.parametrize("n", [0, -5, 2.0])
    def test_bad_resolution(self, n):
        with pytest.raises(InvalidArgument):
            build(0, 1, 0, 1, 0, 1, n)


class TestStyles:
    """Test style lookup."""

    def test_unknown_kind(self):
        from sphregion.styles import surface_style
        with pytest.raises(KeyError):
            surface_style('torus')
