"""Boundary surfaces of a spherical-coordinate region.

A region is the set of points whose spherical coordinates fall inside

    rho_min <= rho <= rho_max
    phi_min <= phi <= phi_max      (polar angle from +Z)
    theta_min <= theta <= theta_max  (azimuth in the XY plane)

:func:`build_region` returns the surfaces that close such a region, as
structured grids ready for a surface plot:

- ``Sphere``: the outer shell at ``rho_max``, always present.
- ``Cone``: the conical cap at ``phi_max``, present only while the polar
  range stops short of the south pole.
- ``Wedge 1`` and ``Wedge 2``: the flat radial faces at ``theta_min`` and
  ``theta_max``, present only while the azimuth range is short of a full
  revolution.

No bound is validated.  Reversed ranges give reversed grids and angles
outside ``[0, pi]`` / ``[0, 2*pi]`` give overlapping but well defined
geometry.  Only the resolution can be rejected.
"""

from dataclasses import dataclass, field
from math import pi
from typing import List, Tuple

import numpy as np

from sphregion.config import CAP_EPSILON, DEFAULT_RESOLUTION, PI2
from sphregion.sampling import linspace, meshgrid, check_count
from sphregion.styles import surface_style, SPHERE, CONE, WEDGE


@dataclass(frozen=True)
class RegionBounds:
    """The six bounds of a spherical region, in radius and radians."""
    rho_min: float
    rho_max: float
    phi_min: float
    phi_max: float
    theta_min: float
    theta_max: float

    def __post_init__(self):
        for name in ('rho_min', 'rho_max', 'phi_min', 'phi_max',
                     'theta_min', 'theta_max'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def rho(self) -> Tuple[float, float]:
        return (self.rho_min, self.rho_max)

    @property
    def phi(self) -> Tuple[float, float]:
        return (self.phi_min, self.phi_max)

    @property
    def theta(self) -> Tuple[float, float]:
        return (self.theta_min, self.theta_max)

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.rho_min, self.rho_max, self.phi_min, self.phi_max,
                self.theta_min, self.theta_max)


@dataclass(eq=False)
class Surface:
    """A named grid surface with its rendering style.

    ``x``, ``y`` and ``z`` are 2-D arrays of identical shape.  ``style``
    is opaque to the builder and handed to the renderer as-is.
    """
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    name: str
    style: dict = field(default_factory=dict)

    def __post_init__(self):
        if not (self.x.shape == self.y.shape == self.z.shape):
            raise ValueError(
                f"surface {self.name!r} grids differ in shape: "
                f"{self.x.shape}, {self.y.shape}, {self.z.shape}")

    @property
    def points(self):
        return (self.x, self.y, self.z)

    @property
    def shape(self):
        return self.x.shape

    def __repr__(self):
        return f"Surface(name={self.name!r}, shape={self.shape})"


def spherical_to_cartesian(rho, phi, theta):
    """Convert spherical coordinates to Cartesian.

    Arguments may be scalars or broadcast-compatible arrays.  Returns
    ``(x, y, z)`` as new float arrays with

        x = rho * sin(phi) * cos(theta)
        y = rho * sin(phi) * sin(theta)
        z = rho * cos(phi)
    """
    rho = np.asarray(rho, dtype=float)
    phi = np.asarray(phi, dtype=float)
    theta = np.asarray(theta, dtype=float)
    ring = rho * np.sin(phi)
    x = ring * np.cos(theta)
    y = ring * np.sin(theta)
    z = rho * np.cos(phi)
    # a scalar rho/phi pair still has to fill the whole grid
    shape = np.broadcast(rho, phi, theta).shape
    return (np.broadcast_to(x, shape).copy(),
            np.broadcast_to(y, shape).copy(),
            np.broadcast_to(z, shape).copy())


def needs_cone(phi_max, epsilon=CAP_EPSILON):
    """True if a region ending at ``phi_max`` must be closed by a cone."""
    return phi_max < pi - epsilon


def needs_wedges(theta_max, epsilon=CAP_EPSILON):
    """True if a region ending at ``theta_max`` must be closed by wedges."""
    return theta_max < PI2 - epsilon


def build_region(bounds, n=DEFAULT_RESOLUTION, *, epsilon=CAP_EPSILON) -> List[Surface]:
    """Build the boundary surfaces of ``bounds``.

    Parameters
    ----------
    bounds : RegionBounds
        The region to close.
    n : int, optional
        Samples per grid axis (default ``DEFAULT_RESOLUTION``).  Every
        surface is an ``n`` by ``n`` grid.
    epsilon : float, optional
        Cap and wedge tolerance in radians (default ``CAP_EPSILON``).

    Returns
    -------
    list of Surface
        ``[Sphere]``, followed by ``Cone`` if ``phi_max < pi - epsilon``,
        followed by ``Wedge 1`` and ``Wedge 2`` if
        ``theta_max < 2*pi - epsilon``.

    Raises
    ------
    InvalidArgument
        If ``n`` is not an integer of at least 1.
    """
    n = check_count(n)

    phi_vals = linspace(bounds.phi_min, bounds.phi_max, n)
    theta_vals = linspace(bounds.theta_min, bounds.theta_max, n)

    PHI, THETA = meshgrid(phi_vals, theta_vals)
    x, y, z = spherical_to_cartesian(bounds.rho_max, PHI, THETA)
    surfaces = [Surface(x, y, z, 'Sphere', surface_style(SPHERE))]

    if needs_cone(bounds.phi_max, epsilon):
        rho_vals = linspace(bounds.rho_min, bounds.rho_max, n)
        THETA_cone, RHO_cone = meshgrid(theta_vals, rho_vals)
        x, y, z = spherical_to_cartesian(RHO_cone, bounds.phi_max, THETA_cone)
        surfaces.append(Surface(x, y, z, 'Cone', surface_style(CONE)))

    if needs_wedges(bounds.theta_max, epsilon):
        rho_vals = linspace(bounds.rho_min, bounds.rho_max, n)
        PHI_wedge, RHO_wedge = meshgrid(phi_vals, rho_vals)
        for name, theta in (('Wedge 1', bounds.theta_min),
                            ('Wedge 2', bounds.theta_max)):
            x, y, z = spherical_to_cartesian(RHO_wedge, PHI_wedge, theta)
            surfaces.append(Surface(x, y, z, name, surface_style(WEDGE)))

    return surfaces


def build(rho_min, rho_max, phi_min, phi_max, theta_min, theta_max,
          n=DEFAULT_RESOLUTION, *, epsilon=CAP_EPSILON) -> List[Surface]:
    """Build region surfaces from six bare bounds.

    Shorthand for ``build_region(RegionBounds(...), n, epsilon=epsilon)``.
    """
    bounds = RegionBounds(rho_min, rho_max, phi_min, phi_max,
                          theta_min, theta_max)
    return build_region(bounds, n, epsilon=epsilon)
