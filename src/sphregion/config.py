"""Policy constants for sphregion.

sphregion.config provides the "constants" used by the surface builder:

``CAP_EPSILON``
    Tolerance, in radians, below the full polar range (pi) or full
    revolution (2*pi) at which the cone cap or the wedge faces are still
    generated.  A region with ``phi_max >= pi - CAP_EPSILON`` already
    reaches the pole and gets no cone; one with
    ``theta_max >= 2*pi - CAP_EPSILON`` gets no wedges.  The value is a
    fixed heuristic and does not scale with the resolution or the radius.

``DEFAULT_RESOLUTION``
    Number of samples along each grid axis when the caller does not ask
    for a specific resolution.

``PI2``
    2*pi.

All of these may be overridden per call; see
:func:`sphregion.region.build_region`.
"""

from math import pi

CAP_EPSILON = 0.01
DEFAULT_RESOLUTION = 100
PI2 = 2.0 * pi
