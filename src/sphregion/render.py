"""Plotly rendering of region surfaces.

The builder knows nothing about drawing; this module turns its surfaces
into a :class:`plotly.graph_objects.Figure` with a fixed scene layout.
"""

import logging
from pathlib import Path

import plotly.graph_objects as go

logger = logging.getLogger(__name__)

CAMERA_EYE = {'x': 1.5, 'y': 1.5, 'z': 1.2}
MARGIN = {'l': 0, 'r': 0, 'b': 0, 't': 40}

HTML_SUFFIXES = ('.html', '.htm')


def region_title(bounds):
    """Figure title listing the six bounds at two decimals, rho, phi, theta."""
    return ("Spherical Region: "
            f"ρ=[{bounds.rho_min:.2f}, {bounds.rho_max:.2f}], "
            f"φ=[{bounds.phi_min:.2f}, {bounds.phi_max:.2f}], "
            f"θ=[{bounds.theta_min:.2f}, {bounds.theta_max:.2f}]")


def surface_trace(surface):
    """Return a ``go.Surface`` trace for one region surface."""
    return go.Surface(x=surface.x, y=surface.y, z=surface.z,
                      name=surface.name, **surface.style)


def make_figure(surfaces, bounds):
    """Assemble a figure with one trace per surface, in order.

    Parameters
    ----------
    surfaces : sequence of Surface
        Output of :func:`sphregion.region.build_region`.
    bounds : RegionBounds
        The bounds the surfaces were built from; used for the title.

    Returns
    -------
    plotly.graph_objects.Figure
    """
    fig = go.Figure()
    for surface in surfaces:
        fig.add_trace(surface_trace(surface))
    fig.update_layout(
        title=region_title(bounds),
        scene={
            'xaxis': {'title': {'text': 'X'}},
            'yaxis': {'title': {'text': 'Y'}},
            'zaxis': {'title': {'text': 'Z'}},
            'aspectmode': 'data',
            'aspectratio': {'x': 1, 'y': 1, 'z': 1},
            'camera': {'eye': CAMERA_EYE},
        },
        margin=MARGIN,
    )
    logger.debug("figure with %d traces", len(fig.data))
    return fig


def write_figure(fig, path):
    """Write ``fig`` to ``path`` and return the path.

    ``.html``/``.htm`` files are standalone pages; any other suffix is
    written as a static image, which needs Plotly's image export backend.
    """
    path = Path(path)
    if path.suffix.lower() in HTML_SUFFIXES:
        fig.write_html(str(path))
    else:
        fig.write_image(str(path))
    logger.info("wrote %s", path)
    return path
