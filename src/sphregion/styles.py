"""Rendering metadata for region surfaces.

Each surface kind carries a colorscale, an opacity and Plotly lighting
settings.  The builder attaches a private copy of the style to every
surface it creates; the renderer passes the entries through unchanged.
"""

from copy import deepcopy

SPHERE = 'sphere'
CONE = 'cone'
WEDGE = 'wedge'

BLUE_SCALE = [[0, 'rgb(0, 0, 180)'], [0.5, 'rgb(0, 0, 220)'], [1, 'rgb(50, 50, 255)']]
RED_SCALE = [[0, 'rgb(150, 0, 0)'], [0.5, 'rgb(200, 0, 0)'], [1, 'rgb(255, 50, 50)']]
GREEN_SCALE = [[0, 'rgb(0, 130, 0)'], [0.5, 'rgb(0, 180, 0)'], [1, 'rgb(50, 255, 50)']]

_FLAT_LIGHTING = {
    'ambient': 0.4,
    'diffuse': 0.8,
    'specular': 0.3,
    'roughness': 0.8,
}

_STYLES = {
    SPHERE: {
        'colorscale': BLUE_SCALE,
        'opacity': 1.0,
        'showscale': False,
        'lighting': dict(_FLAT_LIGHTING, fresnel=0.1),
        'lightposition': {'x': 3000, 'y': 3000, 'z': 4000},
        'contours': {
            'z': {
                'show': True,
                'usecolormap': True,
                'highlightcolor': 'rgba(255,255,255,0.1)',
                'project': {'z': False},
            }
        },
    },
    CONE: {
        'colorscale': RED_SCALE,
        'opacity': 0.95,
        'showscale': False,
        'lighting': dict(_FLAT_LIGHTING),
    },
    WEDGE: {
        'colorscale': GREEN_SCALE,
        'opacity': 0.95,
        'showscale': False,
        'lighting': dict(_FLAT_LIGHTING),
    },
}


def surface_style(kind):
    """Return a fresh copy of the style dict for ``kind``.

    ``kind`` is one of ``SPHERE``, ``CONE`` or ``WEDGE``; anything else
    raises ``KeyError``.
    """
    return deepcopy(_STYLES[kind])
