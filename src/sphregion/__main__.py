#!/usr/bin/env python3
"""
Command line front end for sphregion.

Usage:
    python -m sphregion [--rho-min EXPR] [--rho-max EXPR] [--phi-min EXPR] [--phi-max EXPR]
                        [--theta-min EXPR] [--theta-max EXPR]
                        [-n N] [--epsilon EPS] [-o FILE] [--show] [-v]

Bounds are free text and may use pi, e.g. ``pi/2`` or ``3pi/2``.  A bound
that starts with a minus sign must be attached with ``=``, as in
``--theta-min=-pi/2``.

Examples:
    # Quarter shell between radius 0.5 and 1, written as a web page
    python -m sphregion --rho-min 0.5 --theta-max pi/2 -o shell.html

    # Full sphere, opened in the browser
    python -m sphregion --phi-max pi --theta-max 2pi --show

    # Band around the equator, azimuth centred on the x axis
    python -m sphregion --phi-min pi/4 --phi-max 3pi/4 \
        --theta-min=-pi/2 --theta-max pi/2
"""

import argparse
import logging
import sys

from sphregion.config import CAP_EPSILON, DEFAULT_RESOLUTION
from sphregion.errors import InvalidArgument
from sphregion.inputs import parse_input
from sphregion.region import RegionBounds, build_region

logger = logging.getLogger(__name__)

# (option, default, help) in RegionBounds field order
BOUND_OPTIONS = (
    ("rho_min", "0", "inner radius"),
    ("rho_max", "1", "outer radius"),
    ("phi_min", "0", "smallest polar angle from +Z, radians"),
    ("phi_max", "pi/2", "largest polar angle from +Z, radians"),
    ("theta_min", "0", "smallest azimuth, radians"),
    ("theta_max", "3pi/2", "largest azimuth, radians"),
)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sphregion",
        description="Build and render the boundary surfaces of a spherical region.",
    )
    for name, default, text in BOUND_OPTIONS:
        parser.add_argument("--" + name.replace("_", "-"), dest=name, default=default,
                            metavar="EXPR", help=f"{text} (default: {default})")
    parser.add_argument("-n", "--resolution", type=int, default=DEFAULT_RESOLUTION,
                        help=f"samples per grid axis (default: {DEFAULT_RESOLUTION})")
    parser.add_argument("--epsilon", type=float, default=CAP_EPSILON,
                        help=f"cap/wedge tolerance in radians (default: {CAP_EPSILON})")
    parser.add_argument("-o", "--output", help="write the figure to FILE (.html or image)")
    parser.add_argument("--show", action="store_true", help="open the figure in a browser")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def read_bounds(args):
    """Parse the six bound strings; returns (RegionBounds, display strings)."""
    entries = [parse_input(getattr(args, name)) for name, _, _ in BOUND_OPTIONS]
    bounds = RegionBounds(*(entry.numeric for entry in entries))
    return bounds, [entry.display for entry in entries]


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    bounds, shown = read_bounds(args)
    logger.debug("bounds %s", bounds.as_tuple())
    print(f"rho   = [{shown[0]}, {shown[1]}]")
    print(f"phi   = [{shown[2]}, {shown[3]}]")
    print(f"theta = [{shown[4]}, {shown[5]}]")

    try:
        surfaces = build_region(bounds, args.resolution, epsilon=args.epsilon)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for surface in surfaces:
        rows, cols = surface.shape
        print(f"  {surface.name}: {rows}x{cols}")

    if args.output or args.show:
        # plotly is only needed once something is drawn
        from sphregion.render import make_figure, write_figure
        fig = make_figure(surfaces, bounds)
        if args.output:
            path = write_figure(fig, args.output)
            print(f"Wrote {path}")
        if args.show:
            fig.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
