"""One-dimensional sampling and paired coordinate grids.

These two functions are the only way the surface builder produces sample
positions.  Grids follow the "xy" convention: the first sequence varies
along the columns, the second along the rows, so a pair built from
sequences of lengths C and R has shape ``(R, C)``.
"""

from numbers import Integral

import numpy as np

from sphregion.errors import InvalidArgument


def check_count(n):
    """Validate a sample count and return it as a plain int."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgument(f"sample count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"sample count must be at least 1, got {n}")
    return int(n)


def linspace(start, end, n):
    """Return ``n`` evenly spaced samples from ``start`` to ``end``.

    Parameters
    ----------
    start, end : float
        Interval end points.  Any order is allowed; ``end < start`` gives
        a decreasing sequence and ``end == start`` a constant one.
    n : int
        Number of samples, at least 1.

    Returns
    -------
    numpy.ndarray
        1-D float array.  For ``n >= 2`` the first sample is ``start`` and
        the last is ``end``.  For ``n == 1`` the single sample is
        ``start``.

    Raises
    ------
    InvalidArgument
        If ``n`` is not an integer or is less than 1.
    """
    n = check_count(n)
    start = float(start)
    end = float(end)
    if n == 1:
        return np.array([start], dtype=float)
    samples = start + np.arange(n, dtype=float) * ((end - start) / (n - 1))
    # pin the end point so it is exact rather than accumulated
    samples[-1] = end
    return samples


def meshgrid(xs, ys):
    """Broadcast two sample sequences into a pair of 2-D grids.

    ``grid_x[r, c] == xs[c]`` and ``grid_y[r, c] == ys[r]``; both grids
    have shape ``(len(ys), len(xs))``.  The returned arrays are fresh
    copies that share no memory with the inputs or with each other.
    """
    xs = np.asarray(xs, dtype=float).ravel()
    ys = np.asarray(ys, dtype=float).ravel()
    grid_x = np.tile(xs, (ys.size, 1))
    grid_y = np.repeat(ys[:, np.newaxis], xs.size, axis=1)
    return grid_x, grid_y
