# -*- coding: utf-8 -*-
"""Linear and bilinear interpolation, used to resample scalar fields such as elevation grids."""

import numpy as np

from ..core.errors import DomainError
from ..core.interval import Interval1D, Interval2D


def lerp(v1, v2, p):
    """Linear interpolation between v1 (p = 0) and v2 (p = 1).

    p is not clamped, values outside [0, 1] extrapolate.
    """
    return v1 + (v2 - v1) * p


def bilerp(v00, v10, v01, v11, x, y):
    """Bilinear interpolation over the unit square.

    Parameters:
    -----------
    v00, v10, v01, v11 : float or numpy.ndarray
        Values at the corners (0, 0), (1, 0), (0, 1) and (1, 1)
    x, y : float or numpy.ndarray
        Position inside the square, not clamped

    Returns:
    --------
    value : float or numpy.ndarray
        Interpolated value
    """
    return lerp(lerp(v00, v10, x), lerp(v01, v11, x), y)


def sample_bilinear(grid, x, y):
    """Sample a grid of values at a fractional position.

    The grid is indexed as grid[y, x], like a single raster band. The four samples surrounding (x, y) are
    interpolated with bilerp, so integer coordinates return the stored sample.

    Parameters:
    -----------
    grid : numpy.ndarray
        Two dimensional array of samples
    x : float
        Column coordinate
    y : float
        Row coordinate

    Returns:
    --------
    value : float
        Interpolated sample
    """
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError(f"Grid must be two dimensional, got shape {grid.shape}")
    if grid.size == 0:
        raise ValueError("Grid has no samples")

    height, width = grid.shape
    extent = Interval2D(Interval1D(0, width - 1), Interval1D(0, height - 1))
    if not extent.contains(x, y):
        raise DomainError(f"Point ({x}, {y}) lies outside of grid extent {extent}")

    x0 = min(int(np.floor(x)), extent.ix.hi - 1) if width > 1 else 0
    y0 = min(int(np.floor(y)), extent.iy.hi - 1) if height > 1 else 0
    x1 = min(x0 + 1, extent.ix.hi)
    y1 = min(y0 + 1, extent.iy.hi)

    return float(
        bilerp(
            grid[y0, x0],
            grid[y0, x1],
            grid[y1, x0],
            grid[y1, x1],
            x - x0,
            y - y0,
        )
    )
