# -*- coding: utf-8 -*-
"""Helpers to move between panokit intervals and shapely geometries or rasterio windows.

A cell (x, y) of an Interval2D is the pixel in column x and row y, which covers the unit square [x, x+1] x [y, y+1]
in pixel coordinates.
"""

import rasterio.windows
from rasterio.windows import Window
from shapely.geometry import box

from ..core.errors import IntervalError
from ..core.interval import Interval1D, Interval2D


def interval_to_window(interval):
    """Convert a two dimensional interval into a rasterio window.

    Parameters:
    -----------
    interval : Interval2D
        Block of cells, x being the column and y the row

    Returns:
    --------
    window : rasterio.windows.Window
        Window reading exactly those cells
    """
    return Window(
        col_off=interval.ix.lo,
        row_off=interval.iy.lo,
        width=interval.ix.size(),
        height=interval.iy.size(),
    )


def interval_from_window(window):
    """Convert a rasterio window into a two dimensional interval.

    Parameters:
    -----------
    window : rasterio.windows.Window
        Window with integer offsets and a strictly positive integer size

    Returns:
    --------
    interval : Interval2D
        Cells read by the window
    """
    values = (window.col_off, window.row_off, window.width, window.height)
    if not all(float(v).is_integer() for v in values):
        raise IntervalError(f"Window {window} is not aligned on whole pixels")
    col_off, row_off, width, height = (int(v) for v in values)
    if width <= 0 or height <= 0:
        raise IntervalError(f"Window {window} is empty")

    return Interval2D(
        Interval1D(col_off, col_off + width - 1),
        Interval1D(row_off, row_off + height - 1),
    )


def interval_from_shape(shape):
    """Interval covering every index of an array, given its shape (..., height, width)."""
    if len(shape) < 2:
        raise IntervalError(f"Shape {shape} has fewer than two dimensions")
    height, width = shape[-2], shape[-1]
    return Interval2D(Interval1D(0, width - 1), Interval1D(0, height - 1))


def interval_to_polygon(interval, transform=None):
    """Polygon covering all the cells of a two dimensional interval.

    Parameters:
    -----------
    interval : Interval2D
        Block of cells
    transform : affine.Affine, optional
        Affine transformation of the raster. If given, the polygon is in the raster's coordinate reference system,
        otherwise in pixel coordinates.

    Returns:
    --------
    polygon : shapely.geometry.Polygon
        Axis aligned rectangle
    """
    if transform is None:
        return box(interval.ix.lo, interval.iy.lo, interval.ix.hi + 1, interval.iy.hi + 1)

    left, bottom, right, top = rasterio.windows.bounds(interval_to_window(interval), transform)
    return box(left, bottom, right, top)
