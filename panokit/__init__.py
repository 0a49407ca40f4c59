# -*- coding: utf-8 -*-
# panokit/__init__.py

"""
panokit: integer intervals and numeric primitives for terrain and panorama sampling
===================================================================================

panokit gathers the small building blocks that grid sampling and panorama rendering code relies on,
so they can be tested once and reused everywhere.

Key features:
- One and two dimensional closed integer intervals
- Floor modulo, haversine and angular distance
- Linear and bilinear interpolation of scalar fields
- Root bracketing and bisection
- Conversion of intervals to shapely polygons and rasterio windows
"""

__version__ = "0.1.0"

from .core.errors import DomainError, IntervalError, RootNotFoundError
from .core.interval import Interval1D, Interval2D

from .numeric.angles import PI2, angular_distance, floor_mod, haversine, square
from .numeric.interpolation import bilerp, lerp, sample_bilinear
from .numeric.roots import find_first_root, first_interval_containing_root, improve_root

from .utils.helpers import interval_from_shape, interval_from_window, interval_to_polygon, interval_to_window
