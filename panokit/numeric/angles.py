# -*- coding: utf-8 -*-
"""Modular arithmetic on reals and angle helpers.

Every function accepts plain floats as well as numpy arrays, so a whole raster of angles can be processed at once.
Angles are in radians.
"""

import numpy as np

from ..core.errors import DomainError

PI2 = 2 * np.pi


def square(x):
    """Return x * x."""
    return x * x


def floor_mod(n, d):
    """Remainder of n divided by d, using the floored quotient.

    Unlike math.fmod, the result has the sign of the divisor, so that n == floor(n / d) * d + floor_mod(n, d).

    Parameters:
    -----------
    n : float or numpy.ndarray
        Dividend
    d : float or numpy.ndarray
        Divisor, must be non zero

    Returns:
    --------
    remainder : float or numpy.ndarray
        Value r in [0, d) for positive d, in (d, 0] for negative d
    """
    if np.any(np.asarray(d) == 0):
        raise DomainError("Divisor of floor_mod must be non zero")
    return n - d * np.floor(np.divide(n, d))


def haversine(a):
    """Haversine of the angle a, i.e. (1 - cos(a)) / 2."""
    return (1 - np.cos(a)) / 2


def angular_distance(a1, a2):
    """Signed shortest angle to turn from a1 to a2.

    The result lies in [-pi, pi). Two angles exactly pi apart give -pi whatever their order, so
    angular_distance(a1, a2) == -angular_distance(a2, a1) holds for every other pair only.

    Parameters:
    -----------
    a1 : float or numpy.ndarray
        Starting angle, in radians
    a2 : float or numpy.ndarray
        Target angle, in radians

    Returns:
    --------
    distance : float or numpy.ndarray
        Angle in [-pi, pi), positive when a2 is reached by turning in the positive direction
    """
    distance = floor_mod(np.subtract(a2, a1) + np.pi, PI2) - np.pi

    # floor_mod may round to exactly 2*pi or slightly below 0
    if np.ndim(distance) == 0:
        if distance >= np.pi:
            return distance - PI2
        if distance < -np.pi:
            return distance + PI2
        return distance
    distance = np.where(distance >= np.pi, distance - PI2, distance)
    return np.where(distance < -np.pi, distance + PI2, distance)
