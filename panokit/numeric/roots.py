# -*- coding: utf-8 -*-
"""Root finding for continuous functions of one real variable.

Roots are located in two independent steps. first_interval_containing_root scans a domain with a fixed step and
returns the first small interval over which the function changes sign. improve_root then narrows such an interval
down by bisection until it is smaller than a requested tolerance.
"""

import warnings

import numpy as np

from ..core.errors import DomainError, RootNotFoundError


def _brackets(f_lo, f_hi):
    if np.isnan(f_lo) or np.isnan(f_hi):
        return False
    return f_lo == 0 or f_hi == 0 or (f_lo < 0) != (f_hi < 0)


def _first_bracket(f, lower_bound, upper_bound, step):
    if not step > 0:
        raise DomainError(f"Scan step must be strictly positive, got {step}")
    if lower_bound > upper_bound:
        raise DomainError(f"Lower bound {lower_bound} is greater than upper bound {upper_bound}")

    # Samples are lower_bound + i * step rather than a running sum, so rounding errors do not pile up
    x, f_x = lower_bound, f(lower_bound)
    i = 1
    next_x = lower_bound + step
    while next_x <= upper_bound:
        f_next = f(next_x)
        if _brackets(f_x, f_next):
            return x, next_x
        x, f_x = next_x, f_next
        i += 1
        next_x = lower_bound + i * step

    raise RootNotFoundError(f"No sign change of the function found in [{lower_bound}, {upper_bound}] with step {step}")


def first_interval_containing_root(f, lower_bound, upper_bound, step):
    """Find the first interval of width step over which f changes sign.

    The samples lower_bound, lower_bound + step, lower_bound + 2 * step, ... not beyond upper_bound are visited from
    left to right. The first pair of consecutive samples where f takes values of opposite signs, or where one value
    is exactly zero, stops the scan.

    Parameters:
    -----------
    f : callable
        Continuous function of one float returning a float
    lower_bound : float
        Start of the scanned domain
    upper_bound : float
        End of the scanned domain
    step : float
        Distance between two samples, strictly positive

    Returns:
    --------
    x : float
        Left end of the first interval [x, x + step] containing a root

    Raises:
    -------
    DomainError
        If step is not strictly positive or the bounds are reversed
    RootNotFoundError
        If no sign change occurs before upper_bound
    """
    x, _ = _first_bracket(f, lower_bound, upper_bound, step)
    return x


def improve_root(f, lower_bound, upper_bound, epsilon):
    """Refine a root of f known to lie in [lower_bound, upper_bound] by bisection.

    Parameters:
    -----------
    f : callable
        Continuous function of one float returning a float
    lower_bound : float
        Left end of the bracket
    upper_bound : float
        Right end of the bracket
    epsilon : float
        Width below which the bracket is considered small enough, strictly positive

    Returns:
    --------
    root : float
        Point within epsilon of a root of f

    Raises:
    -------
    DomainError
        If f(lower_bound) and f(upper_bound) have the same sign, the bounds are reversed or epsilon is not positive
    """
    if lower_bound > upper_bound:
        raise DomainError(f"Lower bound {lower_bound} is greater than upper bound {upper_bound}")
    if not epsilon > 0:
        raise DomainError(f"Tolerance must be strictly positive, got {epsilon}")

    f_lo = f(lower_bound)
    f_hi = f(upper_bound)
    if not _brackets(f_lo, f_hi):
        raise DomainError(
            f"Function values {f_lo} and {f_hi} at {lower_bound} and {upper_bound} do not bracket a root"
        )
    if f_lo == 0:
        return lower_bound
    if f_hi == 0:
        return upper_bound

    resolution = float(np.spacing(max(abs(lower_bound), abs(upper_bound))))
    if epsilon < resolution:
        warnings.warn(
            f"Tolerance {epsilon} is finer than the float spacing {resolution} around the bracket, using the spacing",
            RuntimeWarning,
            stacklevel=2,
        )
        epsilon = resolution

    while upper_bound - lower_bound > epsilon:
        middle = (lower_bound + upper_bound) / 2
        f_middle = f(middle)
        if f_middle == 0:
            return middle
        if (f_middle < 0) == (f_lo < 0):
            lower_bound, f_lo = middle, f_middle
        else:
            upper_bound = middle

    return (lower_bound + upper_bound) / 2


def find_first_root(f, lower_bound, upper_bound, step, epsilon=1e-10):
    """Locate the leftmost root of f found by a scan of the domain, to within epsilon.

    This chains first_interval_containing_root and improve_root: the domain is scanned with the coarse step and the
    first bracket found is then bisected.

    Parameters:
    -----------
    f : callable
        Continuous function of one float returning a float
    lower_bound : float
        Start of the scanned domain
    upper_bound : float
        End of the scanned domain
    step : float
        Scan step, strictly positive
    epsilon : float
        Tolerance of the refined root

    Returns:
    --------
    root : float
        Approximation of the first root
    """
    x, next_x = _first_bracket(f, lower_bound, upper_bound, step)
    return improve_root(f, x, next_x, epsilon)
