# -*- coding: utf-8 -*-
"""Defines closed integer intervals in one and two dimensions.

An Interval1D is the set of integers between two bounds, both included. An Interval2D is the cross product of two
of them and describes an axis aligned block of grid cells, such as a tile of an elevation model or a sampling window.
Both are immutable value types: equality and hashing are structural, and every operation returns a new interval.

Example : [3..4]x[-2..0] = {(3,-2),(3,-1),(3,0),(4,-2),(4,-1),(4,0)}
"""

import numbers

from .errors import IntervalError


def _check_bound(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Interval bound '{name}' must be an integer, got {value!r}")
    return int(value)


class Interval1D:
    """A closed interval of integers [lo..hi]."""

    __slots__ = ("_lo", "_hi")

    def __init__(self, lo, hi):
        """Initialize an interval.

        Parameters:
        -----------
        lo : int
            Smallest integer of the interval
        hi : int
            Largest integer of the interval, must not be smaller than lo
        """
        lo = _check_bound("lo", lo)
        hi = _check_bound("hi", hi)
        if lo > hi:
            raise IntervalError(f"Lower bound {lo} is greater than upper bound {hi}")

        self._lo = lo
        self._hi = hi

    @property
    def lo(self):
        """Smallest integer contained in the interval."""
        return self._lo

    @property
    def hi(self):
        """Largest integer contained in the interval."""
        return self._hi

    def contains(self, v):
        """Check whether v lies between the bounds, both included."""
        return self._lo <= v <= self._hi

    def size(self):
        """Number of integers in the interval."""
        return self._hi - self._lo + 1

    def size_of_intersection_with(self, other):
        """Size of the intersection of this interval and other.

        Parameters:
        -----------
        other : Interval1D
            Interval to intersect with

        Returns:
        --------
        size : int
            Number of integers shared by both intervals, 0 if they are disjoint
        """
        lo = max(self._lo, other.lo)
        hi = min(self._hi, other.hi)
        return max(hi - lo + 1, 0)

    def bounding_union(self, other):
        """Smallest interval containing both this interval and other.

        The two intervals need not touch; any gap between them is covered as well.
        """
        return Interval1D(min(self._lo, other.lo), max(self._hi, other.hi))

    def is_unionable_with(self, other):
        """Check whether the two intervals overlap or are adjacent.

        In that case their bounding union contains no integer outside of them.
        """
        return self.size() + other.size() - self.size_of_intersection_with(other) == self.bounding_union(other).size()

    def union(self, other):
        """Union of two unionable intervals.

        Raises:
        -------
        IntervalError
            If the intervals are separated by a gap
        """
        if not self.is_unionable_with(other):
            raise IntervalError(f"Intervals {self} and {other} are not unionable")
        return self.bounding_union(other)

    def __contains__(self, v):
        return self.contains(v)

    def __len__(self):
        return self.size()

    def __eq__(self, other):
        if not isinstance(other, Interval1D):
            return NotImplemented
        return self._lo == other._lo and self._hi == other._hi

    def __hash__(self):
        return hash((self._lo, self._hi))

    def __repr__(self):
        return f"Interval1D({self._lo}, {self._hi})"

    def __str__(self):
        return f"[{self._lo}..{self._hi}]"


class Interval2D:
    """Cross product of two Interval1D, i.e. an axis aligned rectangle of integer cells.

    Sizes, intersections and bounding unions are computed axis by axis and then combined. As a consequence the
    bounding union of two rectangles is the smallest rectangle covering both, which may contain cells belonging to
    neither of them. is_unionable_with tells whether that happens.
    """

    __slots__ = ("_ix", "_iy")

    def __init__(self, ix, iy):
        """Initialize a two dimensional interval.

        Parameters:
        -----------
        ix : Interval1D
            Interval along the x axis (columns)
        iy : Interval1D
            Interval along the y axis (rows)
        """
        if ix is None or iy is None:
            raise IntervalError("Both axis intervals of an Interval2D are required")
        for name, axis in (("ix", ix), ("iy", iy)):
            if not isinstance(axis, Interval1D):
                raise TypeError(f"'{name}' must be an Interval1D, got {type(axis).__name__}")

        self._ix = ix
        self._iy = iy

    @property
    def ix(self):
        """Interval along the x axis."""
        return self._ix

    @property
    def iy(self):
        """Interval along the y axis."""
        return self._iy

    def contains(self, x, y):
        """Check whether the cell (x, y) belongs to the rectangle."""
        return self._ix.contains(x) and self._iy.contains(y)

    def size(self):
        """Number of cells in the rectangle."""
        return self._ix.size() * self._iy.size()

    def size_of_intersection_with(self, other):
        """Number of cells shared with other, 0 as soon as one axis is disjoint."""
        return self._ix.size_of_intersection_with(other.ix) * self._iy.size_of_intersection_with(other.iy)

    def bounding_union(self, other):
        """Smallest rectangle covering both rectangles.

        This is not the union of the two cell sets: for [0..1]x[0..1] and [2..3]x[5..6] it is [0..3]x[0..6].
        """
        return Interval2D(self._ix.bounding_union(other.ix), self._iy.bounding_union(other.iy))

    def is_unionable_with(self, other):
        """Check whether the bounding union covers exactly the cells of both rectangles.

        This is stricter than overlapping: two rectangles overlapping on a corner are not unionable.
        """
        return self.size() + other.size() - self.size_of_intersection_with(other) == self.bounding_union(other).size()

    def union(self, other):
        """Union of two unionable rectangles.

        Use bounding_union to get the covering rectangle of rectangles that are not unionable.

        Parameters:
        -----------
        other : Interval2D
            Rectangle to unite with

        Returns:
        --------
        union : Interval2D
            Rectangle containing exactly the cells of both rectangles

        Raises:
        -------
        IntervalError
            If the bounding union would contain cells outside of both rectangles
        """
        if not self.is_unionable_with(other):
            raise IntervalError(f"Intervals {self} and {other} are not unionable")
        return self.bounding_union(other)

    def __contains__(self, point):
        x, y = point
        return self.contains(x, y)

    def __len__(self):
        return self.size()

    def __eq__(self, other):
        if not isinstance(other, Interval2D):
            return NotImplemented
        return self._ix == other._ix and self._iy == other._iy

    def __hash__(self):
        return hash((self._ix, self._iy))

    def __repr__(self):
        return f"Interval2D({self._ix!r}, {self._iy!r})"

    def __str__(self):
        return f"{self._ix}x{self._iy}"
