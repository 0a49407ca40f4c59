# -*- coding: utf-8 -*-
"""Test suite for the one and two dimensional integer intervals.

It checks construction, membership, sizes, intersections and unions, including the cases where the bounding union
of two rectangles covers more cells than the rectangles themselves.
"""

import numpy as np
import pytest

from panokit import Interval1D, Interval2D, IntervalError

RANDOM_ITERATIONS = 500


@pytest.fixture
def rng():
    """Seeded random generator, so failures can be reproduced."""
    return np.random.default_rng(2017)


def random_interval(rng, lo=-100, hi=100):
    a, b = sorted(int(v) for v in rng.integers(lo, hi, size=2))
    return Interval1D(a, b)


def i2d(x_lo, x_hi, y_lo, y_hi):
    return Interval2D(Interval1D(x_lo, x_hi), Interval1D(y_lo, y_hi))


def test_interval1d_rejects_reversed_bounds():
    """An interval with lo > hi cannot be built."""
    with pytest.raises(IntervalError):
        Interval1D(1, 0)


def test_interval1d_rejects_non_integer_bounds():
    """Bounds must be integers."""
    with pytest.raises(TypeError):
        Interval1D(0.5, 2)
    with pytest.raises(TypeError):
        Interval1D(False, True)


def test_interval1d_accepts_numpy_integers():
    """numpy integer scalars are valid bounds and are stored as plain ints."""
    interval = Interval1D(np.int64(-3), np.int32(4))
    assert interval == Interval1D(-3, 4)
    assert type(interval.lo) is int


def test_interval1d_single_point():
    """An interval with equal bounds contains exactly one integer."""
    interval = Interval1D(7, 7)
    assert interval.size() == 1
    assert interval.contains(7)
    assert not interval.contains(6) and not interval.contains(8)


def test_interval1d_contains_bounds():
    """Both bounds are included."""
    interval = Interval1D(-2, 5)
    assert interval.contains(-2) and interval.contains(5)
    assert not interval.contains(-3) and not interval.contains(6)
    assert 0 in interval
    assert 10 not in interval


def test_interval1d_size():
    """The size counts both bounds."""
    assert Interval1D(-2, 5).size() == 8
    assert len(Interval1D(0, 9)) == 10


def test_interval1d_size_of_intersection():
    """Overlapping, nested, touching and disjoint intervals."""
    assert Interval1D(0, 5).size_of_intersection_with(Interval1D(3, 10)) == 3
    assert Interval1D(0, 10).size_of_intersection_with(Interval1D(2, 4)) == 3
    assert Interval1D(0, 5).size_of_intersection_with(Interval1D(5, 8)) == 1
    assert Interval1D(0, 5).size_of_intersection_with(Interval1D(6, 8)) == 0
    assert Interval1D(0, 5).size_of_intersection_with(Interval1D(20, 30)) == 0


def test_interval1d_intersection_is_never_negative(rng):
    """The size of the intersection is 0 for disjoint intervals and never negative."""
    for _ in range(RANDOM_ITERATIONS):
        a = random_interval(rng)
        b = random_interval(rng)
        size = a.size_of_intersection_with(b)
        assert size >= 0
        if a.hi < b.lo or b.hi < a.lo:
            assert size == 0, f"{a} and {b} are disjoint"
        assert size == b.size_of_intersection_with(a)


def test_interval1d_bounding_union():
    """The bounding union covers the gap between distant intervals."""
    assert Interval1D(0, 2).bounding_union(Interval1D(8, 9)) == Interval1D(0, 9)
    assert Interval1D(-5, 20).bounding_union(Interval1D(0, 1)) == Interval1D(-5, 20)


def test_interval1d_bounding_union_is_larger_than_both(rng):
    """The bounding union is at least as large as each interval."""
    for _ in range(RANDOM_ITERATIONS):
        a = random_interval(rng)
        b = random_interval(rng)
        union = a.bounding_union(b)
        assert union.size() >= a.size()
        assert union.size() >= b.size()


def test_interval1d_unionable():
    """Adjacent and overlapping intervals are unionable, separated ones are not."""
    assert Interval1D(0, 1).is_unionable_with(Interval1D(2, 3))
    assert Interval1D(0, 5).is_unionable_with(Interval1D(3, 8))
    assert not Interval1D(0, 1).is_unionable_with(Interval1D(3, 4))


def test_interval1d_union():
    """union returns the bounding union of unionable intervals and refuses the others."""
    assert Interval1D(0, 1).union(Interval1D(2, 3)) == Interval1D(0, 3)
    with pytest.raises(IntervalError):
        Interval1D(0, 1).union(Interval1D(3, 4))


def test_interval1d_value_semantics():
    """Equality and hashing only depend on the bounds."""
    assert Interval1D(1, 2) == Interval1D(1, 2)
    assert Interval1D(1, 2) != Interval1D(1, 3)
    assert hash(Interval1D(1, 2)) == hash(Interval1D(1, 2))
    assert len({Interval1D(1, 2), Interval1D(1, 2), Interval1D(0, 2)}) == 2
    assert Interval1D(1, 2) != (1, 2)


def test_interval1d_text():
    """The string form lists both bounds."""
    assert str(Interval1D(-1, 4)) == "[-1..4]"
    assert repr(Interval1D(-1, 4)) == "Interval1D(-1, 4)"


def test_interval1d_is_immutable():
    """Bounds cannot be reassigned."""
    interval = Interval1D(0, 1)
    with pytest.raises(AttributeError):
        interval.lo = 5


def test_interval2d_requires_both_axes():
    """A missing axis interval is a construction error."""
    with pytest.raises(IntervalError):
        Interval2D(None, Interval1D(0, 1))
    with pytest.raises(IntervalError):
        Interval2D(Interval1D(0, 1), None)
    with pytest.raises(TypeError):
        Interval2D((0, 1), Interval1D(0, 1))


def test_interval2d_contains():
    """A point belongs to the rectangle iff each coordinate belongs to its axis."""
    interval = i2d(3, 4, -2, 0)
    assert interval.contains(3, -2)
    assert interval.contains(4, 0)
    assert not interval.contains(5, 0)
    assert not interval.contains(3, 1)
    assert (4, -1) in interval


def test_interval2d_size():
    """The size is the product of the axis sizes."""
    interval = i2d(3, 4, -2, 0)
    assert interval.size() == 6
    assert len(interval) == interval.ix.size() * interval.iy.size()


def test_interval2d_size_of_intersection():
    """The intersection is computed per axis, and vanishes if one axis is disjoint."""
    a = i2d(0, 4, 0, 4)
    assert a.size_of_intersection_with(i2d(2, 6, 3, 8)) == 3 * 2
    assert a.size_of_intersection_with(i2d(2, 6, 5, 8)) == 0
    assert a.size_of_intersection_with(i2d(5, 6, 0, 4)) == 0


def test_interval2d_intersection_is_axis_separable(rng):
    """The size of the intersection is the product of the axis intersections."""
    for _ in range(RANDOM_ITERATIONS):
        a = Interval2D(random_interval(rng), random_interval(rng))
        b = Interval2D(random_interval(rng), random_interval(rng))
        expected = a.ix.size_of_intersection_with(b.ix) * a.iy.size_of_intersection_with(b.iy)
        assert a.size_of_intersection_with(b) == expected


def test_interval2d_bounding_union():
    """The bounding union may contain cells of neither rectangle."""
    a = i2d(0, 1, 0, 1)
    b = i2d(2, 3, 5, 6)
    union = a.bounding_union(b)
    assert union == i2d(0, 3, 0, 6)
    assert union.contains(3, 0)
    assert not a.contains(3, 0) and not b.contains(3, 0)


def test_interval2d_unionable_adjacent_pair():
    """Two rectangles side by side form a rectangle."""
    a = i2d(0, 1, 0, 1)
    b = i2d(2, 3, 0, 1)
    assert a.is_unionable_with(b)
    assert b.is_unionable_with(a)
    assert a.union(b) == i2d(0, 3, 0, 1)


def test_interval2d_not_unionable_gapped_pair():
    """Two rectangles separated by a column leave a gap in their bounding union."""
    a = i2d(0, 1, 0, 1)
    b = i2d(3, 4, 0, 1)
    assert not a.is_unionable_with(b)
    with pytest.raises(IntervalError):
        a.union(b)
    assert a.bounding_union(b) == i2d(0, 4, 0, 1)


def test_interval2d_corner_overlap_is_not_unionable():
    """Overlapping rectangles are not unionable unless the overlap spans a full side."""
    a = i2d(0, 2, 0, 2)
    b = i2d(1, 3, 1, 3)
    assert a.size_of_intersection_with(b) == 4
    assert not a.is_unionable_with(b)
    assert a.is_unionable_with(i2d(1, 2, 1, 2))


def test_interval2d_unionable_matches_formula(rng):
    """is_unionable_with agrees with the size based definition."""
    for _ in range(RANDOM_ITERATIONS):
        a = Interval2D(random_interval(rng, -10, 10), random_interval(rng, -10, 10))
        b = Interval2D(random_interval(rng, -10, 10), random_interval(rng, -10, 10))
        expected = a.size() + b.size() - a.size_of_intersection_with(b) == a.bounding_union(b).size()
        assert a.is_unionable_with(b) == expected


def test_interval2d_value_semantics():
    """Equality, hashing and text are built from the axis intervals."""
    assert i2d(0, 1, 2, 3) == i2d(0, 1, 2, 3)
    assert i2d(0, 1, 2, 3) != i2d(2, 3, 0, 1)
    assert hash(i2d(0, 1, 2, 3)) == hash(i2d(0, 1, 2, 3))
    assert str(i2d(0, 1, 2, 3)) == "[0..1]x[2..3]"
    assert repr(i2d(0, 1, 2, 3)) == "Interval2D(Interval1D(0, 1), Interval1D(2, 3))"
