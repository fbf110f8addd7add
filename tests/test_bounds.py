"""Tests the bounds accumulator."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from svg_bounds.path_bbox import Bounds, EmptyBoundsError, Point, bounds_from_path

samples = [
    Bounds(0, 0, 10, 10),
    Bounds(-5, 3, 2, 20),
    Bounds(100, -100, 150, -50),
    Bounds().extend(1.5, 2.5),
]


def test_empty() -> None:
    bounds = Bounds()

    assert bounds.is_empty
    assert not bounds
    assert repr(bounds) == "Bounds()"
    assert Point(0, 0) not in bounds


@pytest.mark.parametrize(
    "attr",
    ["x1", "y1", "x2", "y2", "width", "height", "as_bbox", "to_record", "to_array"],
)
def test_empty_cannot_be_queried(attr: str) -> None:
    with pytest.raises(EmptyBoundsError):
        value = getattr(Bounds(), attr)
        if callable(value):
            value()


def test_extend_adopts_first_point() -> None:
    bounds = Bounds().extend(3, -4)

    assert not bounds.is_empty
    assert (bounds.x1, bounds.y1, bounds.x2, bounds.y2) == (3, -4, 3, -4)
    assert bounds.width == 0
    assert bounds.height == 0


def test_extend_chains() -> None:
    bounds = Bounds()
    result = bounds.extend(0, 0).extend(10, 5).extend(-2, 8)

    assert result is bounds
    assert bounds.as_bbox() == (-2, 0, 12, 8)


def test_extend_at_extreme_values() -> None:
    bounds = Bounds().extend(1e300, -1e300).extend(-1e300, 1e300)

    assert bounds.as_bbox() == (-1e300, -1e300, 2e300, 2e300)


def test_init_normalizes_corners() -> None:
    assert Bounds(10, 20, 0, 5) == Bounds(0, 5, 10, 20)


def test_init_requires_all_coordinates() -> None:
    with pytest.raises(TypeError):
        Bounds(0, 0, 10)  # type: ignore[call-arg]


@pytest.mark.parametrize(("a", "b"), list(itertools.permutations(samples, 2)))
def test_union_commutative(a: Bounds, b: Bounds) -> None:
    assert a.copy().union(b) == b.copy().union(a)


@pytest.mark.parametrize(("a", "b", "c"), list(itertools.permutations(samples, 3)))
def test_union_associative(a: Bounds, b: Bounds, c: Bounds) -> None:
    left = a.copy().union(b).union(c)
    right = a.copy().union(b.copy().union(c))

    assert left == right


@pytest.mark.parametrize("a", samples)
def test_union_idempotent(a: Bounds) -> None:
    assert a.copy().union(a) == a
    assert a.copy().union(Bounds(a.x1, a.y1, a.x1, a.y1)) == a


def test_union_with_empty() -> None:
    bounds = Bounds(0, 0, 1, 1)

    assert bounds.copy().union(Bounds()) == bounds
    assert Bounds().union(bounds) == bounds
    assert Bounds().union(Bounds()).is_empty


def test_union_mutates_in_place() -> None:
    bounds = Bounds(0, 0, 1, 1)
    other = Bounds(5, 5, 6, 6)

    assert bounds.union(other) is bounds
    assert bounds == Bounds(0, 0, 6, 6)
    assert other == Bounds(5, 5, 6, 6)


def test_union_path() -> None:
    bounds = Bounds.from_path("M 100 100L300 100 200 300z")
    assert bounds.width == 200

    bounds.extend(350, 100)
    assert bounds.width == 250

    bounds.union_path("m 0 0 h 10 v 10")
    assert bounds.as_bbox() == (0, 0, 350, 300)


def test_copy_is_independent() -> None:
    bounds = Bounds(0, 0, 1, 1)
    copied = bounds.copy()
    copied.extend(5, 5)

    assert bounds == Bounds(0, 0, 1, 1)
    assert copied == Bounds(0, 0, 5, 5)


def test_from_points() -> None:
    bounds = Bounds.from_points([Point(1, 2), 3 + 0j, (-1, 5)])

    assert bounds.as_bbox() == (-1, 0, 4, 5)


def test_from_points_empty() -> None:
    with pytest.raises(EmptyBoundsError, match="No bounding box points found"):
        Bounds.from_points([])


def test_from_path_matches_function() -> None:
    d = "M 0 0 H 50 V 20 H 0 Z"

    assert Bounds.from_path(d) == bounds_from_path(d)


def test_to_record() -> None:
    assert Bounds(1, 2, 4, 8).to_record() == {
        "x1": 1.0,
        "y1": 2.0,
        "x2": 4.0,
        "y2": 8.0,
        "width": 3.0,
        "height": 6.0,
    }


def test_to_array() -> None:
    array = Bounds(1, 2, 4, 8).to_array()

    assert array.dtype == np.float64
    np.testing.assert_array_equal(array, np.array([1, 2, 4, 8]))


def test_contains() -> None:
    bounds = Bounds(0, 0, 10, 10)

    assert Point(5, 5) in bounds
    assert Point(10, 0) in bounds
    assert Point(11, 5) not in bounds


def test_equality() -> None:
    assert Bounds() == Bounds()
    assert Bounds(0, 0, 1, 1) != Bounds()
    assert Bounds(0, 0, 1, 1) != (0, 0, 1, 1)


def test_repr() -> None:
    assert repr(Bounds(0, 0, 1, 2)) == "Bounds(x1=0.0, y1=0.0, x2=1.0, y2=2.0)"
