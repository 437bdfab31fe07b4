import numpy as np
import pytest

from convex_hull_2d.exceptions import DegenerateInputError
from convex_hull_2d.geometry import (
    check_hull_input,
    extreme_points,
    side,
    side_many,
    within_segment,
)
from convex_hull_2d.points import PointSet


def test_side_sign_convention():
    a, b = (0.0, 0.0), (1.0, 0.0)
    assert side(a, b, (0.5, 1.0)) > 0   # left, inside
    assert side(a, b, (0.5, -1.0)) < 0  # right, outside
    assert side(a, b, (2.0, 0.0)) == 0


def test_side_is_twice_the_triangle_area():
    assert side((0, 0), (2, 0), (0, 3)) == 6


def test_side_of_the_segment_ends_is_zero():
    a, b = (0.1, 0.7), (-0.3, 0.2)
    assert side(a, b, a) == 0.0
    assert side(a, b, b) == 0.0


def test_side_many_matches_side():
    rng = np.random.default_rng(7)
    xy = rng.uniform(-1, 1, size=(20, 2))
    a, b = xy[0], xy[1]
    expected = [side(a, b, c) for c in xy]
    np.testing.assert_array_equal(side_many(a, b, xy), expected)


def test_within_segment():
    xy = np.array([[-1.0, 0.0], [0.0, 0.0], [0.5, 0.0], [1.0, 0.0], [1.5, 0.0]])
    result = within_segment((0.0, 0.0), (1.0, 0.0), xy)
    assert result.tolist() == [False, True, True, True, False]


def test_extreme_points_first_encountered_wins():
    xy = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0]])
    left, right, bottom, top = extreme_points(xy)
    assert (left, right, bottom, top) == (0, 2, 0, 1)


def test_check_hull_input_rejects_degenerate_sets():
    with pytest.raises(DegenerateInputError):
        check_hull_input(PointSet.from_points([(0, 0)]))
    with pytest.raises(DegenerateInputError):
        check_hull_input(PointSet.from_points([(1, 1), (1, 1), (1, 1)]))
    check_hull_input(PointSet.from_points([(0, 0), (1, 0)]))
