import numpy as np

from convex_hull_2d import config
from convex_hull_2d.exceptions import DegenerateInputError


def side(a, b, c) -> float:
    """
    Signed area of the parallelogram spanned by a->b and a->c.

    Returns a negative value if c is to the right of the directed line a->b
    (outside), zero if the three points are collinear and a positive value if
    c is to the left (inside).
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def side_many(a, b, xy: np.ndarray) -> np.ndarray:
    """Evaluate side(a, b, c) for every row c of xy"""
    return (b[0] - a[0]) * (xy[:, 1] - a[1]) - (b[1] - a[1]) * (xy[:, 0] - a[0])


def within_segment(a, b, xy: np.ndarray) -> np.ndarray:
    """For points on the line a-b, tell whether they lie on the closed segment"""
    dx, dy = b[0] - a[0], b[1] - a[1]
    t = (xy[:, 0] - a[0]) * dx + (xy[:, 1] - a[1]) * dy
    return (t >= 0.0) & (t <= dx * dx + dy * dy)


def first_argmin(values: np.ndarray) -> int:
    """Index of the smallest value, first occurrence wins"""
    return int(np.argmin(values))


def first_argmax(values: np.ndarray) -> int:
    """Index of the largest value, first occurrence wins"""
    return int(np.argmax(values))


def extreme_points(xy: np.ndarray):
    """Indices of the (left, right, bottom, top) extreme points"""
    return (
        first_argmin(xy[:, 0]),
        first_argmax(xy[:, 0]),
        first_argmin(xy[:, 1]),
        first_argmax(xy[:, 1]),
    )


def check_hull_input(points) -> None:
    """Raise DegenerateInputError if the point set cannot have a hull"""
    n = points.num_points
    if n < config.MIN_HULL_POINTS:
        raise DegenerateInputError(
            f"At least {config.MIN_HULL_POINTS} points are needed, got {n}")
    xy = points.active
    if not (np.ptp(xy[:, 0]) > 0.0 or np.ptp(xy[:, 1]) > 0.0):
        raise DegenerateInputError(f"All {n} points coincide")
