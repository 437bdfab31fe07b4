"""
Akl-Toussaint heuristic.

The points with the lowest and highest x and y coordinates form a convex
quadrilateral. Every other point inside it cannot be on the hull, so it can be
thrown away before the hull algorithm runs. Both the extreme point search and
the inside test are O(n).
"""
import logging
from typing import Optional

import numpy as np

from convex_hull_2d.exceptions import DegenerateInputError
from convex_hull_2d.geometry import extreme_points, side_many
from convex_hull_2d.points import PointSet
from convex_hull_2d.stats import AlgorithmStats

logger = logging.getLogger(__name__)


def akl_toussaint(points: PointSet, stats: Optional[AlgorithmStats] = None) -> PointSet:
    """
    Return a new point set without the points inside the extreme quadrilateral.

    If `stats` is given, the work of the filter is added to it: four side
    tests per point and one allocation for the new point set.
    """
    n = points.num_points
    if n == 0:
        raise DegenerateInputError("Cannot filter an empty point set")

    xy = points.active
    left, right, bottom, top = extreme_points(xy)

    keep = np.zeros(n, dtype=bool)
    # left->top, top->right, right->bottom, bottom->left
    for a, b in ((left, top), (top, right), (right, bottom), (bottom, left)):
        keep |= side_many(xy[a], xy[b], xy) > 0.0

    corners = list(dict.fromkeys((top, bottom, left, right)))
    keep[corners] = False
    rest = np.flatnonzero(keep)

    retained = np.concatenate((np.asarray(corners, dtype=np.intp), rest))
    if points.source_index is not None:
        source = points.source_index[retained]
    else:
        source = retained

    filtered = PointSet(n, dtype=xy.dtype)
    filtered.num_points = len(retained)
    filtered.coords[:len(retained)] = xy[retained]
    filtered.source_index = source

    if stats is not None:
        stats.num_ops += 4 * n
        stats.num_allocs += 1
        stats.num_bytes += filtered.coords.nbytes

    logger.debug("Akl-Toussaint: kept %d of %d points", len(retained), n)
    return filtered
