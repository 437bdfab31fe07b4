import logging

import numpy as np

from convex_hull_2d.geometry import check_hull_input, side_many, within_segment
from convex_hull_2d.stats import AlgorithmStats

logger = logging.getLogger(__name__)


def is_hull_edge(xy, i, j, d) -> bool:
    """
    Decide whether i->j is a hull edge given d, the side of every point.

    All points must be on the non-negative side. Points on the line must also
    lie between i and j, so only the two ends of a collinear run are kept.
    """
    if (d < 0.0).any():
        return False
    if xy[i][0] == xy[j][0] and xy[i][1] == xy[j][1]:
        return False
    on_line = d == 0.0
    return bool(within_segment(xy[i], xy[j], xy[on_line]).all())


def bruteforce_hull(points, hull) -> AlgorithmStats:
    """
    Compute the convex hull of `points` into `hull` by exhaustive search, O(n^3).

    Every ordered pair (i, j) is tried in both directions. The first j that
    leaves no point on the outer side of i->j gives the one outgoing hull
    edge of point i. Only the first copy of a repeated coordinate takes part.
    """
    check_hull_input(points)
    stats = AlgorithmStats()
    xy = points.active
    n = points.num_points

    _, first = np.unique(xy, axis=0, return_index=True)
    distinct = np.zeros(n, dtype=bool)
    distinct[first] = True

    hull.reset(points)
    for i in range(n):
        if not distinct[i]:
            continue
        for k in range(i + 1, i + n):
            j = k % n
            if not distinct[j]:
                continue
            d = side_many(xy[i], xy[j], xy)
            stats.num_ops += n
            if is_hull_edge(xy, i, j, d):
                hull.add_line(i, j)
                break

    logger.debug("Bruteforce: %d points, %d hull edges, %d ops", n, hull.num_lines, stats.num_ops)
    return stats
