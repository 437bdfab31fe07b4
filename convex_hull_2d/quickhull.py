r"""
Quickhull.

The two points with the smallest and largest x coordinate are on the hull.
The line between them splits the remaining points in two halves, and each half
is solved by repeatedly taking the point farthest from the current segment
a---b, which is also on the hull::

              far
              /\
             /  \
  (outside) /    \ (outside)
           /      \
          /________\
         a          b

Points inside the triangle a, far, b can never be on the hull and are dropped.
Points outside a---far and far---b are handled the same way, one level down.
"""
import logging

import numpy as np

from convex_hull_2d.chain import HullChain
from convex_hull_2d.geometry import check_hull_input, first_argmax, first_argmin, side_many
from convex_hull_2d.pool import NoPool, default_pool
from convex_hull_2d.stats import AlgorithmStats

logger = logging.getLogger(__name__)


def _take(pool, indices, mask, stats):
    """Copy the masked indices into a pooled buffer, returns (buffer, count)"""
    count = int(np.count_nonzero(mask))
    stats.num_allocs += 1
    if count == 0:
        return None, 0
    buf = pool.acquire(count)
    np.compress(mask, indices, out=buf[:count])
    stats.num_bytes += buf[:count].nbytes
    return buf, count


def _solve_segment(chain, xy, a, b, subset, pool, stats):
    """
    Put the hull points of `subset` between a and b on the chain.

    Every point in `subset` lies strictly outside the directed segment a->b.
    Returns the sub-problems that are left, as (a, b, (buffer, count)) tuples.
    """
    if len(subset) == 1:
        chain.insert_before(int(subset[0]), b)
        return ()

    candidates = xy[subset]
    d = side_many(xy[a], xy[b], candidates)
    stats.num_ops += len(subset)

    far = int(subset[first_argmax(np.abs(d))])
    chain.insert_before(far, b)

    outside_a = side_many(xy[a], xy[far], candidates) < 0.0
    outside_b = side_many(xy[far], xy[b], candidates) < 0.0
    stats.num_ops += 2 * len(subset)
    # rounding can put a point past both edges near far
    outside_b &= ~outside_a

    return (
        (far, b, _take(pool, subset, outside_b, stats)),
        (a, far, _take(pool, subset, outside_a, stats)),
    )


def quickhull(points, hull, pool=None) -> AlgorithmStats:
    """
    Compute the convex hull of `points` into `hull` with quickhull.

    Args:
        points: PointSet to compute the hull of. Must not change during the call.
        hull: Hull to overwrite; its capacity must cover the number of points.
        pool: SubsetPool for the subset buffers. None uses the shared pool,
            False allocates a new buffer for every subset.

    Returns:
        AlgorithmStats for the run.
    """
    check_hull_input(points)
    if pool is None:
        pool = default_pool
    elif pool is False:
        pool = NoPool()

    stats = AlgorithmStats()
    xy = points.active
    n = points.num_points

    left = first_argmin(xy[:, 0])
    right = first_argmax(xy[:, 0])
    if left == right:
        # All points share one x coordinate
        left = first_argmin(xy[:, 1])
        right = first_argmax(xy[:, 1])

    chain = HullChain(left, right)
    stats.num_allocs += 1

    d = side_many(xy[left], xy[right], xy)
    stats.num_ops += n
    everything = np.arange(n, dtype=np.intp)

    # Work stack instead of recursion, so deep splits cannot exhaust the
    # interpreter stack. Sub-problems only insert between their own two
    # neighbouring chain entries, so the processing order does not matter.
    stack = [
        (right, left, _take(pool, everything, d > 0.0, stats)),
        (left, right, _take(pool, everything, d < 0.0, stats)),
    ]
    while stack:
        a, b, (buf, count) = stack.pop()
        if count == 0:
            continue
        stack.extend(_solve_segment(chain, xy, a, b, buf[:count], pool, stats))
        pool.release(buf)

    hull.reset(points)
    for a, b in chain.edges():
        hull.add_line(a, b)

    logger.debug("Quickhull: %d points, %d hull edges, %d ops", n, hull.num_lines, stats.num_ops)
    return stats
