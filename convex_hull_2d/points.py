import collections
from typing import Iterable, Optional

import numpy as np

from convex_hull_2d import config

Point = collections.namedtuple('Point', ('x', 'y'))


class PointSet:
    """
    Fixed-capacity buffer of 2D points.

    Points are addressed by their index into the buffer. The index is the
    identity of a point: two points may share coordinates and still be
    different points. Only the first ``num_points`` rows are active.
    """

    def __init__(self, capacity: int, dtype=config.POINT_DTYPE):
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.coords = np.zeros((capacity, 2), dtype=dtype)
        self.num_points = capacity
        # Index of every active point in the set it was filtered from
        self.source_index = None

    @classmethod
    def from_points(cls, points: Iterable, dtype=config.POINT_DTYPE) -> "PointSet":
        """Build a point set from (x, y) pairs"""
        coords = np.asarray(list(points), dtype=dtype).reshape(-1, 2)
        ps = cls(len(coords), dtype=dtype)
        ps.coords[:] = coords
        return ps

    @property
    def capacity(self) -> int:
        return len(self.coords)

    @property
    def active(self) -> np.ndarray:
        """View of the active rows, shape (num_points, 2)"""
        return self.coords[:self.num_points]

    def __len__(self):
        return self.num_points

    def __getitem__(self, index) -> Point:
        if not 0 <= index < self.num_points:
            raise IndexError(f"Point index {index} out of range [0, {self.num_points})")
        x, y = self.coords[index]
        return Point(float(x), float(y))

    def __iter__(self):
        for i in range(self.num_points):
            yield self[i]

    def __repr__(self):
        return f"PointSet(num_points={self.num_points}, capacity={self.capacity})"


def create_points(n: int) -> PointSet:
    """Allocate a point set with room for n points"""
    return PointSet(n)


def free_points(ps: PointSet) -> None:
    """Release the buffer of a point set"""
    ps.coords = np.zeros((0, 2), dtype=ps.coords.dtype)
    ps.num_points = 0
    ps.source_index = None


def randomize_points(ps: PointSet, rng: Optional[np.random.Generator] = None) -> None:
    """Overwrite every point with coordinates uniform in config.COORD_RANGE"""
    if rng is None:
        rng = np.random.default_rng()
    low, high = config.COORD_RANGE
    ps.coords[:] = rng.uniform(low, high, size=ps.coords.shape)
    ps.num_points = ps.capacity
    ps.source_index = None
