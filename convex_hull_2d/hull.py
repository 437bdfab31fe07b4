import collections
from typing import List, Optional

import numpy as np
from scipy.spatial import ConvexHull

from convex_hull_2d.exceptions import HullCapacityError, HullInvariantError
from convex_hull_2d.geometry import side_many
from convex_hull_2d.points import Point, PointSet

Edge = collections.namedtuple('Edge', ('a', 'b'))


class Hull:
    """
    Fixed-capacity list of hull edges.

    Every edge is a pair of point indices into ``points``, the point set the
    hull was last computed over. ``max_lines`` never changes after creation.
    """

    def __init__(self, max_lines: int, points: Optional[PointSet] = None):
        self.lines = np.zeros((max_lines, 2), dtype=np.intp)
        self.num_lines = 0
        self.points = points

    @property
    def max_lines(self) -> int:
        return len(self.lines)

    @property
    def edges(self) -> np.ndarray:
        """View of the recorded edges, shape (num_lines, 2)"""
        return self.lines[:self.num_lines]

    def reset(self, points: PointSet) -> None:
        """Forget all edges and point the hull at a new point set"""
        self.points = points
        self.num_lines = 0

    def add_line(self, a: int, b: int) -> None:
        if self.num_lines >= self.max_lines:
            raise HullCapacityError(
                f"Hull is too small: cannot add edge {a}->{b}, "
                f"capacity is {self.max_lines}")
        self.lines[self.num_lines] = (a, b)
        self.num_lines += 1

    def __len__(self):
        return self.num_lines

    def __iter__(self):
        for a, b in self.edges:
            yield Edge(int(a), int(b))

    def __repr__(self):
        return f"Hull(num_lines={self.num_lines}, max_lines={self.max_lines})"

    def vertices(self) -> List[int]:
        """Point indices in cycle order, starting at the first edge"""
        if self.num_lines == 0:
            return []
        successor = {a: b for a, b in self}
        start = int(self.edges[0, 0])
        cycle = [start]
        current = successor[start]
        while current != start:
            if current not in successor or len(cycle) > self.num_lines:
                raise HullInvariantError(f"Hull edges do not close at point {current}")
            cycle.append(current)
            current = successor[current]
        return cycle

    def vertex_coords(self) -> np.ndarray:
        """Coordinates of the hull vertices in cycle order"""
        return self.points.coords[self.vertices()]

    def segments(self) -> List[tuple]:
        """Edges as pairs of Points"""
        return [(self.points[a], self.points[b]) for a, b in self]

    def is_closed(self) -> bool:
        """Every vertex has exactly one outgoing and one incoming edge, in one cycle"""
        if self.num_lines == 0:
            return False
        starts = collections.Counter(int(a) for a in self.edges[:, 0])
        ends = collections.Counter(int(b) for b in self.edges[:, 1])
        if starts.keys() != ends.keys():
            return False
        if any(c != 1 for c in starts.values()) or any(c != 1 for c in ends.values()):
            return False
        try:
            return len(self.vertices()) == self.num_lines
        except HullInvariantError:
            return False

    def is_convex(self) -> bool:
        """No hull vertex lies on the outer side of any hull edge"""
        xy = self.points.coords[sorted({int(i) for i in self.edges.ravel()})]
        for a, b in self:
            if (side_many(self.points.coords[a], self.points.coords[b], xy) < 0.0).any():
                return False
        return True

    def same_cycle(self, other: "Hull", allow_reflection: bool = False) -> bool:
        """
        Compare two hulls as cyclic vertex sequences.

        Vertices are compared by coordinates so hulls computed over different
        point sets (e.g. a filtered copy) can be compared.
        """
        mine = [tuple(p) for p in self.vertex_coords().tolist()]
        theirs = [tuple(p) for p in other.vertex_coords().tolist()]
        if len(mine) != len(theirs):
            return False
        if not mine:
            return True
        candidates = [theirs]
        if allow_reflection:
            candidates.append(theirs[::-1])
        for seq in candidates:
            if mine[0] not in seq:
                continue
            k = seq.index(mine[0])
            if seq[k:] + seq[:k] == mine:
                return True
        return False


def init_hull(ps: PointSet) -> Hull:
    """Allocate a hull sized to the capacity of a point set"""
    return Hull(ps.capacity, ps)


def free_hull(hull: Hull) -> None:
    """Release the edge buffer of a hull"""
    hull.lines = np.zeros((0, 2), dtype=np.intp)
    hull.num_lines = 0
    hull.points = None


def reference_vertices(ps: PointSet) -> set:
    """Hull vertex coordinates according to Qhull, used as ground truth"""
    convex_hull = ConvexHull(ps.active)
    return {Point(*map(float, ps.coords[i])) for i in convex_hull.vertices}
