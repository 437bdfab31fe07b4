"""Convex hulls of 2D point sets with bruteforce search and quickhull."""
from convex_hull_2d.akl_toussaint import akl_toussaint
from convex_hull_2d.bruteforce import bruteforce_hull
from convex_hull_2d.chain import HullChain
from convex_hull_2d.exceptions import (
    DegenerateInputError,
    HullCapacityError,
    HullError,
    HullInvariantError,
)
from convex_hull_2d.geometry import side, side_many
from convex_hull_2d.hull import Edge, Hull, free_hull, init_hull
from convex_hull_2d.points import Point, PointSet, create_points, free_points, randomize_points
from convex_hull_2d.pool import SubsetPool
from convex_hull_2d.quickhull import quickhull
from convex_hull_2d.stats import AlgorithmStats

__version__ = "0.22"
