import math

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from convex_hull_2d.points import PointSet


@pytest.fixture
def square():
    return PointSet.from_points([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def collinear():
    return PointSet.from_points([(0, 0), (1, 0), (2, 0)])


@pytest.fixture
def square_with_center():
    return PointSet.from_points([(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5)])


@pytest.fixture
def octagon():
    return PointSet.from_points(
        [(math.cos(k * math.pi / 4), math.sin(k * math.pi / 4)) for k in range(8)]
    )


@pytest.fixture(params=[0, 1, 2, 3, 4])
def random_points(request):
    rng = np.random.default_rng(request.param)
    return PointSet.from_points(rng.uniform(-0.5, 0.5, size=(60, 2)))


def coordinate_set(hull):
    return {tuple(p) for p in hull.vertex_coords().tolist()}
