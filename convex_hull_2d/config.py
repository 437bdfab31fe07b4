"""
Global constants for the convex hull demo and benchmark.

Values here are defaults only; the command line overrides them where a flag
exists.
"""
import numpy as np

# Coordinates are drawn uniformly from [low, high)
COORD_RANGE = (-0.5, 0.5)
POINT_DTYPE = np.float64

# Number of point-index buffers kept around for quickhull subsets
ARRAY_POOL_SIZE = 32

# Hull algorithms need at least two distinct points
MIN_HULL_POINTS = 2

DEFAULT_NUM_POINTS = 100
MIN_CLI_POINTS = MIN_HULL_POINTS
MAX_CLI_POINTS = 1000

# Benchmark mode
BENCHMARK_SECONDS = 30.0
PROGRESS_INTERVAL = 1.0
