import collections
import logging

import numpy as np

from convex_hull_2d import config

logger = logging.getLogger(__name__)


class SubsetPool:
    """
    Free-list of point-index buffers.

    Quickhull asks for two new subsets at every split. Handing back released
    buffers instead of allocating fresh ones keeps the allocator quiet.
    """

    def __init__(self, size: int = config.ARRAY_POOL_SIZE):
        self.size = size
        self._free = collections.deque()
        self.num_created = 0

    def __len__(self):
        return len(self._free)

    def acquire(self, length: int) -> np.ndarray:
        """Return a buffer that can hold at least `length` indices"""
        for k, buf in enumerate(self._free):
            if len(buf) >= length:
                del self._free[k]
                return buf
        self.num_created += 1
        return np.empty(length, dtype=np.intp)

    def release(self, buf: np.ndarray) -> None:
        if len(self._free) >= self.size:
            logger.warning("Array pool is not big enough (size %d), dropping buffer", self.size)
            return
        self._free.append(buf)


class NoPool:
    """Allocates a fresh buffer on every request"""

    def acquire(self, length: int) -> np.ndarray:
        return np.empty(length, dtype=np.intp)

    def release(self, buf: np.ndarray) -> None:
        pass


# Shared between quickhull runs, like a process-wide free-list
default_pool = SubsetPool()
