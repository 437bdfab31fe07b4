"""Errors raised by the hull algorithms. None of them is recoverable."""


class HullError(Exception):
    """Base class for convex hull errors"""


class HullCapacityError(HullError):
    """The hull's edge buffer is full but another edge must be recorded"""


class HullInvariantError(HullError):
    """The ordered hull chain does not contain an expected boundary point"""


class DegenerateInputError(HullError, ValueError):
    """The point set is too small or too degenerate to have a hull"""
