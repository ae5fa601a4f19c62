"""Constants package for shared constant values."""

from .math import AUTO_TOLERANCE_PRECISION, DEFAULT_TOLERANCE, DOUBLE_EPSILON

__all__ = [
    "AUTO_TOLERANCE_PRECISION",
    "DEFAULT_TOLERANCE",
    "DOUBLE_EPSILON",
]
