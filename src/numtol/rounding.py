"""Derived numeric properties: order of magnitude, multiple rounding and sign."""

import math
from typing import Optional

from .constants.math import DOUBLE_EPSILON


def magnitude(value: float) -> int:
    """
    Return the base-10 order of magnitude of ``value``.

    Examples:
        >>> magnitude(190.0)
        2
        >>> magnitude(0.0034)
        -3
        >>> magnitude(0.0)
        0

    Values below the smallest positive double are treated as zero and give 0,
    so no finite input raises, however large or small.

    Compatibility note: NaN and infinity have no integer magnitude and are
    the one exception. NaN raises ValueError and infinity raises
    OverflowError, where a C-style integer cast would return an
    implementation-defined value instead.
    """
    absolute = abs(value)
    if absolute < DOUBLE_EPSILON:
        return 0
    return math.floor(math.log10(absolute))


def mround(value: float, multiple: float) -> float:
    """
    Snap ``value`` to the nearest integer multiple of ``multiple``.

    Midpoints follow Python's ``round`` (half to even), so ``mround(7.0, 2.0)``
    is 8.0 and ``mround(2.5, 1.0)`` is 2.0. A zero multiple leaves ``value``
    unchanged.
    """
    if abs(multiple) < DOUBLE_EPSILON:
        return value
    quotient = value / multiple
    if not math.isfinite(quotient):
        # round() cannot produce an int here; keep IEEE propagation instead
        return quotient * multiple
    return float(math.trunc(round(quotient))) * multiple


def mround_optional(value: Optional[float], multiple: float) -> Optional[float]:
    """Round ``value`` to ``multiple``; a missing value stays missing."""
    if value is None:
        return None
    return mround(value, multiple)


def mround_optional_multiple(value: float, multiple: Optional[float]) -> float:
    """Round ``value`` to ``multiple``; a missing multiple means no rounding."""
    if multiple is None:
        return value
    return mround(value, multiple)


def sign(n: float) -> float:
    """Return 1.0 for ``n >= 0`` (zero included) and -1.0 otherwise."""
    if n >= 0:
        return 1.0
    return -1.0


__all__ = [
    "magnitude",
    "mround",
    "mround_optional",
    "mround_optional_multiple",
    "sign",
]
