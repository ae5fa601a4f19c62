"""
Tolerance-aware equality and ordering for floats.

Every ordering helper takes ``(x, tol, y)`` and is defined in terms of
``equals_tol``, so values inside the tolerance band ``[y - tol, y + tol]``
are never reported as strictly less or greater.

Tolerances are not validated here: a negative tolerance makes every pair
compare unequal, including ``x == y``. Use ``numtol.comparator.TolerantComparator``
with ``reject_negative_tolerance`` enabled to refuse such values.
"""

from .constants.math import AUTO_TOLERANCE_PRECISION


def equals_tol(x: float, tol: float, y: float) -> bool:
    """Return True when ``abs(x - y) <= tol`` (boundary counts as equal)."""
    return abs(x - y) <= tol


def equals_auto_tol(x: float, y: float) -> bool:
    """
    Compare using a tolerance derived from the magnitude of ``x``.

    The tolerance is ``abs(x) * 1e-6``; ``y`` plays no part in it, so the
    result can differ when the arguments are swapped.
    """
    return equals_tol(x, abs(x * AUTO_TOLERANCE_PRECISION), y)


def equals_auto_tol_relative(x: float, y: float, precision: float = AUTO_TOLERANCE_PRECISION) -> bool:
    """
    Compare using a tolerance derived from the smaller operand.

    True iff ``abs(x - y) < min(x, y) * precision``. The inequality is strict
    and the anchor is ``min(x, y)``, so whenever the smaller operand is zero
    or negative the result is always False.
    """
    return abs(x - y) < min(x, y) * precision


def greater_than_tol(x: float, tol: float, y: float) -> bool:
    """Return True when ``x > y`` and ``x`` lies outside the tolerance band of ``y``."""
    return x > y and not equals_tol(x, tol, y)


def greater_than_or_equals_tol(x: float, tol: float, y: float) -> bool:
    """Return True when ``x > y`` or ``x`` lies within ``tol`` of ``y``."""
    return x > y or equals_tol(x, tol, y)


def less_than_tol(x: float, tol: float, y: float) -> bool:
    """Return True when ``x < y`` and ``x`` lies outside the tolerance band of ``y``."""
    return x < y and not equals_tol(x, tol, y)


def less_than_or_equals_tol(x: float, tol: float, y: float) -> bool:
    """Return True when ``x < y`` or ``x`` lies within ``tol`` of ``y``."""
    return x < y or equals_tol(x, tol, y)


def compare_tol(x: float, tol: float, y: float) -> int:
    """
    Three-way comparison collapsing the tolerance band to equality.

    Returns:
        0 when ``x`` and ``y`` are within ``tol``, -1 when ``x < y``, 1 otherwise.
        NaN operands fall through to 1.
    """
    if equals_tol(x, tol, y):
        return 0
    if x < y:
        return -1
    return 1


__all__ = [
    "compare_tol",
    "equals_auto_tol",
    "equals_auto_tol_relative",
    "equals_tol",
    "greater_than_or_equals_tol",
    "greater_than_tol",
    "less_than_or_equals_tol",
    "less_than_tol",
]
