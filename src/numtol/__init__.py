"""Tolerant float comparison, rounding and range helpers."""

from .angles import to_deg, to_rad
from .comparator import TolerantComparator
from .comparison import (
    compare_tol,
    equals_auto_tol,
    equals_auto_tol_relative,
    equals_tol,
    greater_than_or_equals_tol,
    greater_than_tol,
    less_than_or_equals_tol,
    less_than_tol,
)
from .exceptions import FormatError, RangeFormatError, ToleranceError
from .parsing import parse_invariant_float
from .ranges import Range, is_in_range, parse_range
from .rounding import magnitude, mround, mround_optional, mround_optional_multiple, sign
from .statistics import mean

__all__ = [
    "FormatError",
    "Range",
    "RangeFormatError",
    "ToleranceError",
    "TolerantComparator",
    "compare_tol",
    "equals_auto_tol",
    "equals_auto_tol_relative",
    "equals_tol",
    "greater_than_or_equals_tol",
    "greater_than_tol",
    "is_in_range",
    "less_than_or_equals_tol",
    "less_than_tol",
    "magnitude",
    "mean",
    "mround",
    "mround_optional",
    "mround_optional_multiple",
    "parse_invariant_float",
    "parse_range",
    "sign",
    "to_deg",
    "to_rad",
]
