"""
Configured facade over the tolerant comparison functions.

``TolerantComparator`` binds a default tolerance and a tolerance policy so
call sites can compare without threading ``tol`` through every call:

    comparator = TolerantComparator.from_env()
    comparator.less_than(a, b)
    comparator.in_range(x, "[0, 10)")
    sorted(values, key=comparator.sort_key())
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

from . import comparison
from .config import ToleranceSettings, load_tolerance_settings
from .exceptions import ToleranceError
from .ranges import parse_range

logger = logging.getLogger(__name__)


class TolerantComparator:
    """Tolerant comparisons sharing one ``ToleranceSettings``."""

    def __init__(self, settings: Optional[ToleranceSettings] = None) -> None:
        self.settings = settings if settings is not None else ToleranceSettings()

    @classmethod
    def from_env(cls) -> "TolerantComparator":
        return cls(load_tolerance_settings())

    def _resolve(self, tol: Optional[float]) -> float:
        resolved = self.settings.default_tolerance if tol is None else tol
        if self.settings.reject_negative_tolerance and resolved < 0:
            logger.debug("Rejecting negative tolerance %r", resolved)
            raise ToleranceError(resolved)
        return resolved

    def equals(self, x: float, y: float, tol: Optional[float] = None) -> bool:
        return comparison.equals_tol(x, self._resolve(tol), y)

    def greater_than(self, x: float, y: float, tol: Optional[float] = None) -> bool:
        return comparison.greater_than_tol(x, self._resolve(tol), y)

    def greater_than_or_equals(self, x: float, y: float, tol: Optional[float] = None) -> bool:
        return comparison.greater_than_or_equals_tol(x, self._resolve(tol), y)

    def less_than(self, x: float, y: float, tol: Optional[float] = None) -> bool:
        return comparison.less_than_tol(x, self._resolve(tol), y)

    def less_than_or_equals(self, x: float, y: float, tol: Optional[float] = None) -> bool:
        return comparison.less_than_or_equals_tol(x, self._resolve(tol), y)

    def compare(self, x: float, y: float, tol: Optional[float] = None) -> int:
        return comparison.compare_tol(x, self._resolve(tol), y)

    def auto_equals(self, x: float, y: float) -> bool:
        """Equality with tolerance ``abs(x) * auto_precision``, anchored on ``x``."""
        return comparison.equals_tol(x, abs(x * self.settings.auto_precision), y)

    def auto_equals_relative(self, x: float, y: float) -> bool:
        """Strict equality against ``min(x, y) * auto_precision``."""
        return comparison.equals_auto_tol_relative(x, y, self.settings.auto_precision)

    def in_range(self, nr: float, range_text: str, tol: Optional[float] = None) -> bool:
        return parse_range(range_text).contains(nr, self._resolve(tol))

    def sort_key(self, tol: Optional[float] = None) -> Callable[[float], Any]:
        """
        Return a ``sorted`` key that orders values with ``compare``.

        Values within the band compare equal and keep their input order
        (``sorted`` is stable); chains of near-equal values are not
        transitive, so the result depends on input order near the band.
        """
        resolved = self._resolve(tol)
        return functools.cmp_to_key(lambda x, y: comparison.compare_tol(x, resolved, y))


__all__ = ["TolerantComparator"]
