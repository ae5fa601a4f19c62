"""
Interval notation parsing and tolerant range membership.

Ranges are written as ``[lower, upper)`` where ``[``/``]`` mark inclusive
bounds, ``(``/``)`` mark exclusive ones and an empty field leaves that side
unbounded:

- ``"[0, 10)"``: 0 (included) to 10 (excluded)
- ``"[10, 20]"``: 10 to 20, both included
- ``"(30,)"``: above 30, up to +infinity
- ``"(,)"``: every number
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .comparison import (
    greater_than_or_equals_tol,
    greater_than_tol,
    less_than_or_equals_tol,
    less_than_tol,
)
from .exceptions import FormatError, RangeFormatError
from .parsing import parse_invariant_float

logger = logging.getLogger(__name__)

_INCLUSIVE_OPEN = "["
_INCLUSIVE_CLOSE = "]"
_LOWER_BRACKETS = "[("
_UPPER_BRACKETS = "])"
_SEPARATOR = ","


@dataclass(frozen=True)
class Range:
    """Parsed interval; a ``None`` bound is unbounded and ignores its inclusivity flag."""

    lower: Optional[float]
    lower_inclusive: bool
    upper: Optional[float]
    upper_inclusive: bool

    @property
    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None

    def contains(self, nr: float, tol: float) -> bool:
        """Return True when ``nr`` satisfies every present bound within ``tol``."""
        if self.is_unbounded:
            return True

        if self.lower is not None:
            if self.lower_inclusive:
                above = greater_than_or_equals_tol(nr, tol, self.lower)
            else:
                above = greater_than_tol(nr, tol, self.lower)
            if not above:
                return False

        if self.upper is not None:
            if self.upper_inclusive:
                return less_than_or_equals_tol(nr, tol, self.upper)
            return less_than_tol(nr, tol, self.upper)

        return True

    def __str__(self) -> str:
        opening = "[" if self.lower_inclusive else "("
        closing = "]" if self.upper_inclusive else ")"
        lower = "" if self.lower is None else repr(self.lower)
        upper = "" if self.upper is None else repr(self.upper)
        return f"{opening}{lower}{_SEPARATOR}{upper}{closing}"


def _parse_bound(field: str, text: str) -> Optional[float]:
    stripped = field.strip()
    if not stripped:
        return None
    try:
        return parse_invariant_float(stripped)
    except FormatError as exc:
        raise RangeFormatError(text, reason=f"Non-numeric bound {stripped!r}") from exc


def parse_range(text: str) -> Range:
    """
    Parse interval notation into a ``Range``.

    The first character decides lower inclusivity (only ``[`` is inclusive) and
    the last character decides upper inclusivity (only ``]`` is inclusive).
    One bracket is stripped from each end before splitting on the comma.

    Raises:
        RangeFormatError: If the text is blank, lacks the comma, has more than
            two fields, or a bound is not a decimal literal
    """
    if not isinstance(text, str):
        raise RangeFormatError(repr(text), reason=f"Range must be text, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise RangeFormatError(text, reason="Empty range")

    lower_inclusive = stripped.startswith(_INCLUSIVE_OPEN)
    upper_inclusive = stripped.endswith(_INCLUSIVE_CLOSE)

    body = stripped
    if body[0] in _LOWER_BRACKETS:
        body = body[1:]
    if body and body[-1] in _UPPER_BRACKETS:
        body = body[:-1]

    fields = body.split(_SEPARATOR)
    if len(fields) != 2:
        raise RangeFormatError(text, reason=f"Expected 2 comma-separated fields, found {len(fields)}")

    parsed = Range(
        lower=_parse_bound(fields[0], text),
        lower_inclusive=lower_inclusive,
        upper=_parse_bound(fields[1], text),
        upper_inclusive=upper_inclusive,
    )
    logger.debug("Parsed range %r as %s", text, parsed)
    return parsed


def is_in_range(nr: float, tol: float, range_text: str) -> bool:
    """Return True when ``nr`` lies in the interval described by ``range_text``."""
    return parse_range(range_text).contains(nr, tol)


__all__ = ["Range", "is_in_range", "parse_range"]
