"""Culture-invariant float parsing."""

from __future__ import annotations

import logging
import math
import re

from .exceptions import FormatError

logger = logging.getLogger(__name__)

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_VALUES = {
    "nan": math.nan,
    "infinity": math.inf,
    "inf": math.inf,
}


def parse_invariant_float(text: str) -> float:
    """
    Parse ``text`` as a culture-invariant decimal literal.

    Accepts ASCII digits with an optional sign, ``.`` as the decimal separator and an optional
    exponent, plus the names ``NaN`` and ``Infinity`` (case-insensitive).
    Surrounding whitespace is ignored.

    Raises:
        FormatError: If ``text`` is blank, uses a locale separator, digit
            grouping, or is otherwise not a decimal literal
    """
    if not isinstance(text, str):
        raise FormatError(f"Cannot parse float from {type(text).__name__}: {text!r}", text=text)

    cleaned = text.strip()
    if not cleaned:
        raise FormatError(f"Cannot parse float from blank text: {text!r}", text=text)

    if _DECIMAL_PATTERN.fullmatch(cleaned):
        return float(cleaned)

    unsigned = cleaned.lstrip("+-")
    special = _SPECIAL_VALUES.get(unsigned.lower())
    if special is not None and len(cleaned) - len(unsigned) <= 1:
        return -special if cleaned.startswith("-") else special

    logger.debug("Rejected non-invariant float literal %r", text)
    raise FormatError(f"Cannot parse float from text: {text!r}", text=text)


__all__ = ["parse_invariant_float"]
