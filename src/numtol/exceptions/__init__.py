"""Exception classes for numtol.

All library exceptions inherit from ApplicationError so callers can catch
everything numtol raises with a single clause.

Exception classes support two patterns:
1. No-argument raise: raise ValidationError()
2. Contextual attributes: err = RangeFormatError(text="[0 10]", reason="missing comma"); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all numtol errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "numtol error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ValidationError(ApplicationError):
    """Data validation failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data validation failed"
        super().__init__(message, **kwargs)


class ToleranceError(ValidationError):
    """Tolerance rejected by the active tolerance policy."""

    def __init__(self, tolerance: float, *, reason: str = "Tolerance must be non-negative") -> None:
        super().__init__(f"{reason}: {tolerance!r}", tolerance=tolerance, reason=reason)


class FormatError(ApplicationError, ValueError):
    """Text could not be parsed into the expected numeric form."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Text could not be parsed"
        super().__init__(message, **kwargs)


class RangeFormatError(FormatError):
    """Range notation text is malformed."""

    def __init__(self, text: str, *, reason: str = "Malformed range") -> None:
        super().__init__(f"{reason}: {text!r}", text=text, reason=reason)


__all__ = [
    "ApplicationError",
    "FormatError",
    "RangeFormatError",
    "ToleranceError",
    "ValidationError",
]
