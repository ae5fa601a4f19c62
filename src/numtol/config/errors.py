"""Exception types for configuration handling."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ConfigurationError(RuntimeError):
    """Raised when a setting or a defaults file is missing or malformed.

    ``setting`` names the offending variable and ``source`` the file it came
    from, when known.
    """

    def __init__(self, message: str, *, setting: Optional[str] = None, source: Optional[Path] = None) -> None:
        super().__init__(message)
        self.setting = setting
        self.source = source

    @classmethod
    def invalid_setting(cls, setting: str, value: object, expected: str) -> "ConfigurationError":
        """Setting holds a value of the wrong shape or range."""
        return cls(f"{setting} must be {expected} (got {value!r})", setting=setting)

    @classmethod
    def missing_setting(cls, setting: str) -> "ConfigurationError":
        """Required setting is absent from the environment and every defaults file."""
        return cls(f"Required setting {setting} is not set", setting=setting)

    @classmethod
    def unreadable_source(cls, loader: str, path: Union[str, Path]) -> "ConfigurationError":
        """Defaults file exists but the loader could not read it."""
        source = Path(path)
        return cls(f"{loader} could not read {source}", source=source)

    @classmethod
    def malformed_source(cls, path: Union[str, Path], problem: str) -> "ConfigurationError":
        """Defaults file was read but its content is unusable."""
        source = Path(path)
        return cls(f"Defaults file {source} {problem}", source=source)


__all__ = ["ConfigurationError"]
