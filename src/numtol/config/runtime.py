from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")
_JSON_ENV_CANDIDATES = (Path("config/numtol_env.json"), Path.home() / ".numtol_env.json")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files or JSON defaults."""
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}

    # First source to declare a name wins
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    for path in _JSON_ENV_CANDIDATES:
        for key, value in JsonConfigLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in config."""

    return _load_default_values().get(name)


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
) -> str | None:
    """Fetch an environment variable as a stripped, non-blank string."""

    value = os.getenv(name)
    value = value.strip() if value is not None else None

    if not value:
        configured_default = _default_value(name)
        if configured_default is not None:
            value = configured_default.strip()

    if not value:
        if required:
            raise ConfigurationError.missing_setting(name)
        return or_value
    return value


def env_float(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    """Fetch an environment variable and coerce it to ``float``."""

    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_setting(name)
        return or_value
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_setting(name, raw, "a float") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_setting(name)
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_setting(name, raw, f"one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")
