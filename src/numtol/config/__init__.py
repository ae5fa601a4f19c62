"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_str
from .tolerance import ToleranceSettings, load_tolerance_settings

__all__ = [
    "ConfigurationError",
    "ToleranceSettings",
    "env_bool",
    "env_float",
    "env_str",
    "load_tolerance_settings",
]
