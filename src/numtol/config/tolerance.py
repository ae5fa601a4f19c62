"""Tolerance settings resolved from the environment."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..constants.math import AUTO_TOLERANCE_PRECISION, DEFAULT_TOLERANCE
from .errors import ConfigurationError
from .runtime import env_bool, env_float

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_ENV = "NUMTOL_DEFAULT_TOLERANCE"
AUTO_PRECISION_ENV = "NUMTOL_AUTO_PRECISION"
REJECT_NEGATIVE_TOLERANCE_ENV = "NUMTOL_REJECT_NEGATIVE_TOLERANCE"


@dataclass(frozen=True)
class ToleranceSettings:
    default_tolerance: float = DEFAULT_TOLERANCE
    auto_precision: float = AUTO_TOLERANCE_PRECISION
    reject_negative_tolerance: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.default_tolerance) or self.default_tolerance < 0:
            raise ConfigurationError.invalid_setting("default_tolerance", self.default_tolerance, "a finite, non-negative float")
        if not math.isfinite(self.auto_precision) or self.auto_precision <= 0:
            raise ConfigurationError.invalid_setting("auto_precision", self.auto_precision, "a finite, positive float")


def load_tolerance_settings() -> ToleranceSettings:
    """
    Build ``ToleranceSettings`` from ``NUMTOL_*`` environment variables.

    Unset variables fall back to the library defaults. ``.env`` files and
    ``config/numtol_env.json`` are consulted before the defaults.

    Raises:
        ConfigurationError: If a variable is malformed or out of range
    """
    settings = ToleranceSettings(
        default_tolerance=env_float(DEFAULT_TOLERANCE_ENV, DEFAULT_TOLERANCE),
        auto_precision=env_float(AUTO_PRECISION_ENV, AUTO_TOLERANCE_PRECISION),
        reject_negative_tolerance=env_bool(REJECT_NEGATIVE_TOLERANCE_ENV, False),
    )
    logger.debug("Loaded tolerance settings: %s", settings)
    return settings


__all__ = [
    "AUTO_PRECISION_ENV",
    "DEFAULT_TOLERANCE_ENV",
    "REJECT_NEGATIVE_TOLERANCE_ENV",
    "ToleranceSettings",
    "load_tolerance_settings",
]
