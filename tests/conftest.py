"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from numtol.config import runtime
from numtol.config.tolerance import (
    AUTO_PRECISION_ENV,
    DEFAULT_TOLERANCE_ENV,
    REJECT_NEGATIVE_TOLERANCE_ENV,
)

_NUMTOL_ENV_VARS = (DEFAULT_TOLERANCE_ENV, AUTO_PRECISION_ENV, REJECT_NEGATIVE_TOLERANCE_ENV)


@pytest.fixture(autouse=True)
def isolated_runtime_config(monkeypatch):
    """Keep developer .env files and NUMTOL_* variables out of every test."""
    for name in _NUMTOL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    monkeypatch.setattr(runtime, "_JSON_ENV_CANDIDATES", ())
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", None)
    yield
