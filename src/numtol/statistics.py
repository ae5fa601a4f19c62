"""Aggregate statistics over sequences of floats."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def mean(values: Iterable[float]) -> float:
    """
    Return the arithmetic mean of ``values``.

    Any iterable is accepted, generators included. An empty input yields NaN
    (0 / 0) instead of raising.
    """
    data = np.fromiter(values, dtype=float)
    if data.size == 0:
        return math.nan
    return float(data.mean())


__all__ = ["mean"]
