"""Angle unit conversions."""

import math


def to_deg(angle_rad: float) -> float:
    """Convert an angle in radians to degrees."""
    return angle_rad / math.pi * 180.0


def to_rad(angle_deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle_deg / 180.0 * math.pi


__all__ = ["to_deg", "to_rad"]
