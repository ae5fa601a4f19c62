"""Mathematical constants and precision thresholds.

These constants define the precision levels used by the tolerant
comparison, rounding and range helpers.
"""

import math

# Smallest positive subnormal double; magnitudes below it are treated as zero.
DOUBLE_EPSILON = math.ulp(0.0)

# Relative precision used by the automatic-tolerance equality helpers.
AUTO_TOLERANCE_PRECISION = 1e-6

# Absolute tolerance used when a configured comparator is not given one.
DEFAULT_TOLERANCE = 1e-9

__all__ = [
    "AUTO_TOLERANCE_PRECISION",
    "DEFAULT_TOLERANCE",
    "DOUBLE_EPSILON",
]
