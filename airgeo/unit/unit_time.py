"""Time units.

All time units are based on the Second class as the internal unit, with
automatic conversion between different time scales. Elapsed times passed to
the linear position estimates are seconds.

Classes:
    Second: Base time unit in seconds.
    Minute: 60 seconds.
    Hour: 3600 seconds.

Example:
    >>> duration = Hour(2.5)
    >>> print(duration)  # "2.5 h"
    >>> print(float(duration))  # 9000.0 (seconds)
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: Second (internal unit for time)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"
    ALIASES = ("sec",)


class Minute(Second):
    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    SCALE_TO_SI = 3600.0
    SYMBOL = "h"
    ALIASES = ("hr",)


Time = Second | Minute | Hour  # Type alias for any time unit
