"""Speed units.

All speed units are based on MeterPerSecond as the internal unit (m/s). Next
to the metric units the family carries the aviation units used for ground
speed (knots) and vertical speed (feet per minute).

Classes:
    MeterPerSecond: Base speed unit (m/s).
    KilometersPerHour: km/h.
    Knot: One nautical mile per hour.
    FootPerMinute: Vertical speed unit (ft/min).

Type Aliases:
    Speed: Union type for all speed units.

Example:
    >>> gs = Knot(450)
    >>> print(float(gs))  # 231.5 (m/s)
    >>> climb = FootPerMinute(1500)
    >>> print(climb.to(MeterPerSecond))  # 7.62
"""

from __future__ import annotations

from .unit_float import UnitFloat


class MeterPerSecond(UnitFloat):
    """Speed unit: Meters per Second (internal unit for speed)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m/s"
    ALIASES = ("mps",)


class KilometersPerHour(MeterPerSecond):
    """Speed unit: Kilometers per Hour.

    Attributes:
        SCALE_TO_SI (float): 1000/3600 ≈ 0.2778, converts km/h to m/s.
        SYMBOL (str): "km/h".
    """

    SCALE_TO_SI = 1000.0 / 3600.0
    SYMBOL = "km/h"
    ALIASES = ("kph",)


class Knot(MeterPerSecond):
    """Speed unit: Knot, one nautical mile per hour."""

    SCALE_TO_SI = 1852.0 / 3600.0
    SYMBOL = "kn"
    ALIASES = ("knot", "knots", "kts")


class FootPerMinute(MeterPerSecond):
    """Speed unit: feet per minute, the usual vertical speed unit."""

    SCALE_TO_SI = 0.3048 / 60.0
    SYMBOL = "fpm"
    ALIASES = ("ft/min",)


# Type alias for all speed unit types
Speed = MeterPerSecond | KilometersPerHour | Knot | FootPerMinute
