"""Distance and altitude units.

All lengths are stored in meters (the internal unit). Altitudes are usually
entered in feet and horizontal ranges in nautical miles, so both are part of
the family next to the metric units.

Classes:
    Meter: Base distance unit in meters.
    Kilometer: 1000 meters.
    Foot: International foot, 0.3048 meters.
    NauticalMile: 1852 meters.
    StatuteMile: 1609.344 meters.

Example:
    >>> cruise = Foot(35000)
    >>> print(float(cruise))  # 10668.0 (meters)
    >>> print(NauticalMile(1).to(Meter))  # 1852.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (internal unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"
    ALIASES = ("meter", "meters")


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Foot(Meter):
    """Distance unit: international foot, the usual altitude unit."""

    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"
    ALIASES = ("foot", "feet")


class NauticalMile(Meter):
    """Distance unit: nautical mile, one arc minute of a great circle."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"
    ALIASES = ("nmi", "nm")


class StatuteMile(Meter):
    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


Length = Meter | Kilometer | Foot | NauticalMile | StatuteMile  # Type alias for any length unit
