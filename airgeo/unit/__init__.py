"""Unit system for type-safe physical quantities and named conversions.

Values are stored in internal units (radians, meters, seconds, meters per
second). Units of one family can be combined, mixing families raises
TypeError, and every unit is reachable by its text name through
``airgeo.unit.converter``.

Architecture:
    - unit_base: Unit class with family management and the name registry
    - unit_float: Float-based units with automatic conversion
    - unit_angle: Radian, Degree and angle wrapping helpers
    - unit_distance: Meter, Kilometer, Foot, NauticalMile, StatuteMile
    - unit_time: Second, Minute, Hour
    - unit_velocity: MeterPerSecond, KilometersPerHour, Knot, FootPerMinute
    - converter: lookup / to_internal / from_internal by unit name

Example:
    >>> from airgeo.unit import Foot, Meter, converter
    >>> float(Foot(1000))  # 304.8 meters
    >>> Foot(1000).to(Meter)
    >>> converter.to_internal("NM", 1.0)  # 1852.0
"""

from . import converter
from .converter import DEG, FT, UnknownUnitError, clean_unit_name, from_internal, to_internal
from .unit_angle import Angle, Degree, Radian, to_2pi, to_180, to_360, to_pi
from .unit_base import Unit
from .unit_distance import Foot, Kilometer, Length, Meter, NauticalMile, StatuteMile
from .unit_float import UnitFloat
from .unit_time import Hour, Minute, Second, Time
from .unit_velocity import FootPerMinute, KilometersPerHour, Knot, MeterPerSecond, Speed

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    "to_2pi",
    "to_pi",
    "to_360",
    "to_180",
    # Distance units
    "Meter",
    "Kilometer",
    "Foot",
    "NauticalMile",
    "StatuteMile",
    "Length",
    # Time units
    "Second",
    "Minute",
    "Hour",
    "Time",
    # Speed units
    "MeterPerSecond",
    "KilometersPerHour",
    "Knot",
    "FootPerMinute",
    "Speed",
    # Name-based conversion
    "converter",
    "DEG",
    "FT",
    "UnknownUnitError",
    "to_internal",
    "from_internal",
    "clean_unit_name",
]
