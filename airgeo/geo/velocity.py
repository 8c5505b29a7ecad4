"""Three-dimensional velocity in a local east/north/up frame.

Velocity is used for short-horizon extrapolation of a LatLonAlt: scaling a
velocity by an elapsed time gives the east, north and vertical displacement
in meters.

Classes:
    Velocity: Immutable (east, north, up) vector in meters per second.

Example:
    >>> v = Velocity.make_trk_gs_vs(90.0, 480.0, 0.0)  # due east, 480 kn
    >>> v.scale(60.0).east  # meters flown east in one minute
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, hypot, sin
from typing import ClassVar

from airgeo.unit import converter
from airgeo.unit.unit_angle import Degree, to_2pi
from airgeo.unit.unit_velocity import FootPerMinute, Knot


@dataclass(frozen=True)
class Velocity:
    """Velocity vector with east, north and up components [m/s].

    Attributes:
        east: Eastward component (x).
        north: Northward component (y).
        up: Vertical component (z), positive when climbing.
    """

    east: float
    north: float
    up: float

    ZERO: ClassVar[Velocity]

    @classmethod
    def mk(cls, east: float, north: float, up: float) -> Velocity:
        """Create a velocity from components already in m/s."""
        return cls(float(east), float(north), float(up))

    @classmethod
    def make_units(
        cls,
        east: float,
        north: float,
        up: float,
        horizontal_unit: str,
        vertical_unit: str,
    ) -> Velocity:
        """Create a velocity from components in named speed units.

        Raises:
            UnknownUnitError: If a unit name is not registered.
        """
        return cls(
            converter.to_internal(horizontal_unit, east),
            converter.to_internal(horizontal_unit, north),
            converter.to_internal(vertical_unit, up),
        )

    @classmethod
    def make_trk_gs_vs(cls, track_deg: float, gs_knots: float, vs_fpm: float) -> Velocity:
        """Create a velocity from track [deg], ground speed [kn] and vertical speed [fpm]."""
        trk = Degree.to_si(track_deg)
        gs = Knot.to_si(gs_knots)
        return cls(gs * sin(trk), gs * cos(trk), FootPerMinute.to_si(vs_fpm))

    def scale(self, k: float) -> Velocity:
        """Return this vector multiplied by ``k``.

        With ``k`` an elapsed time in seconds the result is a displacement in
        meters.
        """
        return Velocity(self.east * k, self.north * k, self.up * k)

    def track(self) -> float:
        """Return the true track in radians, in [0, 2π)."""
        return to_2pi(atan2(self.east, self.north))

    def gs(self) -> float:
        """Return the ground speed [m/s]."""
        return hypot(self.east, self.north)

    def vs(self) -> float:
        """Return the vertical speed [m/s]."""
        return self.up


Velocity.ZERO = Velocity(0.0, 0.0, 0.0)
