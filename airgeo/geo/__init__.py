"""Geodetic positions and the geometry around them.

Components:
    LatLonAlt: Immutable latitude/longitude/altitude position
    Velocity: East/north/up velocity vector for linear extrapolation
    great_circle: Great-circle distance, course and almost-equal test

Typical Usage:
    >>> from airgeo.geo import LatLonAlt, Velocity
    >>>
    >>> here = LatLonAlt.make(37.6189, -122.3750, 13)
    >>> there = LatLonAlt.parse("(37.7749, -122.4194, 52)")
    >>> here.distance_h(there)  # meters
    >>>
    >>> v = Velocity.make_trk_gs_vs(280.0, 250.0, 1500.0)
    >>> in_two_minutes = here.linear_est_velocity(v, 120.0)
"""

from . import great_circle
from .lat_lon_alt import LatLonAlt
from .velocity import Velocity

__all__ = ["LatLonAlt", "Velocity", "great_circle"]
