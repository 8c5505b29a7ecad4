"""Great-circle distance and course between geodetic positions.

Distances are computed with pyproj's geodesic solver on a sphere whose radius
makes one arc minute exactly one nautical mile. The functions take any object
exposing internal-unit ``lat`` and ``lon`` attributes in radians, which is
what LatLonAlt provides.

Functions:
    distance: Great-circle distance in meters.
    almost_equals: Horizontal closeness test with a distance tolerance.
    initial_course: Initial true course from one position to another.

Example:
    >>> from airgeo.geo import LatLonAlt, great_circle
    >>> jfk = LatLonAlt.make(40.6413, -73.7781, 13)
    >>> lhr = LatLonAlt.make(51.4700, -0.4543, 83)
    >>> great_circle.distance(jfk, lhr) / 1852  # about 2990 NM
"""

from __future__ import annotations

from math import isnan, nan, pi
from typing import Protocol

from pyproj import Geod

from airgeo.config import GeoConfig, resolve
from airgeo.unit.unit_angle import to_2pi

# One nautical mile per arc minute
SPHERICAL_EARTH_RADIUS_M = 1852.0 * 60.0 * 180.0 / pi

# Geodesic calculator on the spherical earth
_SPHERE = Geod(a=SPHERICAL_EARTH_RADIUS_M, b=SPHERICAL_EARTH_RADIUS_M)


class HasLatLon(Protocol):
    """Anything with latitude and longitude in radians."""

    @property
    def lat(self) -> float: ...

    @property
    def lon(self) -> float: ...


def _inverse(p1: HasLatLon, p2: HasLatLon) -> tuple[float, float, float]:
    az12, az21, dist = _SPHERE.inv(
        float(p1.lon),
        float(p1.lat),
        float(p2.lon),
        float(p2.lat),
        radians=True,
    )
    return az12, az21, dist


def distance(p1: HasLatLon, p2: HasLatLon) -> float:
    """Return the great-circle distance between two positions [m].

    Returns NaN when either position has a NaN coordinate.
    """
    if isnan(p1.lat) or isnan(p1.lon) or isnan(p2.lat) or isnan(p2.lon):
        return nan
    return _inverse(p1, p2)[2]


def almost_equals(
    p1: HasLatLon,
    p2: HasLatLon,
    tolerance_m: float | None = None,
    config: GeoConfig | None = None,
) -> bool:
    """Return True if the two positions are horizontally within tolerance.

    Args:
        p1: First position.
        p2: Second position.
        tolerance_m: Distance that must not be reached [m]. Defaults to the
            configured horizontal accuracy.
        config: Configuration to take the default tolerance from.
    """
    if tolerance_m is None:
        tolerance_m = resolve(config).horizontal_accuracy_m
    # NaN distances compare False
    return distance(p1, p2) < tolerance_m


def initial_course(p1: HasLatLon, p2: HasLatLon) -> float:
    """Return the initial true course from p1 to p2 in radians, in [0, 2π)."""
    return to_2pi(_inverse(p1, p2)[0])
