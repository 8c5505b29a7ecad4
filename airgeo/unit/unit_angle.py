"""Angular units and angle normalization.

All angular measurements are stored in radians (the internal unit) while
supporting input and display in degrees. The module also holds the angle
wrapping helpers used when reporting latitudes, longitudes and tracks.

Classes:
    Radian: Base angular unit in radians.
    Degree: Angular unit in degrees with automatic radian conversion.

Functions:
    to_2pi: Wrap radians into [0, 2π).
    to_pi: Wrap radians into (-π, π].
    to_360: Wrap degrees into [0, 360).
    to_180: Wrap degrees into (-180, 180].

Example:
    >>> heading = Degree(45)
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 0.7854 (radians)
    >>> to_180(270.0)
    -90.0
"""

from __future__ import annotations

from math import fmod, isfinite, nan, pi

from .unit_float import UnitFloat

TWO_PI = 2 * pi


class Radian(UnitFloat):
    """Angular unit: Radian (internal unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"
    ALIASES = ("radian", "radians")


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are converted to radians for internal storage. Latitudes,
    longitudes and tracks in position text are given in degrees.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"
    ALIASES = ("deg", "degree", "degrees")


Angle = Radian | Degree  # Type alias for any angle unit


def _modulo(value: float, period: float) -> float:
    # fmod rejects infinities; they have no angle
    if not isfinite(value):
        return nan
    # fmod keeps the sign of the dividend; shift negatives into [0, period)
    r = fmod(value, period)
    if r < 0.0:
        r += period
    if r >= period:
        r = 0.0
    return r


def to_2pi(rad: float) -> float:
    """Wrap an angle in radians into [0, 2π)."""
    return _modulo(rad, TWO_PI)


def to_pi(rad: float) -> float:
    """Wrap an angle in radians into (-π, π]."""
    r = to_2pi(rad)
    if r > pi:
        return r - TWO_PI
    return r


def to_360(deg: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    return _modulo(deg, 360.0)


def to_180(deg: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    d = to_360(deg)
    if d > 180.0:
        return d - 360.0
    return d
