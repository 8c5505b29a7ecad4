"""airgeo: geodetic positions for airspace geometry.

airgeo provides the position value used throughout an airspace-geometry
toolkit, together with the small pieces it stands on.

Components:
    Positions (airgeo.geo):
        • LatLonAlt: Immutable latitude/longitude/altitude in internal units
        • Velocity: East/north/up vector for short-horizon extrapolation
        • great_circle: Distance, course and almost-equal on a spherical earth

    Measurement Framework (airgeo.unit):
        • Type-safe unit families (angle, distance, time, speed)
        • Name-based conversion ("deg", "ft", "NM", "kn", ...)

    Output (airgeo.numfmt, airgeo.config):
        • Fixed-precision number formatting
        • Read-only defaults for output precision and comparison tolerances

    Command line (airgeo.cli):
        • ``airgeo show|distance|estimate|antipode`` for quick inspection

Example:
    >>> from airgeo import LatLonAlt
    >>> p = LatLonAlt.parse("40.0, -73.0, 1000.0")
    >>> p.is_invalid()
    False
    >>> p.antipode().to_text(2)
    '(-40.00, 107.00, 1000.00)'
"""

from .config import DEFAULT_CONFIG, GeoConfig
from .geo import LatLonAlt, Velocity, great_circle
from .unit import UnknownUnitError

__version__ = "0.1.0"

__all__ = [
    "LatLonAlt",
    "Velocity",
    "great_circle",
    "GeoConfig",
    "DEFAULT_CONFIG",
    "UnknownUnitError",
]
