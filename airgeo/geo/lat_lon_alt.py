"""Geodetic position: latitude, longitude and altitude.

LatLonAlt is the basic spatial value of airgeo. It is an immutable triple
kept in internal units (radians, radians, meters); the factories and the
accessors convert to and from the units people use (degrees and feet, or any
registered unit name) only at the boundary.

Two distinguished values are provided as class attributes:

    LatLonAlt.ZERO      (0, 0, 0)
    LatLonAlt.INVALID   (NaN, NaN, NaN)

Equality follows IEEE float semantics field by field with no tolerance, so
``LatLonAlt.INVALID == LatLonAlt.INVALID`` is False. Use ``is_invalid()`` to
detect the invalid value and ``almost_equals()`` for tolerant comparisons.

Text form is ``"(lat, lon, alt)"`` in degrees, degrees and feet; ``parse()``
reads it back, as well as the unit-annotated six-token form
``"lat unit, lon unit, alt unit"``. Parsing never raises: anything it cannot
read becomes ``LatLonAlt.INVALID``.

Example:
    >>> p = LatLonAlt.make(40.0, -73.0, 1000.0)
    >>> p.latitude(), p.longitude(), p.altitude()  # 40.0, -73.0, 1000.0
    >>> str(p)
    '(40.000000, -73.000000, 1000.000000)'
    >>> LatLonAlt.parse("40 deg, -73 deg, 304.8 m").almost_equals(p)
    True
    >>> LatLonAlt.parse("not a position").is_invalid()
    True
"""

from __future__ import annotations

import logging
import re
import struct
from dataclasses import dataclass
from math import copysign, cos, isnan, nan, pi
from typing import ClassVar

from airgeo.config import GeoConfig, resolve
from airgeo.numfmt import fm_nz, fm_precision
from airgeo.unit import converter
from airgeo.unit.converter import DEG, FT
from airgeo.unit.unit_angle import to_180, to_pi

from . import great_circle
from .velocity import Velocity

logger = logging.getLogger(__name__)

# Fields are separated by whitespace, commas or the parentheses of the text form
_SEPARATORS = re.compile(r"[\s,()]+")


def _same_bits(a: float, b: float) -> bool:
    # 0.0 and -0.0 differ; NaN never matches
    return a == b and copysign(1.0, a) == copysign(1.0, b)


@dataclass(frozen=True, eq=False)
class LatLonAlt:
    """Immutable latitude/longitude/altitude position in internal units.

    Build instances with the class-method factories rather than the
    initializer: ``mk`` for internal units, ``make`` for degrees and feet,
    ``make_units`` for named units and ``parse`` for text.

    Attributes:
        lat: Latitude [rad], north positive, not range-restricted.
        lon: Longitude [rad], east positive, not range-restricted.
        alt: Altitude [m].
    """

    lat: float
    lon: float
    alt: float

    ZERO: ClassVar[LatLonAlt]
    INVALID: ClassVar[LatLonAlt]

    # -------------------------------- Construction --------------------------------
    @classmethod
    def mk(cls, lat: float, lon: float, alt: float) -> LatLonAlt:
        """Create a position from internal-unit values, without validation.

        Args:
            lat: Latitude [rad].
            lon: Longitude [rad].
            alt: Altitude [m].
        """
        return cls(lat, lon, alt)

    @classmethod
    def make(cls, lat: float, lon: float, alt: float) -> LatLonAlt:
        """Create a position from degrees north, degrees east and feet."""
        return cls(
            converter.to_internal(DEG, lat),
            converter.to_internal(DEG, lon),
            converter.to_internal(FT, alt),
        )

    @classmethod
    def make_units(
        cls,
        lat: float,
        lat_unit: str,
        lon: float,
        lon_unit: str,
        alt: float,
        alt_unit: str,
    ) -> LatLonAlt:
        """Create a position with a named unit for each coordinate.

        Example:
            >>> LatLonAlt.make_units(0.7, "rad", -1.27, "rad", 10, "km")

        Raises:
            UnknownUnitError: If a unit name is not registered.
        """
        return cls(
            converter.to_internal(lat_unit, lat),
            converter.to_internal(lon_unit, lon),
            converter.to_internal(alt_unit, alt),
        )

    def mk_alt(self, alt: float) -> LatLonAlt:
        """Return a copy with the altitude replaced [m]."""
        return LatLonAlt(self.lat, self.lon, alt)

    def make_alt(self, alt: float) -> LatLonAlt:
        """Return a copy with the altitude replaced [ft]."""
        return LatLonAlt(self.lat, self.lon, converter.to_internal(FT, alt))

    def zero_alt(self) -> LatLonAlt:
        """Return a copy with zero altitude, e.g. for horizontal projections."""
        return LatLonAlt(self.lat, self.lon, 0.0)

    # -------------------------------- Equality --------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatLonAlt):
            return NotImplemented
        return (
            _same_bits(self.lat, other.lat)
            and _same_bits(self.lon, other.lon)
            and _same_bits(self.alt, other.alt)
        )

    def __hash__(self) -> int:
        return hash(struct.pack("<3d", self.lat, self.lon, self.alt))

    def almost_equals(
        self,
        other: LatLonAlt,
        horizontal_m: float | None = None,
        vertical_m: float | None = None,
        config: GeoConfig | None = None,
    ) -> bool:
        """Return True if ``other`` is within tolerance of this position.

        The horizontal part uses the great-circle distance, the vertical part
        the absolute altitude difference.

        Args:
            other: Position to compare with.
            horizontal_m: Horizontal tolerance [m]; configured default if None.
            vertical_m: Vertical tolerance [m]; configured default if None.
            config: Configuration supplying the defaults.
        """
        cfg = resolve(config)
        if vertical_m is None:
            vertical_m = cfg.vertical_accuracy_m
        return great_circle.almost_equals(self, other, horizontal_m, cfg) and abs(
            self.alt - other.alt
        ) < vertical_m

    def almost_equals_horizontal(self, other: LatLonAlt, config: GeoConfig | None = None) -> bool:
        """Return True if ``other`` is horizontally within the default tolerance."""
        return great_circle.almost_equals(self, other, config=config)

    # -------------------------------- Accessors --------------------------------
    def latitude(self) -> float:
        """Return latitude in degrees north, in (-180, 180]."""
        return to_180(converter.from_internal(DEG, self.lat))

    def longitude(self) -> float:
        """Return longitude in degrees east, in (-180, 180]."""
        return to_180(converter.from_internal(DEG, self.lon))

    def altitude(self) -> float:
        """Return altitude in feet."""
        return converter.from_internal(FT, self.alt)

    def is_invalid(self) -> bool:
        """Return True if any coordinate is NaN."""
        return isnan(self.lat) or isnan(self.lon) or isnan(self.alt)

    # -------------------------------- Geometry --------------------------------
    def distance_h(self, other: LatLonAlt) -> float:
        """Return the great-circle distance to ``other`` [m]."""
        return great_circle.distance(self, other)

    def antipode(self) -> LatLonAlt:
        """Return the antipodal point, with the longitude wrapped into (-π, π].

        This is a purely algebraic transform; the altitude is kept.
        """
        return LatLonAlt(-self.lat, to_pi(self.lon + pi), self.alt)

    def linear_est(self, dn: float, de: float) -> LatLonAlt:
        """Offset this position by ``dn`` meters north and ``de`` meters east.

        A fast flat-earth estimate that is only good for short distances.
        The longitude step grows without bound towards the poles.
        """
        r = great_circle.SPHERICAL_EARTH_RADIUS_M
        n_lat = self.lat + dn / r
        n_lon = self.lon + de / (r * cos(self.lat))
        return LatLonAlt(n_lat, n_lon, self.alt)

    def linear_est_velocity(self, v: Velocity, dt: float) -> LatLonAlt:
        """Return the position reached by flying ``v`` for ``dt`` seconds.

        Same flat-earth estimate as linear_est, with the vertical component
        added to the altitude.
        """
        d = v.scale(dt)
        return self.linear_est(d.north, d.east).mk_alt(self.alt + d.up)

    # -------------------------------- Text --------------------------------
    def to_text(self, precision: int | None = None, config: GeoConfig | None = None) -> str:
        """Return ``"(lat, lon, alt)"`` in degrees, degrees and feet."""
        return "(" + ", ".join(self.to_text_list(precision, config)) + ")"

    def to_text_list(self, precision: int | None = None, config: GeoConfig | None = None) -> list[str]:
        """Return latitude, longitude and altitude as three formatted strings."""
        if precision is None:
            precision = resolve(config).output_precision
        return [
            fm_precision(self.latitude(), precision),
            fm_precision(self.longitude(), precision),
            fm_precision(self.altitude(), precision),
        ]

    def to_text_units(
        self,
        lat_unit: str = DEG,
        lon_unit: str = DEG,
        alt_unit: str = FT,
        precision: int | None = None,
        config: GeoConfig | None = None,
    ) -> str:
        """Return ``"lat, lon, alt"`` with each value in the named unit.

        Latitude and longitude are cleared of negative zero one digit beyond
        ``precision``, so values just below zero can still print as ``-0.0``.

        Raises:
            UnknownUnitError: If a unit name is not registered.
        """
        if precision is None:
            precision = resolve(config).output_precision
        lat = fm_nz(converter.from_internal(lat_unit, self.lat), precision + 1)
        lon = fm_nz(converter.from_internal(lon_unit, self.lon), precision + 1)
        alt = converter.from_internal(alt_unit, self.alt)
        return ", ".join(fm_precision(v, precision) for v in (lat, lon, alt))

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def parse(cls, text: str) -> LatLonAlt:
        """Read a position from text; return INVALID if that is not possible.

        Fields are separated by whitespace, commas or parentheses. Three
        fields are bare degrees, degrees and feet. Six fields are value/unit
        pairs, for example ``"40 deg, -73 deg, 300 m"`` or
        ``"0.7 [rad] -1.27 [rad] 10 [km]"``.
        """
        fields = _SEPARATORS.split(text)
        if fields and fields[0] == "":
            fields = fields[1:]
        if fields and fields[-1] == "":
            fields = fields[:-1]

        try:
            if len(fields) == 3:
                return cls.make(float(fields[0]), float(fields[1]), float(fields[2]))
            if len(fields) == 6:
                return cls.mk(
                    converter.to_internal(converter.clean_unit_name(fields[1]), float(fields[0])),
                    converter.to_internal(converter.clean_unit_name(fields[3]), float(fields[2])),
                    converter.to_internal(converter.clean_unit_name(fields[5]), float(fields[4])),
                )
        except ValueError as e:
            logger.debug("Cannot parse %r as a position: %s", text, e)
            return cls.INVALID

        logger.debug("Cannot parse %r as a position: %d fields", text, len(fields))
        return cls.INVALID


LatLonAlt.ZERO = LatLonAlt(0.0, 0.0, 0.0)
LatLonAlt.INVALID = LatLonAlt(nan, nan, nan)
