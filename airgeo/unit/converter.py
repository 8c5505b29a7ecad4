"""Name-based conversion between units and internal values.

Position strings, configuration files and the command line name their units
as short text ("deg", "ft", "NM", "kn"). This module maps those names onto
the registered unit classes and converts plain floats to and from internal
units (radians, meters, seconds, meters per second).

Functions:
    lookup: Find the unit class for a name.
    to_internal: Convert a value given in a named unit to internal units.
    from_internal: Convert an internal value to a named unit.
    convert: Convert a value between two named units of one family.
    clean_unit_name: Normalize a unit token read from text.

Example:
    >>> to_internal(DEG, 180.0)  # π radians
    >>> from_internal(FT, 304.8)  # 1000 feet
    >>> clean_unit_name(" [NM] ")
    'NM'
"""

from __future__ import annotations

from .unit_base import Number, Unit
from .unit_float import UnitFloat

DEG = "deg"
FT = "ft"


class UnknownUnitError(ValueError):
    """Raised when a unit name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown unit: {name!r}")
        self.name = name


def lookup(name: str) -> type[UnitFloat]:
    """Return the unit class registered under ``name``.

    Raises:
        UnknownUnitError: If no unit has that name.
    """
    unit = Unit.registered(name)
    if unit is None or not issubclass(unit, UnitFloat):
        raise UnknownUnitError(name)
    return unit


def to_internal(name: str, value: Number) -> float:
    """Convert ``value`` given in unit ``name`` to internal units."""
    return lookup(name).to_si(value)


def from_internal(name: str, value: Number) -> float:
    """Convert an internal-unit ``value`` to unit ``name``."""
    return lookup(name).si_to(value)


def convert(value: Number, from_name: str, to_name: str) -> float:
    """Convert ``value`` between two units of the same family.

    Raises:
        UnknownUnitError: If either name is unknown.
        TypeError: If the units measure different quantities.
    """
    return lookup(from_name)(value).to(lookup(to_name))


def clean_unit_name(text: str) -> str:
    """Strip whitespace and enclosing square brackets from a unit token.

    ``"[deg]"`` and ``" deg "`` both become ``"deg"``. The result is not
    checked against the registry.
    """
    name = text.strip()
    if name.startswith("["):
        name = name[1:]
    if name.endswith("]"):
        name = name[:-1]
    return name.strip()
