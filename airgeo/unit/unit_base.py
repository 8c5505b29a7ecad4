"""Base unit system for named physical quantities.

This module provides the Unit class that every unit type in airgeo derives
from. It implements the unit family system using automatic ROOT class
assignment and keeps a registry of unit names, so a unit can be looked up
from the short text names that appear in position strings and
configuration files ("deg", "ft", "NM", ...).

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Registry: Every unit declaring a SYMBOL or ALIASES is registered by name
- Type Safety: Operations are restricted to compatible unit families

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for length units
    >>> class Foot(Length):
    ...     SYMBOL = "ft"  # Registered as "ft", ROOT = Length
    >>> Unit.registered("ft") is Foot
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float

_REGISTRY: dict[str, type[Unit]] = {}


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol used for display and lookup.
        ALIASES (ClassVar[tuple[str, ...]]): Extra names accepted on lookup.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    ALIASES: ClassVar[tuple[str, ...]] = ()
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class and register the unit names of a subclass.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself. Names are only registered when the class declares its
        own SYMBOL or ALIASES, so intermediate base classes stay anonymous.

        Raises:
            ValueError: If a name is already taken by another unit.
        """
        super().__init_subclass__(**kwargs)
        cls._assign_root()

        names = []
        if "SYMBOL" in cls.__dict__ and cls.SYMBOL:
            names.append(cls.SYMBOL)
        names.extend(cls.__dict__.get("ALIASES", ()))
        for name in names:
            existing = _REGISTRY.get(name)
            if existing is not None and existing is not cls:
                msg = f"Unit name {name!r} already registered to {existing.__name__}"
                raise ValueError(msg)
            _REGISTRY[name] = cls

    @classmethod
    def _assign_root(cls):
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @staticmethod
    def registered(name: str) -> type[Unit] | None:
        """Return the unit class registered under ``name``, if any."""
        return _REGISTRY.get(name)

    @staticmethod
    def registered_names() -> list[str]:
        """Return all registered unit names, sorted."""
        return sorted(_REGISTRY)

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check if two unit types belong to the same physical quantity family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different physical quantity families.
        """
        if cls.ROOT is not unit_type.ROOT:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {unit_type.ROOT.__name__}"
            raise TypeError(msg)
