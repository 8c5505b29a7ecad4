"""Float-based units with automatic internal (SI) conversion.

This module provides the UnitFloat class, the foundation for all numeric
unit types. A UnitFloat is a Python float holding its value in the family's
internal unit (radians, meters, seconds, meters per second) and remembering
which unit it was created in for display.

Classes:
    UnitFloat: Base class for all float-based units with automatic SI conversion.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Foot(Meter):
    ...     SCALE_TO_SI = 0.3048
    ...     SYMBOL = "ft"
    ...
    >>> alt = Foot(1000)
    >>> print(alt)  # "1000.0 ft"
    >>> print(float(alt))  # 304.8 (meters)
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for type-safe unit values stored in internal units.

    Operations are only allowed between compatible unit types (same 'root'
    family).

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to internal units.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value in the unit's own scale."""
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from a value already in internal units."""
        return float.__new__(cls, si_value)

    @classmethod
    def to_si(cls, value: Number) -> float:
        """Convert a plain number in this unit's scale to internal units."""
        return float(value) * cls.SCALE_TO_SI

    @classmethod
    def si_to(cls, si_value: Number) -> float:
        """Convert a plain number in internal units to this unit's scale."""
        return float(si_value) / cls.SCALE_TO_SI

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            TypeError: If the target unit is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Multiply by a plain scalar.

        Raises:
            TypeError: If k is a unit value or not numeric.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"Cannot multiply {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"Cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Equality between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return the value and symbol in the unit's own scale (e.g. "90.0 °")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return the native value with its internal equivalent (e.g. "90 ° (= 1.5708 SI)")."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
