"""Conversion between the supported linear units.

Every calculation runs in millimeters. Inputs are brought to millimeters on
the way in and results converted back to the caller's unit on the way out.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .value_objects import Unit

MM_PER_UNIT: Mapping[Unit, float] = MappingProxyType(
    {
        Unit.MM: 1.0,
        Unit.M: 1000.0,
        Unit.FT: 304.8,
        Unit.IN: 25.4,
    }
)

UNIT_LABELS: Mapping[Unit, str] = MappingProxyType(
    {
        Unit.MM: "mm",
        Unit.M: "m",
        Unit.FT: "ft",
        Unit.IN: "in",
    }
)


class UnknownUnitError(ValueError):
    """Raised when a unit tag is not in the conversion table."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit: {unit}")


def resolve_unit(unit: Unit | str) -> Unit:
    """Return the Unit for a tag such as ``"ft"``.

    Raises:
        UnknownUnitError: If the tag is not recognized.
    """
    try:
        return Unit(unit)
    except ValueError as e:
        raise UnknownUnitError(unit) from e


def to_base(value: float, unit: Unit | str) -> float:
    """Convert a value in ``unit`` to millimeters."""
    return value * MM_PER_UNIT[resolve_unit(unit)]


def from_base(value_mm: float, unit: Unit | str) -> float:
    """Convert a value in millimeters to ``unit``."""
    return value_mm / MM_PER_UNIT[resolve_unit(unit)]


def convert(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Convert a value between any two supported units."""
    source = resolve_unit(from_unit)
    target = resolve_unit(to_unit)
    if source is target:
        return value
    return from_base(to_base(value, source), target)
