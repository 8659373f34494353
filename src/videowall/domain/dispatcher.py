"""Routing of a two-parameter request to the matching search.

The caller supplies exactly two of aspect ratio, height, width and diagonal.
This module checks them, converts linear values to millimeters, resolves
them into one of the two canonical target shapes and hands the target to
the search strategy for that shape. Every rejection is returned as a
CalculationError value; nothing here raises for bad input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .catalog import CABINET_TYPES, get_cabinet_type
from .services import SearchStrategyFactory
from .units import UnknownUnitError, resolve_unit, to_base
from .value_objects import (
    AspectRatioTarget,
    CalculationError,
    DimensionTarget,
    ErrorType,
    PrimaryDimension,
    ResolvedTarget,
    SearchResult,
)

__all__ = [
    "PARAMETER_LABELS",
    "TargetInputs",
    "calculate",
    "resolve_target",
]

PARAMETER_LABELS: dict[str, str] = {
    "aspect_ratio": "Aspect ratio",
    "height": "Height",
    "width": "Width",
    "diagonal": "Diagonal",
}

_CAMEL_CASE_KEYS = {"aspectRatio": "aspect_ratio"}


@dataclass(frozen=True)
class TargetInputs:
    """The raw target parameters; exactly two are expected to be set.

    Height, width and diagonal are in whatever unit accompanies the request
    until ``in_base_units`` is applied.
    """

    aspect_ratio: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TargetInputs":
        """Build from a mapping using snake_case or camelCase keys.

        Unrecognized keys are ignored.
        """
        values: dict[str, float | None] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in PARAMETER_LABELS:
                values[name] = None if value is None else float(value)
        return cls(**values)

    def supplied(self) -> tuple[str, ...]:
        """Names of the parameters that were given, in declaration order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def in_base_units(self, unit: str) -> "TargetInputs":
        """Return a copy with height, width and diagonal in millimeters."""
        return TargetInputs(
            aspect_ratio=self.aspect_ratio,
            height=None if self.height is None else to_base(self.height, unit),
            width=None if self.width is None else to_base(self.width, unit),
            diagonal=None if self.diagonal is None else to_base(self.diagonal, unit),
        )


def calculate(
    cabinet_type: str,
    inputs: TargetInputs | Mapping[str, Any],
    unit: str,
    strategy_factory: SearchStrategyFactory | None = None,
) -> SearchResult | CalculationError:
    """Find the best lower and upper wall configurations.

    Args:
        cabinet_type: Catalog id of the cabinet type ("16:9" or "1:1").
        inputs: Exactly two of aspect_ratio, height, width, diagonal.
        unit: Unit of the linear inputs and of the reported results.
        strategy_factory: Optional factory override, mainly for tests.

    Returns:
        SearchResult with the best lower and upper configurations, or a
        CalculationError describing why the request was rejected.
    """
    cabinet = get_cabinet_type(cabinet_type)
    if cabinet is None:
        return CalculationError(
            ErrorType.UNKNOWN_CABINET_TYPE,
            f"Unknown cabinet type: {cabinet_type}. "
            f"Expected one of: {', '.join(CABINET_TYPES)}",
        )

    try:
        resolved_unit = resolve_unit(unit)
    except UnknownUnitError as e:
        return CalculationError(ErrorType.UNKNOWN_UNIT, str(e))

    if not isinstance(inputs, TargetInputs):
        try:
            inputs = TargetInputs.from_mapping(inputs)
        except (TypeError, ValueError) as e:
            return CalculationError(
                ErrorType.INVALID_MAGNITUDE, f"Input parameters must be numbers: {e}"
            )

    target = resolve_target(inputs.in_base_units(resolved_unit))
    if isinstance(target, CalculationError):
        return target

    strategy = (strategy_factory or SearchStrategyFactory()).create_strategy(target)
    return strategy.search(target, cabinet, resolved_unit)


def resolve_target(inputs: TargetInputs) -> ResolvedTarget | CalculationError:
    """Resolve two supplied parameters (linear ones in mm) into a target.

    Routes, first match wins:
        aspect_ratio + height    -> AspectRatioTarget(primary=height)
        aspect_ratio + width     -> AspectRatioTarget(primary=width)
        aspect_ratio + diagonal  -> AspectRatioTarget(primary=diagonal)
        height + diagonal        -> DimensionTarget(width from Pythagoras)
        width + diagonal         -> DimensionTarget(height from Pythagoras)
        height + width           -> DimensionTarget(as given)
    """
    supplied = inputs.supplied()
    if len(supplied) != 2:
        return _unsupported(supplied)

    non_positive = [
        name for name in supplied if not _is_positive_number(getattr(inputs, name))
    ]
    if non_positive:
        return CalculationError(
            ErrorType.INVALID_MAGNITUDE, _must_be_positive_message(non_positive)
        )

    ratio = inputs.aspect_ratio
    height = inputs.height
    width = inputs.width
    diagonal = inputs.diagonal

    if ratio is not None:
        if height is not None:
            return AspectRatioTarget(ratio, PrimaryDimension.HEIGHT, height)
        if width is not None:
            return AspectRatioTarget(ratio, PrimaryDimension.WIDTH, width)
        if diagonal is not None:
            return AspectRatioTarget(ratio, PrimaryDimension.DIAGONAL, diagonal)

    if height is not None and diagonal is not None:
        if diagonal <= height:
            return CalculationError(
                ErrorType.GEOMETRIC_INCONSISTENCY, "Diagonal must exceed height."
            )
        return DimensionTarget(width_mm=_other_leg(diagonal, height), height_mm=height)

    if width is not None and diagonal is not None:
        if diagonal <= width:
            return CalculationError(
                ErrorType.GEOMETRIC_INCONSISTENCY, "Diagonal must exceed width."
            )
        return DimensionTarget(width_mm=width, height_mm=_other_leg(diagonal, width))

    if height is not None and width is not None:
        return DimensionTarget(width_mm=width, height_mm=height)

    return _unsupported(supplied)


def _is_positive_number(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _other_leg(hypotenuse: float, leg: float) -> float:
    """Remaining side of a right triangle; scaled so huge sides stay finite."""
    ratio = leg / hypotenuse
    return hypotenuse * math.sqrt((1.0 - ratio) * (1.0 + ratio))


def _must_be_positive_message(names: list[str]) -> str:
    labels = [PARAMETER_LABELS[name] for name in names]
    subject = " and ".join([labels[0]] + [label.lower() for label in labels[1:]])
    return f"{subject} must be positive."


def _unsupported(supplied: tuple[str, ...]) -> CalculationError:
    given = ", ".join(supplied) if supplied else "none"
    return CalculationError(
        ErrorType.UNSUPPORTED_COMBINATION,
        "Unsupported input combination: expected exactly two of "
        f"aspect_ratio, height, width, diagonal (got {given}).",
    )
