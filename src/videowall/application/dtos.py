"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from videowall.domain import (
    CABINET_TYPES,
    PARAMETER_LABELS,
    ConfigResult,
    TargetInputs,
    Unit,
)


@dataclass
class CalculationInput:
    """Input DTO for a wall size calculation."""

    cabinet_type: str
    unit: str = "mm"
    aspect_ratio: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None

    def supplied_parameters(self) -> list[str]:
        """Names of the target parameters that were given."""
        return [name for name in PARAMETER_LABELS if getattr(self, name) is not None]

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.cabinet_type not in CABINET_TYPES:
            errors.append(f"Cabinet type must be one of: {', '.join(CABINET_TYPES)}")
        valid_units = [u.value for u in Unit]
        if self.unit not in valid_units:
            errors.append(f"Unit must be one of: {', '.join(valid_units)}")

        supplied = self.supplied_parameters()
        if len(supplied) != 2:
            errors.append(
                f"Exactly 2 input parameters are required. Got: {len(supplied)}"
            )
        for name in supplied:
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{PARAMETER_LABELS[name]} must be a positive number")
        return errors

    def to_target_inputs(self) -> TargetInputs:
        """Convert to the domain TargetInputs value object."""
        return TargetInputs(
            aspect_ratio=self.aspect_ratio,
            height=self.height,
            width=self.width,
            diagonal=self.diagonal,
        )


@dataclass
class CalculationOutput:
    """Output DTO for a wall size calculation.

    Attributes:
        lower: Best configuration at or below the target, if any.
        upper: Best configuration above the target, if any.
        unit: Unit the configuration dimensions are expressed in.
        errors: Error messages if the calculation was rejected.
        error_type: "validation" for rejected input, otherwise the domain
            ErrorType value. None on success.
    """

    lower: ConfigResult | None = None
    upper: ConfigResult | None = None
    unit: str = "mm"
    errors: list[str] = field(default_factory=list)
    error_type: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the calculation succeeded."""
        return len(self.errors) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the keys of the HTTP contract."""
        if not self.is_valid:
            return {"error": "; ".join(self.errors), "error_type": self.error_type}
        return {
            "lower": self.lower.to_dict() if self.lower else None,
            "upper": self.upper.to_dict() if self.upper else None,
        }
