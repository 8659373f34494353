"""Value objects for the video wall domain.

All linear quantities carried by these objects are in millimeters unless the
attribute says otherwise. ``ConfigResult`` is the exception: its width, height
and diagonal are already expressed in the unit the caller asked for.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Unit(str, Enum):
    """Linear units accepted for inputs and results."""

    MM = "mm"
    M = "m"
    FT = "ft"
    IN = "in"


class PrimaryDimension(str, Enum):
    """Dimension paired with the aspect ratio in an aspect-ratio search."""

    HEIGHT = "height"
    WIDTH = "width"
    DIAGONAL = "diagonal"


class ResultLabel(str, Enum):
    """Which side of the target a configuration falls on."""

    LOWER = "lower"
    UPPER = "upper"


class ErrorType(str, Enum):
    """Categories of calculation failure."""

    UNKNOWN_CABINET_TYPE = "unknown_cabinet_type"
    UNKNOWN_UNIT = "unknown_unit"
    INVALID_MAGNITUDE = "invalid_magnitude"
    GEOMETRIC_INCONSISTENCY = "geometric_inconsistency"
    UNSUPPORTED_COMBINATION = "unsupported_combination"


@dataclass(frozen=True)
class CabinetType:
    """A physical cabinet size from the catalog."""

    id: str
    label: str
    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise ValueError("Cabinet dimensions must be positive")


@dataclass(frozen=True)
class GridCandidate:
    """A columns x rows arrangement of cabinets."""

    cols: int
    rows: int

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError("A grid needs at least one column and one row")


@dataclass(frozen=True)
class ConfigResult:
    """A sized grid configuration, ready to report.

    Width, height and diagonal are in the requested unit and, like the
    aspect ratio, rounded to four decimal places.
    """

    label: ResultLabel
    cols: int
    rows: int
    width: float
    height: float
    diagonal: float
    aspect_ratio: float

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError("A grid needs at least one column and one row")

    @property
    def total_cabinets(self) -> int:
        """Number of cabinets in the grid."""
        return self.cols * self.rows

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the keys of the HTTP contract."""
        return {
            "label": self.label.value,
            "cols": self.cols,
            "rows": self.rows,
            "totalCabinets": self.total_cabinets,
            "width": self.width,
            "height": self.height,
            "diagonal": self.diagonal,
            "aspectRatio": self.aspect_ratio,
        }


@dataclass(frozen=True)
class SearchResult:
    """Best configuration on each side of the target.

    Either side is None when the bounded search space holds no candidate
    on that side.
    """

    lower: ConfigResult | None
    upper: ConfigResult | None


@dataclass(frozen=True)
class CalculationError:
    """A calculation that was rejected before producing any configuration."""

    error_type: ErrorType
    message: str


@dataclass(frozen=True)
class AspectRatioTarget:
    """Target shape for the aspect-ratio search."""

    aspect_ratio: float
    primary: PrimaryDimension
    primary_mm: float

    def __post_init__(self) -> None:
        if self.aspect_ratio <= 0 or self.primary_mm <= 0:
            raise ValueError("Aspect ratio and primary dimension must be positive")


@dataclass(frozen=True)
class DimensionTarget:
    """Target shape for the diagonal search: explicit width and height."""

    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise ValueError("Target width and height must be positive")

    @property
    def diagonal_mm(self) -> float:
        return math.hypot(self.width_mm, self.height_mm)


ResolvedTarget = Union[AspectRatioTarget, DimensionTarget]
