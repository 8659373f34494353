"""Domain layer: the pure configuration search core.

Nothing in this package logs, performs I/O or keeps state between calls.
"""

from .aspect_ratios import ASPECT_RATIO_PRESETS, AspectRatioPreset, parse_aspect_ratio
from .catalog import CABINET_TYPES, get_cabinet_type, list_cabinet_types
from .dispatcher import PARAMETER_LABELS, TargetInputs, calculate, resolve_target
from .services import (
    EPSILON,
    HARD_MAX,
    AspectRatioSearch,
    DiagonalSearch,
    SearchStrategy,
    SearchStrategyFactory,
    axis_limit,
    build_result,
    round4,
)
from .units import (
    MM_PER_UNIT,
    UNIT_LABELS,
    UnknownUnitError,
    convert,
    from_base,
    resolve_unit,
    to_base,
)
from .value_objects import (
    AspectRatioTarget,
    CabinetType,
    CalculationError,
    ConfigResult,
    DimensionTarget,
    ErrorType,
    GridCandidate,
    PrimaryDimension,
    ResolvedTarget,
    ResultLabel,
    SearchResult,
    Unit,
)

__all__ = [
    # Value objects
    "AspectRatioTarget",
    "CabinetType",
    "CalculationError",
    "ConfigResult",
    "DimensionTarget",
    "ErrorType",
    "GridCandidate",
    "PrimaryDimension",
    "ResolvedTarget",
    "ResultLabel",
    "SearchResult",
    "Unit",
    # Units
    "MM_PER_UNIT",
    "UNIT_LABELS",
    "UnknownUnitError",
    "convert",
    "from_base",
    "resolve_unit",
    "to_base",
    # Catalog and presets
    "ASPECT_RATIO_PRESETS",
    "AspectRatioPreset",
    "CABINET_TYPES",
    "get_cabinet_type",
    "list_cabinet_types",
    "parse_aspect_ratio",
    # Searches
    "EPSILON",
    "HARD_MAX",
    "AspectRatioSearch",
    "DiagonalSearch",
    "SearchStrategy",
    "SearchStrategyFactory",
    "axis_limit",
    "build_result",
    "round4",
    # Dispatch
    "PARAMETER_LABELS",
    "TargetInputs",
    "calculate",
    "resolve_target",
]
