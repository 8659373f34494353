"""Domain services for sizing a video wall."""

from .aspect_ratio_search import AspectRatioSearch
from .diagonal_search import DiagonalSearch
from .grid_search import (
    AXIS_MARGIN,
    EPSILON,
    HARD_MAX,
    CandidateGrid,
    SearchStrategy,
    axis_limit,
    select_best,
    to_search_result,
)
from .result_builder import build_result, round4
from .strategy_factory import SearchStrategyFactory

__all__ = [
    # Strategies
    "AspectRatioSearch",
    "DiagonalSearch",
    "SearchStrategy",
    "SearchStrategyFactory",
    # Search bounds
    "AXIS_MARGIN",
    "EPSILON",
    "HARD_MAX",
    "CandidateGrid",
    "axis_limit",
    "select_best",
    "to_search_result",
    # Results
    "build_result",
    "round4",
]
