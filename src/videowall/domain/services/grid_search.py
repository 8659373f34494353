"""Shared pieces of the configuration searches.

Both searches evaluate every (rows, cols) grid inside a per-axis limit,
split the candidates into a lower side (governing metric within EPSILON of
the target or below it) and an upper side, and keep the lowest-scoring
candidate on each side. Candidates are evaluated as numpy arrays indexed
``[rows - 1, cols - 1]``; ``argmin`` returns the first minimum in row-major
order, so ties go to the grid met first when walking rows in the outer loop
and columns in the inner loop.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from ..value_objects import (
    CabinetType,
    GridCandidate,
    ResolvedTarget,
    ResultLabel,
    SearchResult,
    Unit,
)
from .result_builder import build_result

__all__ = [
    "AXIS_MARGIN",
    "CandidateGrid",
    "EPSILON",
    "HARD_MAX",
    "SearchStrategy",
    "axis_limit",
    "select_best",
    "to_search_result",
]

# Per-axis cap: 500 x 500 keeps a search at 250k grids at most
HARD_MAX = 500

# Steps explored past the target on each axis
AXIS_MARGIN = 10

# Absolute tolerance (mm) for counting a near-exact match as lower
EPSILON = 0.001


def axis_limit(target_extent_mm: float, cabinet_extent_mm: float) -> int:
    """Number of cabinets to explore along one axis.

    Enough cabinets to cover the target extent plus AXIS_MARGIN more,
    never more than HARD_MAX. An extent too large to represent searches
    the full HARD_MAX.
    """
    cabinets = target_extent_mm / cabinet_extent_mm
    if not math.isfinite(cabinets):
        return HARD_MAX
    return min(HARD_MAX, math.ceil(cabinets) + AXIS_MARGIN)


@dataclass(frozen=True)
class CandidateGrid:
    """All grids from 1 x 1 up to max_cols x max_rows, evaluated at once."""

    cols: np.ndarray
    rows: np.ndarray
    width_mm: np.ndarray
    height_mm: np.ndarray

    @classmethod
    def enumerate(cls, cabinet: CabinetType, max_rows: int, max_cols: int) -> "CandidateGrid":
        rows, cols = np.meshgrid(
            np.arange(1, max_rows + 1),
            np.arange(1, max_cols + 1),
            indexing="ij",
        )
        return cls(
            cols=cols,
            rows=rows,
            width_mm=cols * cabinet.width_mm,
            height_mm=rows * cabinet.height_mm,
        )

    @property
    def diagonal_mm(self) -> np.ndarray:
        return np.sqrt(self.width_mm * self.width_mm + self.height_mm * self.height_mm)

    @property
    def aspect_ratio(self) -> np.ndarray:
        return self.width_mm / self.height_mm

    def candidate_at(self, flat_index: int) -> GridCandidate:
        index = np.unravel_index(flat_index, self.cols.shape)
        return GridCandidate(cols=int(self.cols[index]), rows=int(self.rows[index]))


def select_best(
    grid: CandidateGrid,
    scores: np.ndarray,
    lower_mask: np.ndarray,
) -> tuple[GridCandidate | None, GridCandidate | None]:
    """Pick the lowest-scoring candidate on each side of the target.

    Returns:
        (lower, upper); a side is None when it has no candidate with a
        finite score.
    """
    return (
        _best_on_side(grid, scores, lower_mask),
        _best_on_side(grid, scores, ~lower_mask),
    )


def _best_on_side(
    grid: CandidateGrid, scores: np.ndarray, side_mask: np.ndarray
) -> GridCandidate | None:
    # A candidate with an infinite or NaN score never beats the empty side
    eligible = side_mask & np.isfinite(scores)
    if not eligible.any():
        return None
    side_scores = np.where(eligible, scores, np.inf)
    return grid.candidate_at(int(np.argmin(side_scores)))


def to_search_result(
    lower: GridCandidate | None,
    upper: GridCandidate | None,
    cabinet: CabinetType,
    unit: Unit | str,
) -> SearchResult:
    """Build the reportable result for the selected lower and upper grids."""
    return SearchResult(
        lower=(
            build_result(lower.cols, lower.rows, cabinet, unit, ResultLabel.LOWER)
            if lower is not None
            else None
        ),
        upper=(
            build_result(upper.cols, upper.rows, cabinet, unit, ResultLabel.UPPER)
            if upper is not None
            else None
        ),
    )


@runtime_checkable
class SearchStrategy(Protocol):
    """Protocol for configuration search strategies.

    Implementations:
    - AspectRatioSearch: aspect ratio plus one of height, width, diagonal
    - DiagonalSearch: explicit target width and height
    """

    def limits(self, target: ResolvedTarget, cabinet: CabinetType) -> tuple[int, int]:
        """Return (max_rows, max_cols) explored for this target."""
        ...

    def search(
        self, target: ResolvedTarget, cabinet: CabinetType, unit: Unit | str
    ) -> SearchResult:
        """Return the best lower and upper configurations for the target."""
        ...
