"""Search against an explicit target width and height.

Used when no aspect ratio is supplied. Grids are split into lower and upper
by their diagonal against the target diagonal, and compared by the mean
relative error of width, height and diagonal.
"""

from __future__ import annotations

import numpy as np

from ..value_objects import CabinetType, DimensionTarget, SearchResult, Unit
from .grid_search import (
    EPSILON,
    CandidateGrid,
    axis_limit,
    select_best,
    to_search_result,
)

__all__ = [
    "DiagonalSearch",
]


class DiagonalSearch:
    """Find the grids closest to a target width, height and diagonal."""

    def limits(self, target: DimensionTarget, cabinet: CabinetType) -> tuple[int, int]:
        """Row limit from the target height, column limit from the target width."""
        return (
            axis_limit(target.height_mm, cabinet.height_mm),
            axis_limit(target.width_mm, cabinet.width_mm),
        )

    def search(
        self, target: DimensionTarget, cabinet: CabinetType, unit: Unit | str
    ) -> SearchResult:
        max_rows, max_cols = self.limits(target, cabinet)
        grid = CandidateGrid.enumerate(cabinet, max_rows, max_cols)

        target_diagonal_mm = target.diagonal_mm
        diagonal_mm = grid.diagonal_mm

        with np.errstate(over="ignore", invalid="ignore"):
            width_error = np.abs(grid.width_mm - target.width_mm) / target.width_mm
            height_error = np.abs(grid.height_mm - target.height_mm) / target.height_mm
            diagonal_error = np.abs(diagonal_mm - target_diagonal_mm) / target_diagonal_mm
            scores = (width_error + height_error + diagonal_error) / 3

        lower_mask = diagonal_mm <= target_diagonal_mm + EPSILON
        lower, upper = select_best(grid, scores, lower_mask)
        return to_search_result(lower, upper, cabinet, unit)
