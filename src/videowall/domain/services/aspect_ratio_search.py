"""Search constrained by a target aspect ratio.

Used whenever the aspect ratio is one of the two supplied parameters. The
other parameter (height, width or diagonal) is the primary dimension: it
decides which side of the target a grid falls on, and carries most of the
weight when grids are compared.
"""

from __future__ import annotations

import math

import numpy as np

from ..value_objects import (
    AspectRatioTarget,
    CabinetType,
    PrimaryDimension,
    SearchResult,
    Unit,
)
from .grid_search import (
    EPSILON,
    CandidateGrid,
    axis_limit,
    select_best,
    to_search_result,
)

__all__ = [
    "AspectRatioSearch",
]


class AspectRatioSearch:
    """Find the grids closest to a target aspect ratio and primary dimension.

    Score weights:
        70 % - relative error of the primary dimension
        30 % - relative error of the aspect ratio
    """

    DIMENSION_WEIGHT = 0.7
    ASPECT_RATIO_WEIGHT = 0.3

    def limits(self, target: AspectRatioTarget, cabinet: CabinetType) -> tuple[int, int]:
        """Row and column limits implied by the primary dimension and ratio.

        Returns:
            (max_rows, max_cols)
        """
        ratio = target.aspect_ratio
        if target.primary is PrimaryDimension.HEIGHT:
            height_extent = target.primary_mm
            width_extent = target.primary_mm * ratio
        elif target.primary is PrimaryDimension.WIDTH:
            height_extent = target.primary_mm / ratio
            width_extent = target.primary_mm
        else:
            # diagonal^2 = width^2 + height^2 with width = ratio * height
            hypotenuse = math.hypot(ratio, 1.0)
            height_extent = target.primary_mm / hypotenuse
            width_extent = target.primary_mm * (ratio / hypotenuse)

        return (
            axis_limit(height_extent, cabinet.height_mm),
            axis_limit(width_extent, cabinet.width_mm),
        )

    def search(
        self, target: AspectRatioTarget, cabinet: CabinetType, unit: Unit | str
    ) -> SearchResult:
        """Return the best lower and upper grids for the target.

        Args:
            target: Aspect ratio and primary dimension to approximate.
            cabinet: Cabinet type the wall is built from.
            unit: Unit for the reported dimensions.

        Returns:
            SearchResult; a side is None when no grid in range lies on it.
        """
        max_rows, max_cols = self.limits(target, cabinet)
        grid = CandidateGrid.enumerate(cabinet, max_rows, max_cols)

        actual_primary = self._actual_primary(grid, target.primary)
        # Extreme targets overflow to inf; select_best skips those scores
        with np.errstate(over="ignore", invalid="ignore"):
            dimension_error = (
                np.abs(actual_primary - target.primary_mm) / target.primary_mm
            )
            aspect_ratio_error = (
                np.abs(grid.aspect_ratio - target.aspect_ratio) / target.aspect_ratio
            )
            scores = (
                self.DIMENSION_WEIGHT * dimension_error
                + self.ASPECT_RATIO_WEIGHT * aspect_ratio_error
            )

        lower_mask = actual_primary <= target.primary_mm + EPSILON
        lower, upper = select_best(grid, scores, lower_mask)
        return to_search_result(lower, upper, cabinet, unit)

    @staticmethod
    def _actual_primary(grid: CandidateGrid, primary: PrimaryDimension) -> np.ndarray:
        if primary is PrimaryDimension.HEIGHT:
            return grid.height_mm
        if primary is PrimaryDimension.WIDTH:
            return grid.width_mm
        return grid.diagonal_mm
