"""Unit tests for shared search bounds and lower/upper selection.

These tests verify:
- axis_limit margin, ceiling and hard cap
- Candidate grid enumeration order
- First-encountered tie-breaking in select_best
- Empty sides yield None
"""

import math

import numpy as np
import pytest

from videowall.domain import CabinetType, GridCandidate
from videowall.domain.services import (
    AXIS_MARGIN,
    EPSILON,
    HARD_MAX,
    CandidateGrid,
    axis_limit,
    select_best,
)


class TestAxisLimit:
    """Tests for the per-axis search limit."""

    def test_exact_multiple(self) -> None:
        assert axis_limit(500.0, 500.0) == 1 + AXIS_MARGIN

    def test_rounds_up_partial_cabinet(self) -> None:
        assert axis_limit(501.0, 500.0) == 2 + AXIS_MARGIN

    def test_small_target(self) -> None:
        assert axis_limit(100.0, 500.0) == 1 + AXIS_MARGIN

    def test_hard_cap(self) -> None:
        assert axis_limit(1_000_000.0, 500.0) == HARD_MAX

    def test_just_below_cap(self) -> None:
        assert axis_limit(489 * 500.0, 500.0) == 499

    def test_monotonic_in_target(self) -> None:
        targets = [1.0, 337.5, 338.0, 1000.0, 5000.0, 50_000.0, 250_000.0, 1e7]
        limits = [axis_limit(t, 337.5) for t in targets]
        assert limits == sorted(limits)

    def test_unrepresentable_extent_searches_full_range(self) -> None:
        assert axis_limit(math.inf, 500.0) == HARD_MAX
        assert axis_limit(1e308, 1e-10) == HARD_MAX

    def test_constants(self) -> None:
        assert HARD_MAX == 500
        assert EPSILON == 0.001


class TestCandidateGrid:
    """Tests for grid enumeration."""

    def test_shape_and_indexing(self, wide_cabinet: CabinetType) -> None:
        grid = CandidateGrid.enumerate(wide_cabinet, max_rows=3, max_cols=4)

        assert grid.cols.shape == (3, 4)
        assert grid.rows[2, 0] == 3
        assert grid.cols[0, 3] == 4
        assert grid.width_mm[1, 3] == 2400.0
        assert grid.height_mm[1, 3] == 675.0

    def test_derived_metrics(self, square_cabinet: CabinetType) -> None:
        grid = CandidateGrid.enumerate(square_cabinet, max_rows=2, max_cols=2)

        assert grid.diagonal_mm[1, 1] == pytest.approx(1414.2135623730951)
        assert grid.aspect_ratio[0, 1] == 2.0

    def test_candidate_at_flat_index(self, square_cabinet: CabinetType) -> None:
        grid = CandidateGrid.enumerate(square_cabinet, max_rows=3, max_cols=5)
        # Flat index 7 is the third column of the second row
        assert grid.candidate_at(7) == GridCandidate(cols=3, rows=2)


class TestSelectBest:
    """Tests for choosing the lowest score on each side."""

    @pytest.fixture
    def grid(self, square_cabinet: CabinetType) -> CandidateGrid:
        return CandidateGrid.enumerate(square_cabinet, max_rows=3, max_cols=3)

    def test_picks_minimum_per_side(self, grid: CandidateGrid) -> None:
        scores = np.array([[5.0, 4.0, 3.0], [2.0, 9.0, 9.0], [9.0, 1.0, 9.0]])
        lower_mask = grid.rows == 1

        lower, upper = select_best(grid, scores, lower_mask)

        assert lower == GridCandidate(cols=3, rows=1)
        assert upper == GridCandidate(cols=2, rows=3)

    def test_ties_go_to_first_row_then_first_column(self, grid: CandidateGrid) -> None:
        scores = np.ones((3, 3))
        scores[0, 2] = 0.0
        scores[1, 0] = 0.0
        scores[2, 2] = 0.0
        lower_mask = np.ones((3, 3), dtype=bool)

        lower, _ = select_best(grid, scores, lower_mask)

        assert lower == GridCandidate(cols=3, rows=1)

    def test_all_equal_scores_pick_first_grid(self, grid: CandidateGrid) -> None:
        scores = np.zeros((3, 3))
        lower_mask = grid.rows >= 2

        lower, upper = select_best(grid, scores, lower_mask)

        assert lower == GridCandidate(cols=1, rows=2)
        assert upper == GridCandidate(cols=1, rows=1)

    def test_empty_upper_side(self, grid: CandidateGrid) -> None:
        scores = np.zeros((3, 3))
        lower_mask = np.ones((3, 3), dtype=bool)

        lower, upper = select_best(grid, scores, lower_mask)

        assert lower == GridCandidate(cols=1, rows=1)
        assert upper is None

    def test_empty_lower_side(self, grid: CandidateGrid) -> None:
        scores = np.zeros((3, 3))
        lower_mask = np.zeros((3, 3), dtype=bool)

        lower, upper = select_best(grid, scores, lower_mask)

        assert lower is None
        assert upper == GridCandidate(cols=1, rows=1)

    def test_infinite_scores_leave_side_empty(self, grid: CandidateGrid) -> None:
        scores = np.full((3, 3), np.inf)
        scores[2, 2] = 0.5
        lower_mask = grid.rows <= 2

        lower, upper = select_best(grid, scores, lower_mask)

        assert lower is None
        assert upper == GridCandidate(cols=3, rows=3)

    def test_nan_scores_are_skipped(self, grid: CandidateGrid) -> None:
        scores = np.zeros((3, 3))
        scores[0, 0] = np.nan
        lower_mask = np.ones((3, 3), dtype=bool)

        lower, _ = select_best(grid, scores, lower_mask)

        assert lower == GridCandidate(cols=2, rows=1)
