"""Unit tests for CalculateWallCommand and its DTOs."""

import logging
import math

import pytest

from videowall.application import (
    CalculateWallCommand,
    CalculationInput,
    CalculationOutput,
)
from videowall.domain import ResultLabel


class TestCalculationInputValidation:
    """Tests for CalculationInput.validate."""

    def test_valid_input(self) -> None:
        calculation_input = CalculationInput(cabinet_type="1:1", aspect_ratio=1.0, height=500.0)
        assert calculation_input.validate() == []

    def test_unknown_cabinet_type(self) -> None:
        calculation_input = CalculationInput(cabinet_type="4:3", aspect_ratio=1.0, height=500.0)
        assert calculation_input.validate() == ["Cabinet type must be one of: 16:9, 1:1"]

    def test_unknown_unit(self) -> None:
        calculation_input = CalculationInput(
            cabinet_type="1:1", unit="yd", aspect_ratio=1.0, height=500.0
        )
        assert calculation_input.validate() == ["Unit must be one of: mm, m, ft, in"]

    def test_wrong_parameter_count(self) -> None:
        calculation_input = CalculationInput(
            cabinet_type="1:1", aspect_ratio=1.0, height=500.0, width=500.0
        )
        assert calculation_input.validate() == [
            "Exactly 2 input parameters are required. Got: 3"
        ]

    @pytest.mark.parametrize("value", [0.0, -2.0, math.nan, math.inf])
    def test_non_positive_value(self, value: float) -> None:
        calculation_input = CalculationInput(cabinet_type="1:1", width=value, height=500.0)
        assert calculation_input.validate() == ["Width must be a positive number"]

    def test_collects_every_error(self) -> None:
        calculation_input = CalculationInput(cabinet_type="bad", unit="yd", diagonal=-1.0)
        assert len(calculation_input.validate()) == 4

    def test_supplied_parameters(self) -> None:
        calculation_input = CalculationInput(cabinet_type="1:1", diagonal=5.0, aspect_ratio=1.0)
        assert calculation_input.supplied_parameters() == ["aspect_ratio", "diagonal"]


class TestCalculateWallCommand:
    """Tests for executing the calculation use case."""

    def test_successful_calculation(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculationInput(cabinet_type="1:1", aspect_ratio=1.0, height=500.0)
        )

        assert output.is_valid
        assert output.error_type is None
        assert output.unit == "mm"
        assert output.lower.label is ResultLabel.LOWER
        assert (output.lower.cols, output.lower.rows) == (1, 1)
        assert (output.upper.cols, output.upper.rows) == (2, 2)

    def test_validation_failure_skips_search(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        output = calculate_command.execute(CalculationInput(cabinet_type="1:1", height=500.0))

        assert not output.is_valid
        assert output.error_type == "validation"
        assert output.lower is None
        assert output.upper is None

    def test_geometric_error_keeps_domain_type(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        output = calculate_command.execute(
            CalculationInput(cabinet_type="1:1", height=1000.0, diagonal=900.0)
        )

        assert not output.is_valid
        assert output.error_type == "geometric_inconsistency"
        assert output.errors == ["Diagonal must exceed height."]

    def test_output_keeps_request_unit(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculationInput(cabinet_type="1:1", unit="ft", height=10.0, width=10.0)
        )

        assert output.is_valid
        assert output.unit == "ft"

    def test_logs_rejection(
        self, calculate_command: CalculateWallCommand, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="videowall.application.commands"):
            calculate_command.execute(
                CalculationInput(cabinet_type="1:1", width=1000.0, diagonal=1000.0)
            )

        assert "Diagonal must exceed width." in caplog.text

    def test_logs_chosen_grids_at_debug(
        self, calculate_command: CalculateWallCommand, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="videowall.application.commands"):
            calculate_command.execute(
                CalculationInput(cabinet_type="1:1", aspect_ratio=1.0, height=100.0)
            )

        assert "Lower configuration: none" in caplog.text
        assert "Upper configuration: 1 cols x 1 rows (1 cabinets)" in caplog.text


class TestCalculationOutput:
    """Tests for CalculationOutput serialization."""

    def test_error_dict(self) -> None:
        output = CalculationOutput(errors=["a", "b"], error_type="validation")
        assert output.to_dict() == {"error": "a; b", "error_type": "validation"}

    def test_success_dict(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculationInput(cabinet_type="1:1", aspect_ratio=1.0, height=100.0)
        )

        data = output.to_dict()

        assert data["lower"] is None
        assert data["upper"]["totalCabinets"] == 1
        assert data["upper"]["label"] == "upper"
