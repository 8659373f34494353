"""Application commands (use cases) for video wall sizing."""

from __future__ import annotations

import logging

from videowall.domain import (
    CalculationError,
    SearchStrategyFactory,
    calculate,
)

from .dtos import CalculationInput, CalculationOutput

logger = logging.getLogger(__name__)


class CalculateWallCommand:
    """Command to find the closest lower and upper wall configurations."""

    def __init__(self, strategy_factory: SearchStrategyFactory | None = None) -> None:
        self.strategy_factory = strategy_factory or SearchStrategyFactory()

    def execute(self, calculation_input: CalculationInput) -> CalculationOutput:
        """Execute the calculation.

        Args:
            calculation_input: Cabinet type, unit and exactly two target
                parameters.

        Returns:
            CalculationOutput with the lower and upper configurations, or
            with errors when the input was rejected.
        """
        errors = calculation_input.validate()
        if errors:
            logger.warning(f"Rejected calculation input: {'; '.join(errors)}")
            return CalculationOutput(
                unit=calculation_input.unit, errors=errors, error_type="validation"
            )

        logger.debug(
            f"Calculating {calculation_input.cabinet_type} wall from "
            f"{', '.join(calculation_input.supplied_parameters())} "
            f"in {calculation_input.unit}"
        )
        result = calculate(
            calculation_input.cabinet_type,
            calculation_input.to_target_inputs(),
            calculation_input.unit,
            strategy_factory=self.strategy_factory,
        )

        if isinstance(result, CalculationError):
            logger.warning(f"Calculation rejected ({result.error_type.value}): {result.message}")
            return CalculationOutput(
                unit=calculation_input.unit,
                errors=[result.message],
                error_type=result.error_type.value,
            )

        logger.debug(f"Lower configuration: {_describe(result.lower)}")
        logger.debug(f"Upper configuration: {_describe(result.upper)}")
        return CalculationOutput(
            lower=result.lower,
            upper=result.upper,
            unit=calculation_input.unit,
        )


def _describe(config) -> str:
    if config is None:
        return "none"
    return f"{config.cols} cols x {config.rows} rows ({config.total_cabinets} cabinets)"
