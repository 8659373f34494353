"""Wall size calculation endpoint."""

from fastapi import APIRouter

from videowall.application.dtos import CalculationInput, CalculationOutput
from videowall.domain import ConfigResult
from videowall.web.dependencies import CalculateCommandDep
from videowall.web.exceptions import CalculationFailedError
from videowall.web.schemas.requests import CalculateRequest
from videowall.web.schemas.responses import (
    CalculateResponseSchema,
    ConfigResultSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def _config_to_schema(config: ConfigResult | None) -> ConfigResultSchema | None:
    if config is None:
        return None
    return ConfigResultSchema(
        label=config.label.value,
        cols=config.cols,
        rows=config.rows,
        total_cabinets=config.total_cabinets,
        width=config.width,
        height=config.height,
        diagonal=config.diagonal,
        aspect_ratio=config.aspect_ratio,
    )


def _output_to_schema(output: CalculationOutput) -> CalculateResponseSchema:
    return CalculateResponseSchema(
        lower=_config_to_schema(output.lower),
        upper=_config_to_schema(output.upper),
    )


@router.post(
    "",
    response_model=CalculateResponseSchema,
    responses={400: {"model": ErrorResponseSchema}, 422: {"model": ErrorResponseSchema}},
)
def calculate_wall(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculateResponseSchema:
    """Find the closest lower and upper wall configurations.

    Args:
        request: Cabinet type, unit and exactly two target parameters.
        command: Injected calculation command.

    Returns:
        The best configuration on each side of the target; either may be null.

    Raises:
        CalculationFailedError: If the calculation is rejected.
    """
    calculation_input = CalculationInput(
        cabinet_type=request.cabinet_type.value,
        unit=request.unit.value,
        aspect_ratio=request.inputs.aspect_ratio,
        height=request.inputs.height,
        width=request.inputs.width,
        diagonal=request.inputs.diagonal,
    )
    output = command.execute(calculation_input)

    if not output.is_valid:
        raise CalculationFailedError(output.errors, output.error_type)

    return _output_to_schema(output)
