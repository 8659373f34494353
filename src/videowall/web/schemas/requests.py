"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from videowall.domain import PARAMETER_LABELS
from videowall.web.schemas.common import CabinetTypeEnum, TargetInputsSchema, UnitEnum


class CalculateRequest(BaseModel):
    """Request for sizing a video wall."""

    model_config = ConfigDict(populate_by_name=True)

    cabinet_type: CabinetTypeEnum = Field(
        ..., alias="cabinetType", description="Cabinet type id"
    )
    inputs: TargetInputsSchema = Field(..., description="Exactly two target parameters")
    unit: UnitEnum = Field(
        default=UnitEnum.MM, description="Unit of the inputs and of the results"
    )

    @model_validator(mode="after")
    def validate_exactly_two_inputs(self) -> "CalculateRequest":
        """Exactly two target parameters must be provided."""
        supplied = [
            name for name in PARAMETER_LABELS if getattr(self.inputs, name) is not None
        ]
        if len(supplied) != 2:
            raise ValueError(
                f"Exactly 2 input parameters are required. Got: {len(supplied)}"
            )
        return self
