"""Pydantic models for JSON calculation request files.

A request file describes a single calculation:

    {
        "schema_version": "1.0",
        "cabinet_type": "16:9",
        "unit": "mm",
        "inputs": {"aspect_ratio": "16:9", "width": 4800}
    }
"""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from videowall.domain import CABINET_TYPES, PARAMETER_LABELS, Unit, parse_aspect_ratio

# Version 1.0: Initial request file format
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _coerce_aspect_ratio(value: Any) -> Any:
    """Accept "16:9" style strings alongside plain numbers."""
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    if isinstance(value, str):
        return parse_aspect_ratio(value)
    return value


AspectRatioValue = Annotated[float, BeforeValidator(_coerce_aspect_ratio)]


class InputsConfig(BaseModel):
    """Target parameters; exactly two must be given.

    Attributes:
        aspect_ratio: Width / height, as a number or a "W:H" string
        height: Target height in the request unit
        width: Target width in the request unit
        diagonal: Target diagonal in the request unit
    """

    model_config = ConfigDict(extra="forbid")

    aspect_ratio: AspectRatioValue | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    width: float | None = Field(default=None, gt=0)
    diagonal: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_exactly_two(self) -> "InputsConfig":
        """Exactly two target parameters must be provided."""
        supplied = [name for name in PARAMETER_LABELS if getattr(self, name) is not None]
        if len(supplied) != 2:
            raise ValueError(
                "Exactly 2 of aspect_ratio, height, width, diagonal are required. "
                f"Got: {len(supplied)}"
            )
        return self


class CalculationConfiguration(BaseModel):
    """Root model of a calculation request file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet_type: Catalog id of the cabinet type
        unit: Unit of the linear inputs and of the reported results
        inputs: The two target parameters
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet_type: str
    unit: Unit = Unit.MM
    inputs: InputsConfig

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of them."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("cabinet_type")
    @classmethod
    def validate_cabinet_type(cls, v: str) -> str:
        if v not in CABINET_TYPES:
            raise ValueError(f"cabinet_type must be one of: {', '.join(CABINET_TYPES)}")
        return v
