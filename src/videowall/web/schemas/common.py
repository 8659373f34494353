"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from videowall.application.config.schema import AspectRatioValue


class UnitEnum(str, Enum):
    """Unit options."""

    MM = "mm"
    M = "m"
    FT = "ft"
    IN = "in"


class CabinetTypeEnum(str, Enum):
    """Cabinet type options."""

    WIDE = "16:9"
    SQUARE = "1:1"


class TargetInputsSchema(BaseModel):
    """Target parameters; exactly two must be given."""

    model_config = ConfigDict(populate_by_name=True)

    aspect_ratio: AspectRatioValue | None = Field(
        default=None,
        gt=0,
        alias="aspectRatio",
        description="Width / height, as a number or a 'W:H' string",
    )
    height: float | None = Field(default=None, gt=0, description="Target height")
    width: float | None = Field(default=None, gt=0, description="Target width")
    diagonal: float | None = Field(default=None, gt=0, description="Target diagonal")
