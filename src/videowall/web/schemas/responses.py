"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConfigResultSchema(BaseModel):
    """A sized wall configuration."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(..., description="'lower' or 'upper'")
    cols: int = Field(..., ge=1, description="Cabinet columns")
    rows: int = Field(..., ge=1, description="Cabinet rows")
    total_cabinets: int = Field(
        ..., ge=1, alias="totalCabinets", description="Columns x rows"
    )
    width: float = Field(..., description="Wall width in the requested unit")
    height: float = Field(..., description="Wall height in the requested unit")
    diagonal: float = Field(..., description="Wall diagonal in the requested unit")
    aspect_ratio: float = Field(
        ..., alias="aspectRatio", description="Width / height"
    )


class CalculateResponseSchema(BaseModel):
    """Response for a wall size calculation."""

    lower: ConfigResultSchema | None = Field(
        default=None, description="Best configuration at or below the target"
    )
    upper: ConfigResultSchema | None = Field(
        default=None, description="Best configuration above the target"
    )


class CabinetTypeSchema(BaseModel):
    """Cabinet type in the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Cabinet type id")
    label: str = Field(..., description="Display label")
    width_mm: float = Field(..., alias="widthMm", description="Cabinet width in mm")
    height_mm: float = Field(..., alias="heightMm", description="Cabinet height in mm")


class UnitSchema(BaseModel):
    """Supported unit."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unit tag")
    label: str = Field(..., description="Display label")
    mm_per_unit: float = Field(
        ..., alias="mmPerUnit", description="Millimeters in one unit"
    )


class AspectRatioPresetSchema(BaseModel):
    """Common aspect ratio."""

    label: str = Field(..., description="Ratio as 'W:H'")
    value: float = Field(..., description="Width / height")


class CatalogSchema(BaseModel):
    """Response for the catalog listing."""

    model_config = ConfigDict(populate_by_name=True)

    cabinet_types: list[CabinetTypeSchema] = Field(..., alias="cabinetTypes")
    units: list[UnitSchema]
    aspect_ratio_presets: list[AspectRatioPresetSchema] = Field(
        ..., alias="aspectRatioPresets"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
