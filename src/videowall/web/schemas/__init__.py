"""Pydantic schemas for the REST API."""

from videowall.web.schemas.common import (
    CabinetTypeEnum,
    TargetInputsSchema,
    UnitEnum,
)
from videowall.web.schemas.requests import CalculateRequest
from videowall.web.schemas.responses import (
    AspectRatioPresetSchema,
    CabinetTypeSchema,
    CalculateResponseSchema,
    CatalogSchema,
    ConfigResultSchema,
    ErrorResponseSchema,
    UnitSchema,
)

__all__ = [
    # Common
    "CabinetTypeEnum",
    "TargetInputsSchema",
    "UnitEnum",
    # Requests
    "CalculateRequest",
    # Responses
    "AspectRatioPresetSchema",
    "CabinetTypeSchema",
    "CalculateResponseSchema",
    "CatalogSchema",
    "ConfigResultSchema",
    "ErrorResponseSchema",
    "UnitSchema",
]
