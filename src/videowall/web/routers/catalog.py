"""Catalog endpoint: cabinet types, units and aspect ratio presets."""

from fastapi import APIRouter

from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    MM_PER_UNIT,
    UNIT_LABELS,
    Unit,
    list_cabinet_types,
)
from videowall.web.schemas.responses import (
    AspectRatioPresetSchema,
    CabinetTypeSchema,
    CatalogSchema,
    UnitSchema,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogSchema)
async def get_catalog() -> CatalogSchema:
    """List the supported cabinet types, units and aspect ratio presets."""
    return CatalogSchema(
        cabinet_types=[
            CabinetTypeSchema(
                id=cabinet.id,
                label=cabinet.label,
                width_mm=cabinet.width_mm,
                height_mm=cabinet.height_mm,
            )
            for cabinet in list_cabinet_types()
        ],
        units=[
            UnitSchema(id=unit.value, label=UNIT_LABELS[unit], mm_per_unit=MM_PER_UNIT[unit])
            for unit in Unit
        ],
        aspect_ratio_presets=[
            AspectRatioPresetSchema(label=preset.label, value=preset.value)
            for preset in ASPECT_RATIO_PRESETS
        ],
    )
