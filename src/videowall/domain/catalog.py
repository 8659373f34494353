"""Static catalog of supported cabinet types."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .value_objects import CabinetType

CABINET_TYPES: Mapping[str, CabinetType] = MappingProxyType(
    {
        "16:9": CabinetType(id="16:9", label="16:9 Cabinet", width_mm=600.0, height_mm=337.5),
        "1:1": CabinetType(id="1:1", label="1:1 Cabinet", width_mm=500.0, height_mm=500.0),
    }
)


def get_cabinet_type(cabinet_id: str) -> CabinetType | None:
    """Look up a cabinet type by id, returning None when it is not cataloged."""
    return CABINET_TYPES.get(cabinet_id)


def list_cabinet_types() -> list[CabinetType]:
    """All cabinet types in catalog order."""
    return list(CABINET_TYPES.values())
