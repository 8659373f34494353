"""Turn a winning grid into a reportable configuration."""

from __future__ import annotations

import math

from ..units import from_base
from ..value_objects import CabinetType, ConfigResult, ResultLabel, Unit

__all__ = [
    "build_result",
    "round4",
]


def round4(value: float) -> float:
    """Round half-up at the fourth decimal place."""
    return math.floor(value * 10000 + 0.5) / 10000


def build_result(
    cols: int,
    rows: int,
    cabinet: CabinetType,
    unit: Unit | str,
    label: ResultLabel,
) -> ConfigResult:
    """Compute the physical size of a cols x rows grid.

    Args:
        cols: Number of cabinet columns (at least 1).
        rows: Number of cabinet rows (at least 1).
        cabinet: Cabinet type the grid is built from.
        unit: Unit to express width, height and diagonal in.
        label: Side of the target this grid was selected for.

    Returns:
        ConfigResult with width, height, diagonal and aspect ratio rounded
        to four decimal places.
    """
    width_mm = cols * cabinet.width_mm
    height_mm = rows * cabinet.height_mm
    diagonal_mm = math.sqrt(width_mm * width_mm + height_mm * height_mm)

    return ConfigResult(
        label=label,
        cols=cols,
        rows=rows,
        width=round4(from_base(width_mm, unit)),
        height=round4(from_base(height_mm, unit)),
        diagonal=round4(from_base(diagonal_mm, unit)),
        aspect_ratio=round4(width_mm / height_mm),
    )
