"""Output formatters for wall size calculations."""

from __future__ import annotations

import json

from videowall.application.dtos import CalculationOutput
from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    UNIT_LABELS,
    AspectRatioPreset,
    CabinetType,
    ConfigResult,
    Unit,
    resolve_unit,
)


def format_number(value: float) -> str:
    """Show up to four decimal places, trimming trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text or "0"


class ResultTableFormatter:
    """Formats lower and upper configurations as a text table."""

    EMPTY_SIDE = "none within search range"

    def format(self, output: CalculationOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        unit_label = UNIT_LABELS[resolve_unit(output.unit)]
        lines = [
            "VIDEO WALL CONFIGURATIONS",
            "=" * 78,
            f"{'Side':<7} {'Grid':<14} {'Cabinets':<9} "
            f"{'Width':<12} {'Height':<12} {'Diagonal':<12} {'Ratio'}",
            "-" * 78,
        ]
        lines.append(self._format_row("Lower", output.lower))
        lines.append(self._format_row("Upper", output.upper))
        lines.append("-" * 78)
        lines.append(f"Dimensions in {unit_label}")
        return "\n".join(lines)

    def _format_row(self, side: str, config: ConfigResult | None) -> str:
        if config is None:
            return f"{side:<7} {self.EMPTY_SIDE}"
        grid = f"{config.cols} x {config.rows}"
        return (
            f"{side:<7} {grid:<14} {config.total_cabinets:<9} "
            f"{format_number(config.width):<12} {format_number(config.height):<12} "
            f"{format_number(config.diagonal):<12} {config.aspect_ratio:.3f}"
        )


class JsonResultExporter:
    """Exports a calculation as JSON matching the HTTP response body."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def export(self, output: CalculationOutput) -> str:
        return json.dumps(output.to_dict(), indent=self._indent)


class CatalogFormatter:
    """Formats the cabinet catalog, units and aspect ratio presets."""

    def format(
        self,
        cabinets: list[CabinetType],
        presets: tuple[AspectRatioPreset, ...] = ASPECT_RATIO_PRESETS,
    ) -> str:
        lines = [
            "CABINET TYPES",
            "=" * 50,
            f"{'Id':<8} {'Label':<16} {'Width (mm)':<12} {'Height (mm)'}",
            "-" * 50,
        ]
        for cabinet in cabinets:
            lines.append(
                f"{cabinet.id:<8} {cabinet.label:<16} "
                f"{format_number(cabinet.width_mm):<12} {format_number(cabinet.height_mm)}"
            )

        lines.append("")
        lines.append(f"Units: {', '.join(UNIT_LABELS[unit] for unit in Unit)}")
        lines.append(
            "Aspect ratio presets: "
            + ", ".join(f"{p.label} ({p.value:.4f})" for p in presets)
        )
        return "\n".join(lines)
