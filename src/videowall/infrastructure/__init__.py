"""Infrastructure layer: output formatting."""

from .formatters import (
    CatalogFormatter,
    JsonResultExporter,
    ResultTableFormatter,
    format_number,
)

__all__ = [
    "CatalogFormatter",
    "JsonResultExporter",
    "ResultTableFormatter",
    "format_number",
]
