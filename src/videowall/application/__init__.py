"""Application layer: use cases wrapping the domain search."""

from .commands import CalculateWallCommand
from .dtos import CalculationInput, CalculationOutput

__all__ = [
    "CalculateWallCommand",
    "CalculationInput",
    "CalculationOutput",
]
