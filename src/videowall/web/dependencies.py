"""FastAPI dependency injection for calculation services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from videowall.application.commands import CalculateWallCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateWallCommand:
    """Get cached CalculateWallCommand instance.

    The command holds no per-request state, so one instance is shared.
    """
    return CalculateWallCommand()


CalculateCommandDep = Annotated[CalculateWallCommand, Depends(get_calculate_command)]
