"""Factory for choosing the search strategy for a resolved target.

Keeps the target-type to strategy mapping in one place so the dispatcher
does not need to know which concrete search handles which target shape.
"""

from __future__ import annotations

from ..value_objects import AspectRatioTarget, DimensionTarget, ResolvedTarget
from .aspect_ratio_search import AspectRatioSearch
from .diagonal_search import DiagonalSearch
from .grid_search import SearchStrategy


class SearchStrategyFactory:
    """Creates the search strategy matching a resolved target.

    Example:
        ```python
        factory = SearchStrategyFactory()
        strategy = factory.create_strategy(target)
        result = strategy.search(target, cabinet, "mm")
        ```
    """

    def __init__(
        self,
        aspect_ratio_search: AspectRatioSearch | None = None,
        diagonal_search: DiagonalSearch | None = None,
    ) -> None:
        self._aspect_ratio_search = aspect_ratio_search or AspectRatioSearch()
        self._diagonal_search = diagonal_search or DiagonalSearch()

    def create_strategy(self, target: ResolvedTarget) -> SearchStrategy:
        """Return the strategy for the target.

        Raises:
            TypeError: If the target is not a known target shape.
        """
        if isinstance(target, AspectRatioTarget):
            return self._aspect_ratio_search
        if isinstance(target, DimensionTarget):
            return self._diagonal_search
        raise TypeError(f"No search strategy for target type {type(target).__name__}")


__all__ = [
    "SearchStrategyFactory",
]
