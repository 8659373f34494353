"""Aspect ratio presets and parsing of ``"W:H"`` ratio strings."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AspectRatioPreset:
    """A commonly used display aspect ratio."""

    label: str
    value: float


ASPECT_RATIO_PRESETS: tuple[AspectRatioPreset, ...] = (
    AspectRatioPreset(label="16:9", value=16 / 9),
    AspectRatioPreset(label="4:3", value=4 / 3),
    AspectRatioPreset(label="21:9", value=21 / 9),
    AspectRatioPreset(label="1:1", value=1.0),
    AspectRatioPreset(label="9:16", value=9 / 16),
)


def parse_aspect_ratio(value: float | int | str) -> float:
    """Parse an aspect ratio given as a number or as a ``"W:H"`` string.

    Args:
        value: A positive number such as ``1.7778``, or a ratio string such
            as ``"16:9"`` or ``"2.39:1"``. Plain numeric strings are accepted.

    Returns:
        The ratio as width divided by height.

    Raises:
        ValueError: If the value is not a positive finite ratio.

    Examples:
        >>> parse_aspect_ratio("16:9") == 16 / 9
        True
        >>> parse_aspect_ratio(1.5)
        1.5
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid aspect ratio: {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if ":" in text:
            width_text, _, height_text = text.partition(":")
            try:
                width = float(width_text)
                height = float(height_text)
            except ValueError as e:
                raise ValueError(f"Invalid aspect ratio: {value!r}") from e
            if not (_is_positive(width) and _is_positive(height)):
                raise ValueError(f"Aspect ratio sides must be positive: {value!r}")
            return width / height
        try:
            ratio = float(text)
        except ValueError as e:
            raise ValueError(f"Invalid aspect ratio: {value!r}") from e
    else:
        ratio = float(value)

    if not _is_positive(ratio):
        raise ValueError(f"Aspect ratio must be positive: {value!r}")
    return ratio


def _is_positive(number: float) -> bool:
    return math.isfinite(number) and number > 0
