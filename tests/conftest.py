"""Pytest configuration and shared fixtures for video wall tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from videowall.application import CalculateWallCommand
from videowall.domain import CabinetType, get_cabinet_type

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "requests"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that search the full 500 x 500 grid")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def wide_cabinet() -> CabinetType:
    """The 16:9 cabinet (600 x 337.5 mm)."""
    cabinet = get_cabinet_type("16:9")
    assert cabinet is not None
    return cabinet


@pytest.fixture
def square_cabinet() -> CabinetType:
    """The 1:1 cabinet (500 x 500 mm)."""
    cabinet = get_cabinet_type("1:1")
    assert cabinet is not None
    return cabinet


@pytest.fixture
def calculate_command() -> CalculateWallCommand:
    """A CalculateWallCommand with default strategies."""
    return CalculateWallCommand()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON request file fixtures."""
    return FIXTURES_PATH
