"""Pytest configuration and shared fixtures for panelize tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from panelize.domain import PanelCatalog

if TYPE_CHECKING:
    from panelize.application.commands import PanelizeCommand

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def reference_catalog() -> PanelCatalog:
    """The reference catalog {2, 1.5, 0.5} with unit height."""
    return PanelCatalog.default()


@pytest.fixture
def panelize_command() -> "PanelizeCommand":
    """Create a PanelizeCommand through the service factory."""
    from panelize.application.factory import get_factory

    return get_factory().get_panelize_command()


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give each test a fresh default factory."""
    from panelize.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
