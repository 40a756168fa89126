"""
Shared pytest fixtures and configuration for railop tests.

This module provides:
- Settings cache reset for tests that touch RAILOP_* env vars
- Logging context cleanup between tests
- Auto-marking of tests as unit/integration based on location
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure railop package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from railop.core.logging import clear_context
from railop.core.settings import reset_settings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_fixture() -> Generator[None, None, None]:
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_log_context_fixture() -> Generator[None, None, None]:
    """Drop any structlog context bound by a previous test."""
    clear_context()
    yield
    clear_context()
