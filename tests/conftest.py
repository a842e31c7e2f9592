"""Pytest fixtures for test suite."""

import pytest

from reverse_pattern.builder import ScopeBuilder
from reverse_pattern.core import get_settings


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> ScopeBuilder:
    """Scope builder for declarative trees."""
    return ScopeBuilder()
