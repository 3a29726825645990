"""
Shared fixtures for the test suite.
"""

import pytest

from config.settings import get_settings
from models.entities import Recipe
from models.state import AppState


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def state():
    """A session state pre-filled with the demo data."""
    return AppState.seeded()


@pytest.fixture
def session():
    """A plain dict standing in for st.session_state."""
    return {}


@pytest.fixture
def make_recipe():
    """Factory for recipes with sensible defaults."""
    def _make(title="Testgericht", **fields):
        return Recipe(title=title, **fields)
    return _make
