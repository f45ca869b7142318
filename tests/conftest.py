"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipeparse.main import app

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP application")


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def sample_ingredient_lines():
    """Mixed fraction and decimal lines that all parse."""
    return [
        "1 cup apples",
        "1/2 t. peaches",
        "1 qt 1.5 c crushed pineapple",
        "1.5 Tbsp ginger ale",
    ]


@pytest.fixture
def unparseable_ingredient_lines():
    """Lines that each fail for a different reason."""
    return [
        "salt to taste",  # no measurement
        "1 xyz sugar",  # unknown unit
        "2 eggs",  # count notation
    ]


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the API."""
    return TestClient(app)
