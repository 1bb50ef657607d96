"""Pytest-bdd configuration and shared fixtures for checkout feature tests."""

import pytest


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {
        "cart": None,
        "rule": None,
        "error": None,
    }
