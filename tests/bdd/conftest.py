"""Shared fixtures for BDD tests."""

import pytest


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {}
