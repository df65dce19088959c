"""Pytest configuration for e2e tests."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers for e2e tests."""
    config.addinivalue_line(
        "markers",
        "e2e: mark test as an end-to-end test requiring external systems",
    )
    config.addinivalue_line(
        "markers",
        "requires_api_key: mark test as requiring an OpenWeatherMap API key",
    )


def pytest_collection_modifyitems(config, items):
    """Skip e2e tests unless RUN_E2E=1."""
    if os.getenv("RUN_E2E") == "1":
        return
    skip_e2e = pytest.mark.skip(reason="Set RUN_E2E=1 to run end-to-end tests")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
