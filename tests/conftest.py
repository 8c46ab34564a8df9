"""Shared test fixtures for the greeting service test suite.

Provides settings and a TestClient wired to a fresh app, so route tests never
depend on the process environment.
"""

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from web.server import create_app


@pytest.fixture
def config():
    """Provide default settings with file logging disabled."""
    return Settings(log_file="")


@pytest.fixture
def client(config):
    """Provide a TestClient for an app built from ``config``."""
    return TestClient(create_app(config))


@pytest.fixture
def client_factory():
    """Provide a factory for clients built from custom settings."""

    def _create(**overrides):
        return TestClient(create_app(Settings(log_file="", **overrides)))

    return _create
