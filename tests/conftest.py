"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from volunteer_api.core.config import Settings
from volunteer_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Client bound to a fresh app, so stores start empty for every test."""
    return TestClient(create_app(settings))
