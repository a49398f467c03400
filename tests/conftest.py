"""Test configuration and shared fixtures."""

import pytest

from rest_headers.config import reset_settings
from tests.fakes import RecordingHandler


@pytest.fixture
def handler() -> RecordingHandler:
    """Inner handler that records every call."""
    return RecordingHandler()


@pytest.fixture
def request_obj() -> dict:
    """Opaque request object passed through the chain."""
    return {"method": "GET", "path": "/api/products"}


@pytest.fixture
def content_type() -> str:
    """Content type configured for tests."""
    return "application/json"


@pytest.fixture
def origin() -> str:
    """CORS origin configured for tests."""
    return "https://example.com"


@pytest.fixture
def hsts_value() -> str:
    """HSTS directive configured for tests."""
    return "max-age=31536000"


@pytest.fixture(autouse=True)
def clean_settings():
    """Make sure no test sees settings cached by another."""
    reset_settings()
    yield
    reset_settings()
