"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Keep settings predictable during tests
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("APP_ROOT_URL", "http://localhost:4007")

from gdrive_app.schemas.call import AppCallRequest
from gdrive_app.utils.config import get_settings
from tests.fixtures.calls import CONNECTED_USER, FakeKVStore, make_call


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_kv(monkeypatch) -> FakeKVStore:
    """Replace the KV store client used by the OAuth handlers."""
    store = FakeKVStore()
    monkeypatch.setattr("gdrive_app.services.oauth_google.KVStoreClient", store.client_class())
    return store


@pytest.fixture
def mock_post_bot_channel(monkeypatch) -> AsyncMock:
    mock = AsyncMock(return_value={"id": "post_1"})
    monkeypatch.setattr("gdrive_app.services.oauth_google.post_bot_channel", mock)
    return mock


@pytest.fixture
def mock_google(monkeypatch):
    """Mock the OAuth flow and the Drive client used to complete a connection."""
    flow = MagicMock()
    flow.credentials.refresh_token = "refresh_token_1"

    drive = MagicMock()
    drive.about.return_value.get.return_value.execute.return_value = {
        "user": {"emailAddress": "test@example.com", "displayName": "Test User"}
    }

    get_flow = MagicMock(return_value=flow)
    get_drive = MagicMock(return_value=drive)
    monkeypatch.setattr("gdrive_app.services.oauth_google.get_oauth_google_client", get_flow)
    monkeypatch.setattr("gdrive_app.services.oauth_google.get_google_drive_client", get_drive)
    return {"flow": flow, "drive": drive, "get_flow": get_flow, "get_drive": get_drive}


@pytest.fixture
def connected_call() -> AppCallRequest:
    return make_call(oauth2_user=dict(CONNECTED_USER))


@pytest.fixture
def disconnected_call() -> AppCallRequest:
    return make_call()
