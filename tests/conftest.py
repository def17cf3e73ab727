"""Shared test fixtures for google_authorize."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from google_authorize.config import Settings, get_settings
from google_authorize.token_store import TokenStore

CLIENT_SECRETS = {
    "installed": {
        "client_id": "test-client-id.apps.googleusercontent.com",
        "client_secret": "test-client-secret",
        "project_id": "test-project",
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "redirect_uris": ["http://localhost", "urn:ietf:wg:oauth:2.0:oob"],
    }
}

TOKEN = {
    "access_token": "ya29.test-access-token",
    "refresh_token": "1//test-refresh-token",
    "scope": ["https://www.googleapis.com/auth/spreadsheets"],
    "token_type": "Bearer",
    "expires_in": 3599,
    "expires_at": 1700000000.0,
}


@pytest.fixture
def client_secrets() -> dict[str, Any]:
    return json.loads(json.dumps(CLIENT_SECRETS))


@pytest.fixture
def token() -> dict[str, Any]:
    return dict(TOKEN)


@pytest.fixture
def credentials_file(tmp_path: Path, client_secrets: dict[str, Any]) -> Path:
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps(client_secrets))
    return path


@pytest.fixture
def token_dir(tmp_path: Path) -> Path:
    return tmp_path / "home" / ".credentials"


@pytest.fixture
def token_store(token_dir: Path) -> TokenStore:
    token_dir.parent.mkdir(parents=True, exist_ok=True)
    return TokenStore(token_dir)


@pytest.fixture
def settings(token_dir: Path) -> Settings:
    return Settings(token_dir=token_dir)


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Reset the lru_cache around tests that go through get_settings()."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
