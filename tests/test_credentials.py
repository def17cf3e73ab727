"""Tests for loading the client secrets document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from google_authorize.credentials import (
    DEFAULT_AUTH_URI,
    DEFAULT_TOKEN_URI,
    ClientCredentials,
    load_client_credentials,
)


class TestClientCredentials:
    def test_from_dict_installed(self, client_secrets: dict[str, Any]) -> None:
        creds = ClientCredentials.from_dict(client_secrets)
        assert creds.client_id == "test-client-id.apps.googleusercontent.com"
        assert creds.client_secret == "test-client-secret"
        assert creds.redirect_uri == "http://localhost"

    def test_first_redirect_uri_is_used(self) -> None:
        data = {
            "installed": {
                "client_id": "id",
                "client_secret": "secret",
                "redirect_uris": ["urn:ietf:wg:oauth:2.0:oob", "http://localhost"],
            }
        }
        assert ClientCredentials.from_dict(data).redirect_uri == "urn:ietf:wg:oauth:2.0:oob"

    def test_missing_endpoints_use_defaults(self) -> None:
        data = {"installed": {"client_id": "id", "client_secret": "s", "redirect_uris": ["x"]}}
        creds = ClientCredentials.from_dict(data)
        assert creds.auth_uri == DEFAULT_AUTH_URI
        assert creds.token_uri == DEFAULT_TOKEN_URI

    def test_web_client_accepted(self) -> None:
        data = {"web": {"client_id": "web-id", "client_secret": "s", "redirect_uris": ["x"]}}
        assert ClientCredentials.from_dict(data).client_id == "web-id"

    def test_installed_preferred_over_web(self) -> None:
        data = {
            "web": {"client_id": "web-id", "client_secret": "s", "redirect_uris": ["x"]},
            "installed": {"client_id": "app-id", "client_secret": "s", "redirect_uris": ["x"]},
        }
        assert ClientCredentials.from_dict(data).client_id == "app-id"

    def test_missing_section_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            ClientCredentials.from_dict({"something": {}})

    def test_is_read_only(self, client_secrets: dict[str, Any]) -> None:
        creds = ClientCredentials.from_dict(client_secrets)
        with pytest.raises(AttributeError):
            creds.client_id = "changed"  # type: ignore[misc]


class TestLoadClientCredentials:
    @pytest.mark.asyncio
    async def test_loads_file(self, credentials_file: Path) -> None:
        creds = await load_client_credentials(credentials_file)
        assert creds.client_id == "test-client-id.apps.googleusercontent.com"

    @pytest.mark.asyncio
    async def test_accepts_str_path(self, credentials_file: Path) -> None:
        creds = await load_client_credentials(str(credentials_file))
        assert creds.client_secret == "test-client-secret"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await load_client_credentials(tmp_path / "nope.json")

    @pytest.mark.asyncio
    async def test_malformed_json_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "credentials.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            await load_client_credentials(path)
