"""Installed-app authorization flow for Google APIs.

Returns an authorized OAuth2 client, using the token cached on disk when one
exists and otherwise walking the user through the consent screen:

    helper = GoogleAuthorize(["spreadsheets"])
    client = await helper.authorize()

If you change the requested scopes, delete the cached token
(``python -m google_authorize logout``) so a new one is requested.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from google_authorize.client import OAuth2Client
from google_authorize.config import Settings, get_settings, resolve_token_dir
from google_authorize.credentials import load_client_credentials
from google_authorize.logging import (
    log_cached_token_used,
    log_token_exchange_failed,
    log_token_exchanged,
)
from google_authorize.token_store import TokenStore

SCOPE_PREFIX = "https://www.googleapis.com/auth/"


def expand_scopes(scopes: Sequence[str]) -> tuple[str, ...]:
    """Turn short scope names (``"spreadsheets"``) into full scope URLs."""
    return tuple(SCOPE_PREFIX + scope for scope in scopes)


class GoogleAuthorize:
    """Returns an authorized OAuth2 client for interacting with Google APIs.

    Args:
        scopes: Short scope names, e.g. ``["spreadsheets"]`` for
            ``https://www.googleapis.com/auth/spreadsheets``.
        credentials_path: Where the client secrets ``credentials.json`` lives.
            Defaults to ``credentials.json`` relative to the working directory.
        settings: Settings to use instead of the environment-derived ones.
        token_store: Token cache to use instead of ``<home>/.credentials``.
        prompt: Function used to read the authorization code. Defaults to
            ``input``.

    Raises:
        TypeError: If ``scopes`` is not a list or tuple.
        ValueError: If the token directory cannot be determined.
    """

    def __init__(
        self,
        scopes: Sequence[str],
        credentials_path: str | Path | None = None,
        *,
        settings: Settings | None = None,
        token_store: TokenStore | None = None,
        prompt: Callable[[str], str] | None = None,
    ) -> None:
        if not isinstance(scopes, (list, tuple)):
            raise TypeError("Initialize with a list of scope names.")

        settings = settings or get_settings()

        self.scopes = expand_scopes(scopes)
        self.credentials_path = Path(credentials_path or settings.credentials_path)
        self._token_store = token_store or TokenStore(
            resolve_token_dir(settings), settings.token_filename
        )
        self._prompt = prompt or input

    @property
    def token_dir(self) -> Path:
        return self._token_store.token_dir

    @property
    def token_path(self) -> Path:
        return self._token_store.path

    async def authorize(self) -> OAuth2Client:
        """Run the authorization process.

        Returns:
            An OAuth2Client whose ``credentials`` hold the cached or newly
            obtained token.

        Raises:
            OSError: If the client secrets file cannot be read, or the token
                cannot be written.
            json.JSONDecodeError: If the client secrets file is not valid JSON.
            Exception: Whatever the token endpoint exchange raised.
        """
        client_credentials = await load_client_credentials(self.credentials_path)
        client = OAuth2Client.from_client_credentials(client_credentials)

        token = await self._token_store.load()
        if token is not None:
            log_cached_token_used(str(self.token_path))
            client.credentials = token
            return client

        return await self.get_new_token(client)

    async def get_new_token(self, client: OAuth2Client) -> OAuth2Client:
        """Prompt for user authorization, then exchange and store the token."""
        auth_url = client.generate_auth_url(list(self.scopes), access_type="offline")
        print("Authorize this app by visiting this url:", auth_url)

        code = await asyncio.to_thread(self._prompt, "Enter the code from that page here: ")

        try:
            token = await client.get_token(code.strip())
        except Exception as e:
            log_token_exchange_failed(str(e))
            raise

        log_token_exchanged(list(self.scopes))
        client.credentials = token
        await self.store_token(token)
        return client

    async def store_token(self, token: dict[str, Any]) -> None:
        """Store the token to disk for later program executions."""
        await self._token_store.store(token)
