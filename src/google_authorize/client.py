"""OAuth2 client handle returned to callers.

Wraps ``google_auth_oauthlib.flow.Flow`` for the two network-facing steps of
the installed-app flow (authorization URL, code exchange) and keeps the raw
token dict in ``credentials``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from google_authorize.credentials import (
    DEFAULT_AUTH_URI,
    DEFAULT_TOKEN_URI,
    ClientCredentials,
)


class OAuth2Client:
    """An OAuth2 client for Google APIs.

    Attributes:
        client_id: The OAuth client ID.
        client_secret: The OAuth client secret.
        redirect_uri: Redirect URI sent with the authorization request.
        credentials: The current token as returned by the token endpoint,
            or None until one is attached.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        auth_uri: str = DEFAULT_AUTH_URI,
        token_uri: str = DEFAULT_TOKEN_URI,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.auth_uri = auth_uri
        self.token_uri = token_uri
        self.credentials: dict[str, Any] | None = None
        self._flow: Flow | None = None

    @classmethod
    def from_client_credentials(cls, creds: ClientCredentials) -> OAuth2Client:
        return cls(
            client_id=creds.client_id,
            client_secret=creds.client_secret,
            redirect_uri=creds.redirect_uri,
            auth_uri=creds.auth_uri,
            token_uri=creds.token_uri,
        )

    def _client_config(self) -> dict[str, Any]:
        return {
            "installed": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
                "redirect_uris": [self.redirect_uri],
            }
        }

    def _create_flow(self, scopes: Sequence[str] | None) -> Flow:
        return Flow.from_client_config(
            self._client_config(),
            scopes=list(scopes) if scopes is not None else None,
            redirect_uri=self.redirect_uri,
        )

    def generate_auth_url(self, scopes: Sequence[str], access_type: str = "offline") -> str:
        """Build the URL the user must visit to grant access.

        The flow created here is kept so that the following ``get_token``
        call reuses its PKCE code verifier.
        """
        self._flow = self._create_flow(scopes)
        authorization_url, _state = self._flow.authorization_url(access_type=access_type)
        return authorization_url

    async def get_token(self, code: str) -> dict[str, Any]:
        """Exchange an authorization code for a token.

        Performs one request to the token endpoint. Errors from oauthlib or
        requests propagate unchanged.
        """
        flow = self._flow or self._create_flow(None)
        token = await asyncio.to_thread(flow.fetch_token, code=code)
        return dict(token)

    def to_google_credentials(self) -> Credentials:
        """Return a google-auth Credentials view of the current token.

        Usable with ``googleapiclient.discovery.build``. No expiry is set, so
        google-auth treats the token as valid until an API call rejects it.

        Raises:
            ValueError: If no token is attached.
        """
        if not self.credentials:
            raise ValueError("No token attached to this client")

        scope = self.credentials.get("scope")
        if isinstance(scope, str):
            scope = scope.split()

        return Credentials(
            token=self.credentials.get("access_token"),
            refresh_token=self.credentials.get("refresh_token"),
            id_token=self.credentials.get("id_token"),
            token_uri=self.token_uri,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=scope,
        )

    def __repr__(self) -> str:
        has_token = self.credentials is not None
        return f"OAuth2Client(client_id={self.client_id!r}, has_token={has_token})"
