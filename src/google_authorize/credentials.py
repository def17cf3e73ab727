"""Loading of the OAuth client secrets document.

The document is the JSON file downloaded from the Google Cloud console for a
Desktop (installed) OAuth client:

    {"installed": {"client_id": ..., "client_secret": ..., "redirect_uris": [...]}}
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULT_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

# Installed clients first, web clients accepted as a fallback
CLIENT_TYPES = ("installed", "web")


@dataclass(frozen=True)
class ClientCredentials:
    """OAuth client identity read from the client secrets document.

    Attributes:
        client_id: The OAuth client ID.
        client_secret: The OAuth client secret.
        redirect_uri: First entry of ``redirect_uris``.
        auth_uri: Authorization endpoint.
        token_uri: Token endpoint.
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    auth_uri: str = DEFAULT_AUTH_URI
    token_uri: str = DEFAULT_TOKEN_URI

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientCredentials:
        """Create ClientCredentials from a parsed client secrets document.

        Raises:
            KeyError: If the document has no client section or lacks a field.
        """
        client_type = next((t for t in CLIENT_TYPES if t in data), CLIENT_TYPES[0])
        section = data[client_type]
        return cls(
            client_id=section["client_id"],
            client_secret=section["client_secret"],
            redirect_uri=section["redirect_uris"][0],
            auth_uri=section.get("auth_uri", DEFAULT_AUTH_URI),
            token_uri=section.get("token_uri", DEFAULT_TOKEN_URI),
        )


async def load_client_credentials(path: str | Path) -> ClientCredentials:
    """Read and parse the client secrets file.

    Read failures are logged and re-raised. Malformed JSON is not caught.
    """
    path = Path(path)
    try:
        content = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except OSError as e:
        logger.error("Error loading client secrets file {}: {}", path, e)
        raise

    return ClientCredentials.from_dict(json.loads(content))
