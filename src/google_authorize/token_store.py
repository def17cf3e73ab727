"""On-disk cache for the OAuth token.

The token is stored verbatim as JSON in a single file, by default
``<home>/.credentials/googleapis.json``. Nothing here inspects the token: an
expired token is returned just like a fresh one.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from google_authorize.logging import log_token_stored

DEFAULT_TOKEN_FILENAME = "googleapis.json"


class TokenStore:
    """Reads and writes the cached token file.

    Args:
        token_dir: Directory holding the token file. Created on first store.
        filename: Name of the token file inside ``token_dir``.
    """

    def __init__(self, token_dir: str | Path, filename: str = DEFAULT_TOKEN_FILENAME) -> None:
        self._token_dir = Path(token_dir)
        self._filename = filename

    @property
    def token_dir(self) -> Path:
        return self._token_dir

    @property
    def path(self) -> Path:
        return self._token_dir / self._filename

    async def load(self) -> dict[str, Any] | None:
        """Return the cached token, or None if the file cannot be read.

        Raises:
            json.JSONDecodeError: If the file exists but is not valid JSON.
        """
        try:
            content = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except OSError:
            return None
        return json.loads(content)

    async def store(self, token: dict[str, Any]) -> None:
        """Persist the token, creating the token directory if needed.

        Raises:
            OSError: If the directory cannot be created (other than because it
                already exists) or the file cannot be written.
        """
        self._ensure_token_dir()
        await asyncio.to_thread(self.path.write_text, json.dumps(token), encoding="utf-8")
        log_token_stored(str(self.path))

    def clear(self) -> bool:
        """Delete the cached token file. Returns True if a file was removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True

    def _ensure_token_dir(self) -> None:
        try:
            self._token_dir.mkdir()
        except FileExistsError:
            pass
