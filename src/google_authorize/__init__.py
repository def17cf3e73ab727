"""google-authorize - Installed-app OAuth2 helper for Google APIs.

Guides the user through the OAuth2 consent screen once, caches the token in
``~/.credentials/googleapis.json`` and hands back an authorized client on
every later run.

Example:
    import asyncio

    from googleapiclient.discovery import build
    from google_authorize import GoogleAuthorize

    client = asyncio.run(GoogleAuthorize(["spreadsheets"]).authorize())
    service = build("sheets", "v4", credentials=client.to_google_credentials())
"""

from google_authorize.authorize import SCOPE_PREFIX, GoogleAuthorize, expand_scopes
from google_authorize.client import OAuth2Client
from google_authorize.config import Settings, get_settings
from google_authorize.credentials import ClientCredentials, load_client_credentials
from google_authorize.token_store import TokenStore

__version__ = "0.1.0"
__all__ = [
    "SCOPE_PREFIX",
    "ClientCredentials",
    "GoogleAuthorize",
    "OAuth2Client",
    "Settings",
    "TokenStore",
    "expand_scopes",
    "get_settings",
    "load_client_credentials",
]
