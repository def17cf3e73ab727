"""CLI entry point for google_authorize.

Usage:
    python -m google_authorize authorize --scopes spreadsheets,drive.readonly
    python -m google_authorize logout
    python -m google_authorize show-path
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from google_authorize.authorize import GoogleAuthorize
from google_authorize.config import get_settings, resolve_token_dir
from google_authorize.logging import setup_logging
from google_authorize.token_store import TokenStore


def _token_store() -> TokenStore:
    settings = get_settings()
    return TokenStore(resolve_token_dir(settings), settings.token_filename)


async def cmd_authorize(args: argparse.Namespace) -> int:
    """Authorize the requested scopes and cache the token."""
    scopes = [s.strip() for s in args.scopes.split(",") if s.strip()]
    if not scopes:
        print("Error: --scopes is required", file=sys.stderr)
        return 1

    try:
        helper = GoogleAuthorize(scopes, args.credentials)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        client = await helper.authorize()
    except Exception as e:
        print(f"Authorization failed: {e}", file=sys.stderr)
        return 1

    print(f"Authorized. Token cached at {helper.token_path}")
    if args.show_token and client.credentials:
        print(f"\nAccess Token:\n{client.credentials.get('access_token', '')}")
    return 0


async def cmd_logout(_args: argparse.Namespace) -> int:
    """Remove the cached token file."""
    try:
        store = _token_store()
        if store.clear():
            print(f"Credentials cleared from {store.path}")
        else:
            print("No cached credentials found.")
        return 0
    except (OSError, ValueError) as e:
        print(f"Failed to clear credentials: {e}", file=sys.stderr)
        return 1


async def cmd_show_path(_args: argparse.Namespace) -> int:
    """Print where credentials are read from and the token is cached."""
    try:
        store = _token_store()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    print(f"Client secrets: {get_settings().credentials_path}")
    print(f"Token cache:    {store.path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="google_authorize",
        description="Authorize Google API access and cache the OAuth token locally",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # authorize
    authorize_parser = subparsers.add_parser(
        "authorize",
        help="Run the OAuth consent flow (or reuse the cached token)",
    )
    authorize_parser.add_argument(
        "--scopes",
        required=True,
        help="Comma-separated scope names (e.g., spreadsheets,drive.readonly)",
    )
    authorize_parser.add_argument(
        "--credentials",
        default=None,
        help="Path to client secrets JSON (or set GOOGLE_AUTHORIZE_CREDENTIALS_PATH)",
    )
    authorize_parser.add_argument(
        "--show-token",
        action="store_true",
        help="Print the access token to stdout",
    )
    authorize_parser.set_defaults(func=cmd_authorize)

    # logout
    logout_parser = subparsers.add_parser("logout", help="Delete the cached token")
    logout_parser.set_defaults(func=cmd_logout)

    # show-path
    show_path_parser = subparsers.add_parser(
        "show-path", help="Show the client secrets and token cache locations"
    )
    show_path_parser.set_defaults(func=cmd_show_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    result: int = asyncio.run(args.func(args))
    return result


if __name__ == "__main__":
    sys.exit(main())
