"""Logging configuration using loguru.

Provides:
- Human-readable logging for interactive use
- Structured JSON logging for scripted/CI use
- Event helpers for the authorization flow

Logs go to stderr so stdout stays free for the authorization prompt.
"""

import json
import sys
from datetime import UTC, datetime

from loguru import logger


def _json_formatter(record: dict) -> str:
    """Format log record as a single JSON line."""
    log_entry = {
        "timestamp": datetime.now(UTC).isoformat(),
        "severity": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("extra"):
        for key, value in record["extra"].items():
            if key not in log_entry:
                log_entry[key] = value

    if record["exception"]:
        log_entry["exception"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else None,
            "value": str(record["exception"].value) if record["exception"].value else None,
        }

    # Returned as a format string, so braces in the payload must be escaped
    return json.dumps(log_entry, default=str).replace("{", "{{").replace("}", "}}") + "\n"


def _dev_formatter(_record: dict) -> str:
    """Format log record for interactive use (human-readable)."""
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>\n"
        "{exception}"
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure loguru for the CLI.

    Library code never calls this; applications embedding the helper keep
    whatever loguru configuration they already have.

    Args:
        json_logs: If True, output one JSON object per line
        log_level: Minimum log level to output
    """
    logger.remove()

    if json_logs:
        logger.add(
            sys.stderr,
            format=_json_formatter,
            level=log_level,
            serialize=False,
        )
    else:
        logger.add(
            sys.stderr,
            format=_dev_formatter,
            level=log_level,
            colorize=True,
        )


# =============================================================================
# Flow events
# =============================================================================


def log_cached_token_used(path: str) -> None:
    """Log when a cached token is attached to the client."""
    logger.debug(
        "Using cached token",
        extra={"event": "token_cache_hit", "token_path": path},
    )


def log_token_exchanged(scopes: list[str]) -> None:
    """Log a successful authorization code exchange."""
    logger.info(
        "Authorization code exchanged for token",
        extra={"event": "token_exchanged", "scopes": scopes},
    )


def log_token_exchange_failed(reason: str) -> None:
    """Log a failed authorization code exchange."""
    logger.error(
        "Error while trying to retrieve access token: {}",
        reason,
        extra={"event": "token_exchange_failed"},
    )


def log_token_stored(path: str) -> None:
    """Log where the token was written."""
    logger.info(
        "Token stored to {}",
        path,
        extra={"event": "token_stored", "token_path": path},
    )


__all__ = [
    "logger",
    "setup_logging",
    "log_cached_token_used",
    "log_token_exchanged",
    "log_token_exchange_failed",
    "log_token_stored",
]
