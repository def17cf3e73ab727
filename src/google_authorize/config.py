"""Configuration using pydantic-settings.

Values come from environment variables prefixed with ``GOOGLE_AUTHORIZE_``
or from a local ``.env`` file. The token cache directory is resolved once from
the home directory environment variables unless explicitly overridden.
"""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Checked in order, first defined wins
HOME_ENV_VARS = ("HOME", "HOMEPATH", "USERPROFILE")

TOKEN_DIR_NAME = ".credentials"


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Optional environment variables:
    - GOOGLE_AUTHORIZE_CREDENTIALS_PATH: OAuth client secrets file
    - GOOGLE_AUTHORIZE_TOKEN_DIR: Directory for the cached token
    - GOOGLE_AUTHORIZE_LOG_LEVEL: Minimum log level
    - GOOGLE_AUTHORIZE_JSON_LOGS: Emit JSON log lines
    """

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_AUTHORIZE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    credentials_path: Path = Path("credentials.json")
    token_dir: Path | None = None
    token_filename: str = "googleapis.json"

    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one loguru knows about."""
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of: {sorted(allowed)}")
        return v

    @field_validator("token_filename")
    @classmethod
    def validate_token_filename(cls, v: str) -> str:
        """Token filename must be a bare name, not a path."""
        if not v or Path(v).name != v:
            raise ValueError("token_filename must be a plain file name")
        return v


def resolve_home_dir(environ: Mapping[str, str] | None = None) -> str:
    """Return the user's home directory from the environment.

    Raises:
        ValueError: If none of HOME, HOMEPATH or USERPROFILE is set.
    """
    env = os.environ if environ is None else environ
    for name in HOME_ENV_VARS:
        value = env.get(name)
        if value:
            return value
    raise ValueError(
        "Cannot locate home directory. Set one of "
        + ", ".join(HOME_ENV_VARS)
        + " or GOOGLE_AUTHORIZE_TOKEN_DIR."
    )


def resolve_token_dir(settings: Settings, environ: Mapping[str, str] | None = None) -> Path:
    """Return the token cache directory (``<home>/.credentials`` by default)."""
    if settings.token_dir is not None:
        return settings.token_dir
    return Path(resolve_home_dir(environ)) / TOKEN_DIR_NAME


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
