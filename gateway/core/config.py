"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (the demo runs fine on defaults alone)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


def _build_proxy_settings() -> "ProxySettings":
    return ProxySettings()


def _build_log_settings() -> "LogSettings":
    return LogSettings()


class ProxySettings(BaseSettings):
    """Forwarding server configuration."""

    max_allowed_requests: int = Field(
        2,
        description="Requests allowed per route before the proxy answers 403",
        ge=0,
    )
    cache_enabled: bool = Field(
        False,
        description="Cache GET responses from the application server",
    )
    cache_ttl_seconds: int = Field(
        60,
        description="Time-to-live for cached responses in seconds",
        ge=1,
    )
    cache_max_entries: int = Field(
        128,
        description="Maximum number of cached responses",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="PROXY_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(
        "WARNING",
        description="Root log level name (DEBUG, INFO, WARNING, ...)",
    )
    format: Literal["plain", "json"] = Field(
        "plain",
        description="plain for human-readable lines, json for structured logs",
    )
    output: Literal["stderr", "stdout", "file"] = Field(
        "stderr",
        description="Where log records are written",
    )
    file_path: str | None = Field(
        None,
        description="Log file path when output=file (default logs/gateway.log)",
    )
    max_bytes: int = Field(
        0,
        description="Rotate the log file at this size; 0 disables rotation",
        ge=0,
    )
    backup_count: int = Field(
        3,
        description="Number of rotated log files to keep",
        ge=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Raises validation errors on startup if a value is malformed.
    """

    app_env: str = APP_ENV
    proxy: ProxySettings = Field(default_factory=_build_proxy_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Global settings instance; servers receive it explicitly from the entry point
settings = Settings()
