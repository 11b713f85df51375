"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) outside the CLI.
- Lets the HTTP adapter and the logging setup read config consistently.

Every field has a default, so without any environment the client sends the
fixed header set and applies no timeout.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MINIHTTP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    user_agent: str = Field(
        default="Python Httpie",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    powered_by: str = Field(
        default="Python",
        min_length=1,
        description="Value of the X-POWERED-BY header sent with every request.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset means no timeout.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Log level used when no --verbose/--debug flag is given.",
    )
