"""Configuration loading for the librarian lending service.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Book store configuration
    store_backend: Literal["memory", "sqlite"] = Field(
        default="memory",
        description="Book store backend type",
    )
    store_sqlite_path: str = Field(
        default="./data/library.db",
        description="SQLite database file path",
    )

    # Member directory configuration
    valid_member_ids: list[int] = Field(
        default_factory=list,
        description="Ids of members allowed to borrow (JSON list in env)",
    )
    allow_any_member: bool = Field(
        default=False,
        description="Accept any positive member id",
    )

    # Notification configuration
    notification_backend: Literal["stdout", "markdown", "webhook"] = Field(
        default="stdout",
        description="Notification backend type",
    )
    notification_output_path: str = Field(
        default="./notifications/lending.md",
        description="Ledger file for markdown notifications",
    )
    webhook_url: str = Field(
        default="",
        description="Endpoint receiving lending events",
    )
    webhook_timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for webhook requests in seconds",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("valid_member_ids")
    @classmethod
    def validate_member_ids(cls, v: list[int]) -> list[int]:
        """Ensure member ids are positive."""
        if any(member_id <= 0 for member_id in v):
            raise ValueError("valid_member_ids must contain only positive ids")
        return v

    @field_validator("webhook_timeout_seconds")
    @classmethod
    def validate_webhook_timeout(cls, v: float) -> float:
        """Ensure webhook timeout is positive."""
        if v <= 0:
            raise ValueError("webhook_timeout_seconds must be positive")
        return v

    @model_validator(mode="after")
    def validate_webhook_url(self) -> "Settings":
        """Require a URL when the webhook backend is selected."""
        if self.notification_backend == "webhook" and not self.webhook_url:
            raise ValueError("webhook_url is required for the webhook backend")
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
