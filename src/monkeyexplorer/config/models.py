"""Configuration models for Monkey Explorer.

This module contains all configuration-related Pydantic models used throughout the application.
"""

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "WARNING"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "monkey-explorer"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return level


class CatalogConfig(BaseModel):
    """Catalog behaviour settings."""

    random_seed: int | None = None  # None = seed from system entropy once per process
    suggestion_limit: int = Field(default=3, ge=1)  # "Did you mean" names shown on a miss
    sort_listing_by_name: bool = True  # Sort the full listing table by name


class ExplorerConfig(BaseModel):
    """Configuration settings for the Monkey Explorer application."""

    config_version: str = "1.0.0"

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
