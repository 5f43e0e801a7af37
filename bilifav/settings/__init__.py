"""Centralized configuration for the favorites player.

All configuration values are sourced from environment variables
(.env file) and every setting has a safe default.

Usage:
    from bilifav.settings import settings

    settings.bilibili.favorites_url
    settings.resolver.max_concurrency
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bilifav.settings.api import APISettings, CORSSettings
from bilifav.settings.base import LoggingSettings, PathsSettings
from bilifav.settings.sources import BilibiliSettings, ResolverSettings

__all__ = [
    # Main
    "Settings",
    "settings",
    # Base
    "PathsSettings",
    "LoggingSettings",
    # API
    "APISettings",
    "CORSSettings",
    # Sources
    "BilibiliSettings",
    "ResolverSettings",
    # Utilities
    "get_masked_settings",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from bilifav.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")

    paths: PathsSettings = Field(default_factory=PathsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Upstream services
    bilibili: BilibiliSettings = Field(default_factory=BilibiliSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)

    # HTTP surface
    api: APISettings = Field(default_factory=APISettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with the parsing service URL masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("resolver", "url"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
