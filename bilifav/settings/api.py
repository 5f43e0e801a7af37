"""API configuration settings.

FastAPI server and cross-origin settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """FastAPI configuration.

    Attributes:
        host: API host address.
        port: API port.
        reload: Enable auto-reload in development.
        title: OpenAPI title.
        version: API version reported by /health.
    """

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="Bilibili Favorites Player API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class CORSSettings(BaseSettings):
    """Cross-origin response headers.

    Attributes:
        allow_origin: Value of ``Access-Control-Allow-Origin``.
        allow_methods: Value of ``Access-Control-Allow-Methods``.
        allow_headers: Value of ``Access-Control-Allow-Headers``.
    """

    allow_origin: str = Field(default="*", alias="CORS_ORIGINS")
    allow_methods: str = Field(default="GET, POST, OPTIONS", alias="CORS_METHODS")
    allow_headers: str = Field(default="Content-Type", alias="CORS_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every response."""
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
        }
