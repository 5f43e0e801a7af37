"""Bilibili upstream configuration settings.

Favorites listing API and the third-party video parsing service.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class BilibiliSettings(BaseSettings):
    """Favorites listing API configuration.

    The listing API rejects requests without a browser User-Agent
    and a Referer on the bilibili.com domain.

    Attributes:
        favorites_url: Favorites resource listing endpoint.
        user_agent: Browser User-Agent sent upstream.
        referer: Referer header sent upstream.
        default_media_id: Playlist served when a request omits mediaId.
        timeout: Request timeout in seconds.
    """

    favorites_url: str = Field(
        default="https://api.bilibili.com/x/v3/fav/resource/list",
        alias="BILIBILI_FAVORITES_URL",
    )
    user_agent: str = Field(default=_BROWSER_USER_AGENT, alias="BILIBILI_USER_AGENT")
    referer: str = Field(default="https://www.bilibili.com/", alias="BILIBILI_REFERER")
    default_media_id: str = Field(default="3399027968", alias="BILIBILI_DEFAULT_MEDIA_ID")
    timeout: float = Field(default=30.0, alias="BILIBILI_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def headers(self) -> dict[str, str]:
        """Browser-identifying header pair required upstream."""
        return {"User-Agent": self.user_agent, "Referer": self.referer}


class ResolverSettings(BaseSettings):
    """Video parsing service configuration.

    Attributes:
        url: Parsing endpoint, queried with a ``url`` parameter.
        video_url_template: Canonical video page URL, formatted with ``bvid``.
        timeout: Request timeout in seconds.
        max_concurrency: Upper bound on simultaneous resolutions.
            Unset means one request per video on the page.
    """

    url: str = Field(
        default="https://api.yuafeng.cn/API/ly/bilibili_jx.php",
        alias="RESOLVER_URL",
    )
    video_url_template: str = Field(
        default="https://www.bilibili.com/video/{bvid}",
        alias="RESOLVER_VIDEO_URL_TEMPLATE",
    )
    timeout: float = Field(default=30.0, alias="RESOLVER_TIMEOUT")
    max_concurrency: int | None = Field(default=None, alias="RESOLVER_MAX_CONCURRENCY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("max_concurrency")
    @classmethod
    def validate_max_concurrency(cls, v: int | None) -> int | None:
        """Reject non-positive concurrency bounds."""
        if v is not None and v < 1:
            raise ValueError("RESOLVER_MAX_CONCURRENCY must be >= 1")
        return v

    @field_validator("video_url_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Require the ``{bvid}`` placeholder."""
        if "{bvid}" not in v:
            raise ValueError("RESOLVER_VIDEO_URL_TEMPLATE must contain '{bvid}'")
        return v
