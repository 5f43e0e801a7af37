"""Video parsing service client.

Turns one BV id into a title and a direct playable URL.
"""

from typing import Any

import httpx

from bilifav.errors import ResolutionTransportError
from bilifav.models import ResolvedVideo
from bilifav.settings import settings
from bilifav.utils.logger import setup_logger

logger = setup_logger("clients.resolver")


class VideoResolver:
    """Async client for the third-party video parsing service.

    A payload reporting failure yields None. Only transport-level
    problems raise, so callers can tell the two apart.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            http_client: Shared async HTTP client.
            url: Parsing endpoint. Defaults to RESOLVER_URL.
            timeout: Request timeout. Defaults to RESOLVER_TIMEOUT.
        """
        self._client = http_client
        self.url = url or settings.resolver.url
        self._timeout = timeout if timeout is not None else settings.resolver.timeout
        self._template = settings.resolver.video_url_template
        self._headers = settings.bilibili.headers

    def video_page_url(self, bvid: str) -> str:
        """Canonical video page URL for a BV id."""
        return self._template.format(bvid=bvid)

    async def resolve(self, bvid: str) -> ResolvedVideo | None:
        """Resolve a BV id into a playable video.

        Args:
            bvid: Short video identifier.

        Returns:
            Resolved video, or None if the service could not parse it.

        Raises:
            ResolutionTransportError: On network failure, non-success
                status or undecodable body.
        """
        payload = await self._get(bvid)

        data = payload.get("data") or {}
        if payload.get("code") == 0 and isinstance(data, dict):
            title = data.get("title")
            video_url = data.get("video")
            if isinstance(title, str) and isinstance(video_url, str) and title and video_url:
                return ResolvedVideo(bvid=bvid, title=title, url=video_url)

        logger.warning(f"Video {bvid} could not be resolved: {payload.get('msg')}")
        return None

    async def _get(self, bvid: str) -> dict[str, Any]:
        """Query the parsing service for one video.

        Args:
            bvid: Short video identifier.

        Returns:
            Decoded JSON payload.

        Raises:
            ResolutionTransportError: On any transport-level failure.
        """
        try:
            response = await self._client.get(
                self.url,
                params={"url": self.video_page_url(bvid)},
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            raise ResolutionTransportError(bvid, str(e)) from e

        if not response.is_success:
            raise ResolutionTransportError(bvid, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ResolutionTransportError(bvid, "invalid JSON body") from e

        if not isinstance(payload, dict):
            raise ResolutionTransportError(bvid, "unexpected payload")
        return payload
