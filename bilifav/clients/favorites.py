"""Bilibili favorites listing client.

Fetches one page of a favorites playlist and extracts
the video identifiers with pagination metadata.
"""

from typing import Any

import httpx

from bilifav.errors import UpstreamListingError
from bilifav.models import MAX_PAGE_SIZE, ListingPage
from bilifav.settings import settings
from bilifav.utils.logger import setup_logger

logger = setup_logger("clients.favorites")


class FavoritesClient:
    """Async client for the favorites resource listing API.

    Every failure is raised as UpstreamListingError; nothing is retried.

    Attributes:
        url: Listing endpoint.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize listing client.

        Args:
            http_client: Shared async HTTP client.
            url: Listing endpoint. Defaults to BILIBILI_FAVORITES_URL.
            timeout: Request timeout. Defaults to BILIBILI_TIMEOUT.
        """
        self._client = http_client
        self.url = url or settings.bilibili.favorites_url
        self._timeout = timeout if timeout is not None else settings.bilibili.timeout
        self._headers = settings.bilibili.headers

    async def fetch(self, media_id: str, page: int, page_size: int) -> ListingPage:
        """Fetch one page of video identifiers.

        Args:
            media_id: Favorites playlist identifier.
            page: Page number (>= 1).
            page_size: Items per page (1 to MAX_PAGE_SIZE).

        Returns:
            Identifiers in upstream order with pagination metadata.

        Raises:
            ValueError: If page or page_size is out of range.
            UpstreamListingError: On transport failure, non-success
                status, undecodable body, or non-zero payload code.
        """
        if page < 1 or not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"Invalid page window: page={page}, page_size={page_size}")

        params: dict[str, Any] = {"media_id": media_id, "pn": page, "ps": page_size}

        try:
            response = await self._client.get(
                self.url,
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Listing request failed for page {page}: {e}")
            raise UpstreamListingError(f"Bilibili API request failed: {e}") from e

        payload = self._decode(response, page)
        listing = self._parse_listing(payload.get("data"))
        logger.debug(f"Listing page {page}: {len(listing.bvids)} ids, has_more={listing.has_more}")
        return listing

    @staticmethod
    def _decode(response: httpx.Response, page: int) -> dict[str, Any]:
        """Check response status and business code.

        Args:
            response: HTTP response object.
            page: Page number (for logging).

        Returns:
            Decoded JSON payload.

        Raises:
            UpstreamListingError: On any upstream-reported failure.
        """
        if not response.is_success:
            logger.error(f"Listing page {page} returned HTTP {response.status_code}")
            raise UpstreamListingError(
                f"Bilibili API request failed: {response.status_code}",
                status=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamListingError(
                "Bilibili API returned an invalid JSON body",
                status=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamListingError("Bilibili API returned an unexpected payload")

        code = payload.get("code")
        if code != 0:
            message = payload.get("message", "unknown error")
            logger.error(f"Listing page {page} returned code {code}: {message}")
            raise UpstreamListingError(
                f"Bilibili API returned an error: {message}",
                status=response.status_code,
                code=code,
            )

        return payload

    @staticmethod
    def _parse_listing(data: dict[str, Any] | None) -> ListingPage:
        """Extract identifiers and pagination from the ``data`` object.

        Media entries without a ``bvid`` are skipped. ``has_more`` and
        ``info.media_count`` are taken as reported.

        Args:
            data: ``data`` object of a successful listing payload.

        Returns:
            Parsed listing page.

        Raises:
            UpstreamListingError: If ``media_count`` is not a number.
        """
        data = data or {}
        medias = data.get("medias") or []
        bvids = tuple(
            item["bvid"] for item in medias if isinstance(item, dict) and item.get("bvid")
        )
        info = data.get("info") or {}
        try:
            total_items = int(info.get("media_count") or 0)
        except (TypeError, ValueError) as e:
            raise UpstreamListingError(
                f"Bilibili API returned an invalid media_count: {info.get('media_count')!r}"
            ) from e
        return ListingPage(
            bvids=bvids,
            has_more=data.get("has_more") == 1,
            total_items=total_items,
        )
