"""Favorites page assembly.

Validates a page request, lists its BV ids, resolves every id
concurrently and returns the resolved videos in listing order.
"""

import asyncio

from bilifav.clients.favorites import FavoritesClient
from bilifav.clients.resolver import VideoResolver
from bilifav.errors import ResolutionTransportError
from bilifav.models import ListingPage, PageRequest, PageResult, ResolvedVideo
from bilifav.monitoring.metrics import record_resolution
from bilifav.utils.logger import setup_logger

logger = setup_logger("services.playlist.assembler")


class FavoritesPageAssembler:
    """Builds one page of playable videos from a favorites playlist.

    Validation and listing failures abort the page. Resolution
    failures only drop the affected video.

    Attributes:
        _fetcher: Favorites listing client.
        _resolver: Video parsing client.
        _max_concurrency: Optional bound on simultaneous resolutions.
    """

    def __init__(
        self,
        fetcher: FavoritesClient,
        resolver: VideoResolver,
        max_concurrency: int | None = None,
    ) -> None:
        """Initialize assembler.

        Args:
            fetcher: Favorites listing client.
            resolver: Video parsing client.
            max_concurrency: Bound on simultaneous resolutions.
                None resolves the whole page at once.
        """
        self._fetcher = fetcher
        self._resolver = resolver
        self._max_concurrency = max_concurrency

    async def list_page(
        self,
        media_id: str | None,
        page: int,
        page_size: int,
    ) -> tuple[PageRequest, ListingPage]:
        """Validate the request and fetch its BV ids.

        Args:
            media_id: Favorites playlist identifier.
            page: Page number.
            page_size: Items per page.

        Returns:
            Validated request and listing page.

        Raises:
            InvalidPageRequest: Before any network call if parameters are invalid.
            UpstreamListingError: If the listing call fails.
        """
        request = PageRequest.create(media_id, page, page_size)
        listing = await self._fetcher.fetch(request.media_id, request.page, request.page_size)
        return request, listing

    async def assemble_page(
        self,
        media_id: str | None,
        page: int,
        page_size: int,
    ) -> PageResult:
        """Resolve one page of a favorites playlist.

        Args:
            media_id: Favorites playlist identifier.
            page: Page number.
            page_size: Items per page.

        Returns:
            Resolved videos in listing order with pagination metadata.

        Raises:
            InvalidPageRequest: Before any network call if parameters are invalid.
            UpstreamListingError: If the listing call fails.
        """
        request, listing = await self.list_page(media_id, page, page_size)

        if not listing.bvids:
            logger.info(f"Playlist {request.media_id} page {request.page} is empty")
            return PageResult(
                videos=(),
                page=request.page,
                page_size=request.page_size,
                total_items=listing.total_items,
                has_more=False,
            )

        logger.info(
            f"Playlist {request.media_id} page {request.page}: "
            f"resolving {len(listing.bvids)} videos"
        )
        videos = await self._resolve_all(listing.bvids)
        logger.info(
            f"Playlist {request.media_id} page {request.page}: "
            f"{len(videos)}/{len(listing.bvids)} videos resolved"
        )

        return PageResult(
            videos=videos,
            page=request.page,
            page_size=request.page_size,
            total_items=listing.total_items,
            has_more=listing.has_more,
        )

    async def _resolve_all(self, bvids: tuple[str, ...]) -> tuple[ResolvedVideo, ...]:
        """Resolve all ids concurrently, keeping listing order.

        Args:
            bvids: Video identifiers in listing order.

        Returns:
            Successfully resolved videos, in the order of bvids.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency) if self._max_concurrency else None
        tasks = [self._resolve_one(bvid, semaphore) for bvid in bvids]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        resolved: list[ResolvedVideo] = []
        for bvid, result in zip(bvids, results, strict=True):
            if isinstance(result, ResolutionTransportError):
                logger.error(str(result))
                record_resolution("transport_error")
            elif isinstance(result, BaseException):
                logger.error(f"Unexpected error resolving {bvid}: {result!r}")
                record_resolution("error")
            elif result is None:
                record_resolution("unresolved")
            else:
                record_resolution("resolved")
                resolved.append(result)

        return tuple(resolved)

    async def _resolve_one(
        self,
        bvid: str,
        semaphore: asyncio.Semaphore | None,
    ) -> ResolvedVideo | None:
        """Resolve one id, holding the semaphore if bounded."""
        if semaphore is None:
            return await self._resolver.resolve(bvid)
        async with semaphore:
            return await self._resolver.resolve(bvid)
