"""Data structures for the paginated playlist pipeline.

All structures are frozen: a page is built fresh per request
and discarded once the response is sent.
"""

import math
from dataclasses import dataclass

from bilifav.errors import InvalidPageRequest

# Upstream listing API refuses larger pages.
MAX_PAGE_SIZE = 20


@dataclass(frozen=True)
class ResolvedVideo:
    """A video whose playable URL was obtained.

    Attributes:
        bvid: Short video identifier (BV id).
        title: Video title reported by the parsing service.
        url: Direct playable video URL.
    """

    bvid: str
    title: str
    url: str


@dataclass(frozen=True)
class PageRequest:
    """Validated paging window over one favorites playlist.

    Attributes:
        media_id: Favorites playlist identifier.
        page: Page number (1-indexed).
        page_size: Items per page, at most MAX_PAGE_SIZE.
    """

    media_id: str
    page: int
    page_size: int

    @classmethod
    def create(cls, media_id: str | None, page: int, page_size: int) -> "PageRequest":
        """Build a request, rejecting invalid parameters.

        Args:
            media_id: Favorites playlist identifier.
            page: Requested page number.
            page_size: Requested page size.

        Returns:
            Validated page request.

        Raises:
            InvalidPageRequest: If media_id is empty or paging is out of range.
        """
        if not media_id:
            raise InvalidPageRequest("Missing mediaId parameter")
        if page < 1 or page_size < 1 or page_size > MAX_PAGE_SIZE:
            raise InvalidPageRequest(
                f"Invalid pagination parameters: page >= 1, 1 <= pageSize <= {MAX_PAGE_SIZE}"
            )
        return cls(media_id=media_id, page=page, page_size=page_size)


@dataclass(frozen=True)
class ListingPage:
    """One page of the favorites listing.

    Attributes:
        bvids: Video identifiers in upstream order.
        has_more: Upstream flag telling whether later pages exist.
        total_items: Upstream total item count for the playlist.
    """

    bvids: tuple[str, ...]
    has_more: bool
    total_items: int


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed for total_items at page_size."""
    return math.ceil(total_items / page_size)


@dataclass(frozen=True)
class PageResult:
    """Resolved videos of one page with pagination metadata.

    Attributes:
        videos: Resolved videos, in listing order.
        page: Current page number.
        page_size: Requested page size.
        total_items: Upstream total item count.
        has_more: Upstream "more pages" flag.
    """

    videos: tuple[ResolvedVideo, ...]
    page: int
    page_size: int
    total_items: int
    has_more: bool

    @property
    def count(self) -> int:
        """Number of resolved videos on this page."""
        return len(self.videos)

    @property
    def total_pages(self) -> int:
        """Total page count at this page size."""
        return count_pages(self.total_items, self.page_size)
