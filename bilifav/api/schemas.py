"""Pydantic schemas for API responses.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bilifav.models import ListingPage, PageRequest, PageResult, ResolvedVideo, count_pages

# =============================================================================
# HEALTH
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# =============================================================================
# ERRORS
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    success: bool = False
    error: str


# =============================================================================
# PAGINATION
# =============================================================================


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationMeta(CamelModel):
    """Pagination metadata for list responses."""

    current_page: int
    page_size: int
    total_items: int
    has_more: bool
    total_pages: int

    @classmethod
    def from_listing(cls, request: PageRequest, listing: ListingPage) -> "PaginationMeta":
        """Build meta from a validated request and its listing page."""
        return cls(
            current_page=request.page,
            page_size=request.page_size,
            total_items=listing.total_items,
            has_more=listing.has_more,
            total_pages=count_pages(listing.total_items, request.page_size),
        )

    @classmethod
    def from_result(cls, result: PageResult) -> "PaginationMeta":
        """Build meta from an assembled page."""
        return cls(
            current_page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
            has_more=result.has_more,
            total_pages=result.total_pages,
        )


# =============================================================================
# FAVORITES
# =============================================================================


class BvidListResponse(CamelModel):
    """BV ids of one favorites page."""

    success: bool = True
    media_id: str
    bvids: list[str]
    pagination: PaginationMeta


class VideoItem(BaseModel):
    """One resolved video."""

    bv: str = Field(examples=["BV1xx411c7mD"])
    title: str
    video: str = Field(description="Direct playable URL")

    @classmethod
    def from_resolved(cls, video: ResolvedVideo) -> "VideoItem":
        """Build from a resolved video."""
        return cls(bv=video.bvid, title=video.title, video=video.url)


class ResolvedPageResponse(CamelModel):
    """Resolved videos of one favorites page."""

    success: bool = True
    count: int
    videos: list[VideoItem]
    pagination: PaginationMeta

    @classmethod
    def from_result(cls, result: PageResult) -> "ResolvedPageResponse":
        """Build the response body of an assembled page."""
        return cls(
            count=result.count,
            videos=[VideoItem.from_resolved(v) for v in result.videos],
            pagination=PaginationMeta.from_result(result),
        )
