"""Favorites endpoints for REST API.

Provides the BV id listing of a favorites page and the fully
resolved page with playable video URLs.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from bilifav.api.dependencies.upstream import Assembler
from bilifav.api.schemas import (
    BvidListResponse,
    ErrorResponse,
    PaginationMeta,
    ResolvedPageResponse,
)
from bilifav.errors import InvalidPageRequest, UpstreamListingError
from bilifav.settings import settings
from bilifav.utils.logger import setup_logger

logger = setup_logger("api.favorites")

router = APIRouter(tags=["Favorites"])

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid pagination parameters"},
    500: {"model": ErrorResponse, "description": "Upstream or unexpected failure"},
}

_UNSUPPORTED_METHODS = ["POST", "PUT", "PATCH", "DELETE"]

MediaIdParam = Annotated[str | None, Query(alias="mediaId", description="Favorites playlist ID")]
PageParam = Annotated[str, Query(description="Page number (>= 1)")]
PageSizeParam = Annotated[str, Query(alias="pageSize", description="Items per page (1-20)")]


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get(
    "/list",
    response_model=BvidListResponse,
    responses=_ERROR_RESPONSES,
    summary="List BV ids",
    description="Get the BV ids of one favorites page with pagination metadata.",
)
async def list_bvids(
    assembler: Assembler,
    media_id: MediaIdParam = None,
    page: PageParam = "1",
    page_size: PageSizeParam = "20",
) -> BvidListResponse | JSONResponse:
    """Get one page of BV ids.

    Args:
        assembler: Page assembler.
        media_id: Favorites playlist ID (required).
        page: Page number.
        page_size: Items per page.

    Returns:
        BV ids and pagination metadata, or an error body.
    """
    try:
        request, listing = await assembler.list_page(
            media_id,
            _parse_int(page, "page"),
            _parse_int(page_size, "pageSize"),
        )
        body = BvidListResponse(
            media_id=request.media_id,
            bvids=list(listing.bvids),
            pagination=PaginationMeta.from_listing(request, listing),
        )
    except InvalidPageRequest as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except UpstreamListingError as e:
        logger.error(f"Error fetching favorites {media_id}: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception:
        logger.exception(f"Unexpected error listing favorites {media_id}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unknown error occurred")

    return body


@router.get(
    "/resolved-page",
    response_model=ResolvedPageResponse,
    responses=_ERROR_RESPONSES,
    summary="Resolve a favorites page",
    description="Get title and playable URL of every video on one favorites page.",
)
async def resolved_page(
    assembler: Assembler,
    media_id: MediaIdParam = None,
    page: PageParam = "1",
    page_size: PageSizeParam = "10",
) -> ResolvedPageResponse | JSONResponse:
    """Get one page of resolved videos.

    Videos that fail to resolve are left out; the page still succeeds.

    Args:
        assembler: Page assembler.
        media_id: Favorites playlist ID. Defaults to BILIBILI_DEFAULT_MEDIA_ID.
        page: Page number.
        page_size: Items per page.

    Returns:
        Resolved videos and pagination metadata, or an error body.
    """
    media_id = media_id or settings.bilibili.default_media_id

    try:
        result = await assembler.assemble_page(
            media_id,
            _parse_int(page, "page"),
            _parse_int(page_size, "pageSize"),
        )
        body = ResolvedPageResponse.from_result(result)
    except InvalidPageRequest as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except UpstreamListingError as e:
        logger.error(f"Error processing favorites {media_id}: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception:
        logger.exception(f"Unexpected error processing favorites {media_id}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unknown error occurred")

    return body


@router.api_route("/list", methods=_UNSUPPORTED_METHODS, include_in_schema=False)
@router.api_route("/resolved-page", methods=_UNSUPPORTED_METHODS, include_in_schema=False)
async def method_not_allowed() -> JSONResponse:
    """Reject methods other than GET and OPTIONS."""
    return _error(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")


# =============================================================================
# PRIVATE HELPERS
# =============================================================================


def _parse_int(value: str, name: str) -> int:
    """Parse an integer query parameter.

    Args:
        value: Raw query string value.
        name: Parameter name (for the error message).

    Returns:
        Parsed integer.

    Raises:
        InvalidPageRequest: If value is not an integer.
    """
    digits = value[1:] if value.startswith("-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidPageRequest(f"Invalid {name} parameter: {value!r}")
    return int(value)


def _error(status_code: int, message: str) -> JSONResponse:
    """Build an error response body.

    Args:
        status_code: HTTP status code.
        message: Error description.

    Returns:
        JSON error response.
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )
