"""Unit tests for page request validation and pagination metadata."""

import pytest

from bilifav.errors import InvalidPageRequest
from bilifav.models import MAX_PAGE_SIZE, PageRequest, PageResult, ResolvedVideo, count_pages


class TestPageRequest:
    """PageRequest.create validation."""

    @staticmethod
    def test_valid_request() -> None:
        request = PageRequest.create("3399027968", 1, MAX_PAGE_SIZE)
        assert request == PageRequest(media_id="3399027968", page=1, page_size=20)

    @staticmethod
    @pytest.mark.parametrize("media_id", [None, ""])
    def test_missing_media_id(media_id) -> None:
        with pytest.raises(InvalidPageRequest, match="Missing mediaId parameter"):
            PageRequest.create(media_id, 1, 10)

    @staticmethod
    @pytest.mark.parametrize(("page", "page_size"), [(0, 10), (-1, 10), (1, 0), (1, 21)])
    def test_out_of_range_pagination(page: int, page_size: int) -> None:
        with pytest.raises(InvalidPageRequest, match="Invalid pagination parameters"):
            PageRequest.create("1", page, page_size)


class TestPagination:
    """Derived pagination values."""

    @staticmethod
    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (45, 3, 15), (45, 20, 3)],
    )
    def test_count_pages(total: int, size: int, expected: int) -> None:
        assert count_pages(total, size) == expected

    @staticmethod
    def test_page_result_count_and_total_pages() -> None:
        video = ResolvedVideo(bvid="BV1", title="A", url="u1")
        result = PageResult(videos=(video,), page=1, page_size=3, total_items=45, has_more=True)

        assert result.count == 1
        assert result.total_pages == 15
