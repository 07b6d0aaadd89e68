"""Tests for the limit/offset pagination helpers."""

import pytest

from mediashelf.application.common.pagination import (
    MAX_OFFSET,
    PageWindow,
    is_paging_requested,
    normalize_page_window,
    resolve_page_window,
)


class TestNormalizePageWindow:
    @pytest.mark.parametrize(
        ("limit", "offset", "expected"),
        [
            (None, None, PageWindow(take=20, skip=0)),
            (10, 5, PageWindow(take=10, skip=5)),
            (500, 0, PageWindow(take=100, skip=0)),
            (100, 0, PageWindow(take=100, skip=0)),
            (0, 0, PageWindow(take=20, skip=0)),
            (-3, 0, PageWindow(take=20, skip=0)),
            (5, -5, PageWindow(take=5, skip=0)),
            (5, 10**19, PageWindow(take=5, skip=MAX_OFFSET)),
        ],
    )
    def test_clamping(self, limit: int | None, offset: int | None, expected: PageWindow) -> None:
        assert normalize_page_window(limit, offset) == expected

    def test_custom_sizes(self) -> None:
        assert normalize_page_window(None, None, default_size=5, max_size=8).take == 5
        assert normalize_page_window(50, None, default_size=5, max_size=8).take == 8

    def test_window_echoes_limit_and_offset(self) -> None:
        window = PageWindow(take=7, skip=14)
        assert (window.limit, window.offset) == (7, 14)


class TestResolvePageWindow:
    def test_unpaged_request(self) -> None:
        assert not is_paging_requested(None, None)
        assert resolve_page_window(None, None) is None

    def test_limit_alone_is_paged(self) -> None:
        assert resolve_page_window(3, None) == PageWindow(take=3, skip=0)

    def test_offset_alone_is_paged(self) -> None:
        assert resolve_page_window(None, 4) == PageWindow(take=20, skip=4)

    def test_zero_offset_is_still_paged(self) -> None:
        assert is_paging_requested(None, 0)
