"""Tests for pagination arithmetic."""

from __future__ import annotations

from editgrid.pagination import (
    PageInterval,
    clamp_page_index,
    page_bounds,
    page_count,
    pages_in_interval,
    sliding_window,
)


class TestPageCount:
    """Tests for page_count() and page_bounds()."""

    def test_ten_rows_three_per_page(self) -> None:
        """10 rows in pages of 3 need 4 pages, the last with one row."""
        assert page_count(10, 3) == 4
        assert page_bounds(10, 3, 3) == (9, 10)

    def test_exact_division(self) -> None:
        """No extra page when rows divide evenly."""
        assert page_count(9, 3) == 3

    def test_disabled_pagination(self) -> None:
        """Page size 0 shows everything on one page."""
        assert page_count(10, 0) == 1
        assert page_bounds(10, 0, 0) == (0, 10)

    def test_empty(self) -> None:
        """No rows means no pages."""
        assert page_count(0, 5) == 0
        assert page_bounds(0, 5, 0) == (0, 0)

    def test_clamp(self) -> None:
        """Page indices are clamped to the available pages."""
        assert clamp_page_index(7, 4) == 3
        assert clamp_page_index(-2, 4) == 0
        assert clamp_page_index(3, 0) == 0


class TestSlidingWindow:
    """Tests for sliding_window()."""

    def test_near_end(self) -> None:
        """Around page 9 of 10 with size 5 the window is [5, 10)."""
        assert sliding_window(10, 9, 5) == PageInterval(5, 10)

    def test_near_start(self) -> None:
        """At the first page the window grows to the right."""
        assert sliding_window(10, 0, 5) == PageInterval(0, 5)

    def test_centered(self) -> None:
        """In the middle the window is centered on the current page."""
        assert sliding_window(10, 5, 5) == PageInterval(3, 8)

    def test_fewer_pages_than_window(self) -> None:
        """The window never exceeds the page range."""
        assert sliding_window(3, 1, 5) == PageInterval(0, 3)

    def test_single_page(self) -> None:
        """No window with one page or less."""
        assert sliding_window(1, 0, 5) is None
        assert sliding_window(0, 0, 5) is None


class TestPagesInInterval:
    """Tests for pages_in_interval()."""

    def test_plain_list(self) -> None:
        """Without callback the page indices are listed."""
        assert pages_in_interval(PageInterval(2, 5), 3) == [2, 3, 4]

    def test_callback_marks_current(self) -> None:
        """The callback learns which page is current."""
        labels = pages_in_interval(
            PageInterval(0, 3), 1, lambda page, current: f"[{page + 1}]" if current else str(page + 1)
        )
        assert labels == ["1", "[2]", "3"]

    def test_interval_length(self) -> None:
        """PageInterval has a length and can be iterated."""
        interval = PageInterval(4, 9)
        assert len(interval) == 5
        assert list(interval) == [4, 5, 6, 7, 8]
