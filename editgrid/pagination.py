"""Pagination arithmetic.

Pure functions of row count, page size and current page index. Nothing in
here touches row data; the grid slices its active view with ``page_bounds``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PageInterval:
    """Half-open interval of page indices ``[start_page_index, end_page_index)``."""

    start_page_index: int
    end_page_index: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start_page_index, self.end_page_index))

    def __len__(self) -> int:
        return self.end_page_index - self.start_page_index


def page_count(row_count: int, page_size: int) -> int:
    """Number of pages, 1 when pagination is disabled (``page_size == 0``)."""
    if page_size <= 0:
        return 1
    return -(-row_count // page_size)


def clamp_page_index(page_index: int, pages: int) -> int:
    """Clamp a page index to ``[0, pages - 1]``."""
    return max(0, min(page_index, pages - 1))


def page_bounds(row_count: int, page_size: int, page_index: int) -> tuple[int, int]:
    """Row slice ``[start, end)`` displayed on a page."""
    if page_size <= 0:
        return 0, row_count
    start = page_index * page_size
    return min(start, row_count), min(row_count, start + page_size)


def sliding_window(pages: int, current_page_index: int, window_size: int) -> PageInterval | None:
    """Window of ``window_size`` page indices around the current page.

    The window is centered on the current page and clamped to ``[0, pages]``;
    when a boundary cuts it short it grows toward the other boundary.

    Returns
    -------
    PageInterval or None
        None when there is at most one page.
    """
    if pages <= 1:
        return None

    half = window_size // 2
    start = max(0, current_page_index - half)
    end = min(pages, current_page_index - half + window_size)

    if end - start < window_size:
        missing = window_size - (end - start)
        start = max(0, start - missing)
        end = min(pages, end + missing)

    return PageInterval(start_page_index=start, end_page_index=end)


def pages_in_interval(
    interval: PageInterval,
    current_page_index: int,
    callback: Callable[[int, bool], Any] | None = None,
) -> list[Any]:
    """List the page indices of an interval, optionally mapped through ``callback``.

    The callback receives the page index and whether it is the current page.
    """
    if callback is None:
        return list(interval)
    return [callback(page, page == current_page_index) for page in interval]
