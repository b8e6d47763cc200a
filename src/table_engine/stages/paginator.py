"""
Paginator Implementation.

Slices the ordered records into fixed-size pages:
    - total_pages = max(1, ceil(count / page_size))
    - The requested page is clamped into [1, total_pages]
    - A sliding window of page numbers for page buttons
    - Disabled pagination shows every record on a single page
"""

from __future__ import annotations

import math
from typing import Any, List

from table_engine.domain.entities import PageState
from table_engine.domain.value_objects import PageSlice


def total_pages_for(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), total_pages)


def page_window(current_page: int, total_pages: int, size: int) -> List[int]:
    """
    Page numbers to show as buttons, centered on the current page.

    Near either end the window is pinned so it always holds
    ``min(size, total_pages)`` numbers.
    """
    size = min(size, total_pages)
    if size <= 0:
        return []
    start = current_page - size // 2
    start = max(1, min(start, total_pages - size + 1))
    return list(range(start, start + size))


class Paginator:
    """Fixed-size page slicing with page metadata."""

    def __init__(self, enabled: bool = True, window_size: int = 5) -> None:
        """
        Initialize paginator.

        Args:
            enabled: When False, the single page holds every record
            window_size: Maximum number of page numbers exposed
        """
        self.enabled = enabled
        self.window_size = window_size

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "paginate"

    def paginate(self, records: List[Any], page: PageState) -> PageSlice:
        """
        Return the visible slice for ``page``.

        The page size is a caller precondition (> 0) and is not validated.

        Args:
            records: Filtered and sorted records
            page: Requested page and page size

        Returns:
            PageSlice with the clamped current page
        """
        count = len(records)

        if not self.enabled:
            return PageSlice(
                rows=list(records),
                current_page=1,
                page_size=max(count, page.page_size),
                total_count=count,
                total_pages=1,
                page_numbers=[1],
            )

        total_pages = total_pages_for(count, page.page_size)
        current = clamp_page(page.current_page, total_pages)
        start = (current - 1) * page.page_size

        return PageSlice(
            rows=records[start:start + page.page_size],
            current_page=current,
            page_size=page.page_size,
            total_count=count,
            total_pages=total_pages,
            page_numbers=page_window(current, total_pages, self.window_size),
        )

    def iter_pages(self, records: List[Any], page_size: int) -> List[List[Any]]:
        """Every page in order; concatenated they equal ``records``."""
        total = total_pages_for(len(records), page_size)
        return [
            self.paginate(records, PageState(current_page=n, page_size=page_size)).rows
            for n in range(1, total + 1)
        ]
