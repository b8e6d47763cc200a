"""
Control State - Caller-Owned Parameters Driving Recomputation.

The ControlState holds search term, filters, sort and page. It is owned by
the caller (or a TableController acting for it) and passed into every
pipeline run; the engine keeps no global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from table_engine.domain.entities import Filter, PageState, SortState


@dataclass
class ControlState:
    """Mutable control state for one table instance."""

    search_term: str = ""
    filters: List[Filter] = field(default_factory=list)
    sort: Optional[SortState] = None
    page: PageState = field(default_factory=PageState)
    expanded_key: Any = None
    loading: bool = False

    @classmethod
    def with_page_size(cls, page_size: int) -> "ControlState":
        return cls(page=PageState(current_page=1, page_size=page_size))

    @property
    def active_filters(self) -> List[Filter]:
        """Filters that take part in evaluation (non-falsy values)."""
        return [f for f in self.filters if f.is_active]

    def set_search_term(self, term: str) -> None:
        """Change the search term; always returns to the first page."""
        self.search_term = term or ""
        self.reset_page()

    def set_filter(self, new_filter: Filter) -> None:
        """
        Replace any filter on the same key.

        A filter with a falsy value removes the existing one instead of being
        stored. Always returns to the first page.
        """
        remaining = [f for f in self.filters if f.key != new_filter.key]
        if new_filter.is_active:
            remaining.append(new_filter)
        self.filters = remaining
        self.reset_page()

    def clear_filters(self) -> None:
        self.filters = []
        self.reset_page()

    def click_sort(self, key: str) -> SortState:
        """Apply a sort-control click and return the new sort state."""
        if self.sort is None:
            self.sort = SortState(key=key)
        else:
            self.sort = self.sort.next_for(key)
        return self.sort

    def go_to_page(self, page: int) -> None:
        self.page = self.page.at(page)

    def reset_page(self) -> None:
        self.page = self.page.at(1)

    def toggle_expanded(self, key: Any) -> None:
        """Expand the row with ``key``, or collapse it if already expanded."""
        self.expanded_key = None if self.expanded_key == key else key
