"""
Table Controller - Control Events In, Derived View Out.

The TableController is the single entry point for presentation layers. It
holds the dataset reference, the caller's ControlState, a SelectionTracker
and the Exporter, and turns each control event into a state change followed
by a full synchronous recomputation.

Event rules:
    - Search or filter changes reset to page 1
    - Page requests are clamped into [1, total_pages]
    - Sort clicks on unknown or non-sortable columns are ignored
    - Events for disabled features are ignored (logged at debug level)
    - Replacing the dataset reference clears the selection
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from table_engine.config.models import FeatureConfig, TableConfig
from table_engine.domain.entities import Filter, SortState
from table_engine.domain.value_objects import ExportResult, IdentitySelector, TableView
from table_engine.export.exporter import Exporter
from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_pipeline import TablePipeline
from table_engine.selection.selection_tracker import SelectionTracker

logger = logging.getLogger(__name__)


class TableController:
    """Owns one table instance's dataset, selection and derived view."""

    def __init__(
        self,
        records: List[Any],
        pipeline: TablePipeline,
        selection: SelectionTracker,
        exporter: Exporter,
        identity: IdentitySelector,
        state: Optional[ControlState] = None,
        config: Optional[TableConfig] = None,
    ) -> None:
        """
        Initialize controller and compute the first view.

        Args:
            records: Initial dataset snapshot
            pipeline: Configured pipeline
            selection: Selection tracker (bound to ``records`` here)
            exporter: Exporter for export requests
            identity: Identity selector, used for row expansion
            state: Caller-owned control state (created from config if None)
            config: Table configuration (defaults to the pipeline's)
        """
        self.pipeline = pipeline
        self.selection = selection
        self.exporter = exporter
        self.identity = identity
        self.config = config or pipeline.config
        self.state = state or ControlState.with_page_size(self.config.pagination.page_size)
        self._records = records
        self.selection.bind(records)
        self._view = self._recompute()

    # =========================================================================
    # View access
    # =========================================================================

    @property
    def view(self) -> TableView:
        """Derived view for the current control state."""
        return self._view

    @property
    def records(self) -> List[Any]:
        return self._records

    @property
    def features(self) -> FeatureConfig:
        return self.config.features

    # =========================================================================
    # Search and filters
    # =========================================================================

    def set_search_term(self, term: str) -> TableView:
        if not self.features.searchable:
            return self._ignored("search", term=term)
        self._log_event("search", term=term)
        self.state.set_search_term(term)
        return self._refresh()

    def set_filter(self, new_filter: Filter) -> TableView:
        if not self.features.filterable:
            return self._ignored("filter", key=new_filter.key)
        self._log_event("filter", key=new_filter.key, value=new_filter.value)
        self.state.set_filter(new_filter)
        return self._refresh()

    def clear_filters(self) -> TableView:
        self._log_event("clear_filters")
        self.state.clear_filters()
        return self._refresh()

    # =========================================================================
    # Sorting and paging
    # =========================================================================

    def click_sort(self, key: str) -> TableView:
        """Activate ``key`` ascending, or flip direction if already active."""
        column = self.pipeline.context.get_column(key)
        if column is None or not column.sortable:
            return self._ignored("sort", key=key, reason="not a sortable column")
        sort_state: SortState = self.state.click_sort(key)
        self._log_event("sort", key=key, direction=sort_state.direction.value)
        return self._refresh()

    def change_page(self, page: int) -> TableView:
        if not self.features.pagination:
            return self._ignored("page", page=page)
        self._log_event("page", page=page)
        self.state.go_to_page(page)
        return self._refresh()

    def next_page(self) -> TableView:
        return self.change_page(self._view.current_page + 1)

    def previous_page(self) -> TableView:
        return self.change_page(self._view.current_page - 1)

    # =========================================================================
    # Selection
    # =========================================================================

    def toggle_row(self, record: Any) -> List[Any]:
        """Toggle one row; returns the full selection."""
        if not self.features.selectable:
            self._ignored("toggle_row")
            return self.selection.selected
        self._log_event("toggle_row", key=self.identity(record))
        return self.selection.toggle(record)

    def toggle_select_all(self) -> List[Any]:
        """Select-all over the visible page, with page-scoped replace semantics."""
        if not self.features.selectable:
            self._ignored("select_all")
            return self.selection.selected
        self._log_event("select_all", page=self._view.current_page)
        return self.selection.select_all(self._view.rows)

    def clear_selection(self) -> List[Any]:
        self._log_event("clear_selection")
        return self.selection.clear()

    def is_selected(self, record: Any) -> bool:
        return self.selection.is_selected(record)

    @property
    def is_all_selected(self) -> bool:
        """Header checkbox state for the visible page."""
        return self.selection.is_all_selected(self._view.rows)

    # =========================================================================
    # Misc events
    # =========================================================================

    def toggle_expanded(self, record: Any) -> Any:
        """Expand ``record``'s detail row (one at a time); returns expanded key."""
        self.state.toggle_expanded(self.identity(record))
        return self.state.expanded_key

    def is_expanded(self, record: Any) -> bool:
        return self.state.expanded_key is not None and self.state.expanded_key == self.identity(record)

    def set_loading(self, loading: bool) -> TableView:
        self.state.loading = loading
        return self._refresh()

    def replace_dataset(self, records: List[Any]) -> TableView:
        """
        Swap in a new dataset snapshot.

        A different list object always clears the selection; passing the
        same object only recomputes.
        """
        self._log_event("replace_dataset", size=len(records))
        self._records = records
        if self.selection.bind(records):
            self.state.expanded_key = None
        return self._refresh()

    def export(self) -> Optional[ExportResult]:
        """Export filtered and sorted records; None when export is disabled."""
        if not self.features.exportable:
            self._ignored("export")
            return None
        self._log_event("export", rows=len(self._view.ordered_rows))
        return self.exporter.export(self._view.ordered_rows, self.pipeline.columns)

    # =========================================================================
    # Internals
    # =========================================================================

    def _recompute(self) -> TableView:
        view = self.pipeline.run(self._records, self.state)
        if view.current_page != self.state.page.current_page:
            self.state.go_to_page(view.current_page)
        return view

    def _refresh(self) -> TableView:
        self._view = self._recompute()
        return self._view

    def _log_event(self, event: str, **data: Any) -> None:
        self.pipeline.audit_logger.log_control_event(event, data)

    def _ignored(self, event: str, **data: Any) -> TableView:
        logger.debug(f"Ignoring {event} event {data}: feature disabled or not applicable")
        return self._view

    def __repr__(self) -> str:
        return (
            f"TableController(records={len(self._records)}, "
            f"visible={len(self._view.rows)}, page={self._view.current_page}/"
            f"{self._view.total_pages}, selected={self.selection.selected_count})"
        )
