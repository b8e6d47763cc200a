"""
Selection Tracker - Row Selection Keyed by Record Identity.

Keeps the set of selected records independently of the derived view:
    - toggle / select_all / clear mutate the selection
    - Every mutation notifies the listener with the full selected records
    - Binding a new dataset reference clears the selection

Design Notes:
    - Identity is derived by a caller-supplied selector (e.g. the "id" field)
    - Insertion order of selected records is preserved
    - "Select all" is page-scoped with replace semantics
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from table_engine.domain.value_objects import IdentitySelector, SelectionListener

logger = logging.getLogger(__name__)


class SelectionTracker:
    """Selected records keyed by identity."""

    def __init__(
        self,
        identity: IdentitySelector,
        on_change: Optional[SelectionListener] = None,
    ) -> None:
        """
        Initialize selection tracker.

        Args:
            identity: Returns the identity key of a record
            on_change: Called with the full selected-record list after
                every mutating operation
        """
        self._identity = identity
        self._on_change = on_change
        self._selected: Dict[Any, Any] = {}
        self._dataset: Optional[List[Any]] = None
        self._dataset_keys: Optional[Set[Any]] = None

    # =========================================================================
    # Dataset binding
    # =========================================================================

    def bind(self, dataset: List[Any]) -> bool:
        """
        Bind the tracker to a dataset snapshot.

        Selection is cleared whenever the reference changes, even if the new
        dataset shares identity keys with the old one.

        Returns:
            True if the reference changed and the selection was reset
        """
        if dataset is self._dataset:
            return False

        self._dataset = dataset
        self._dataset_keys = {self._identity(r) for r in dataset}
        self._selected.clear()
        logger.debug(f"Selection reset for new dataset ({len(dataset)} records)")
        self._notify()
        return True

    # =========================================================================
    # Mutations
    # =========================================================================

    def toggle(self, record: Any) -> List[Any]:
        """Select the record if unselected, otherwise unselect it."""
        key = self._identity(record)
        if key in self._selected:
            del self._selected[key]
        elif self._belongs_to_dataset(key):
            self._selected[key] = record
        else:
            logger.warning(f"Ignoring selection of record {key!r} outside the dataset")
            return self.selected
        self._notify()
        return self.selected

    def select_all(self, page_records: Iterable[Any]) -> List[Any]:
        """
        Toggle selection of the visible page.

        If the selection is exactly the page, it is cleared. Otherwise it is
        replaced (not extended) by the page's records.
        """
        page = list(page_records)
        if self.is_all_selected(page, allow_empty=True):
            self._selected.clear()
        else:
            self._selected = {
                self._identity(r): r
                for r in page
                if self._belongs_to_dataset(self._identity(r))
            }
        self._notify()
        return self.selected

    def clear(self) -> List[Any]:
        self._selected.clear()
        self._notify()
        return self.selected

    # =========================================================================
    # Queries
    # =========================================================================

    def is_selected(self, record: Any) -> bool:
        return self._identity(record) in self._selected

    def is_all_selected(self, page_records: Iterable[Any], allow_empty: bool = False) -> bool:
        """
        True when the selection holds exactly the page's identity keys.

        An empty page only counts as fully selected with ``allow_empty``.
        """
        page_keys = {self._identity(r) for r in page_records}
        if not page_keys and not allow_empty:
            return False
        return page_keys == set(self._selected)

    @property
    def selected(self) -> List[Any]:
        """Selected records in selection order."""
        return list(self._selected.values())

    @property
    def selected_keys(self) -> Set[Any]:
        return set(self._selected)

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    def _belongs_to_dataset(self, key: Any) -> bool:
        return self._dataset_keys is None or key in self._dataset_keys

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __repr__(self) -> str:
        return f"SelectionTracker(selected={len(self._selected)})"
