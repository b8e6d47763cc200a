"""
Predicate Filter Stage Implementation.

Narrows records by a conjunction of exact-value filters:
    - Filters with a falsy value are inactive and skipped
    - Each active filter compares its column's value strictly
    - All active filters must hold (logical AND)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

from table_engine.domain.accessors import strict_equals

if TYPE_CHECKING:
    from table_engine.domain.entities import Filter
    from table_engine.pipeline.control_state import ControlState
    from table_engine.pipeline.table_context import TableContext

logger = logging.getLogger(__name__)


class PredicateFilterStage:
    """Filter records by exact column values."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "predicate_filter"

    def apply(
        self,
        records: List[Any],
        state: "ControlState",
        context: "TableContext",
    ) -> List[Any]:
        """
        Apply active filters.

        A filter naming an unknown column reads None for every record, which
        never equals an active value, so it rejects everything.

        Args:
            records: Records to filter
            state: Control state carrying the filter list
            context: Columns of the table

        Returns:
            Records satisfying every active filter
        """
        active = state.active_filters
        if not self.enabled or not active:
            return list(records)

        for f in active:
            if not context.has_column(f.key):
                logger.warning(f"Filter on unknown column '{f.key}' rejects all records")

        return [r for r in records if self._passes(r, active, context)]

    @staticmethod
    def _passes(record: Any, filters: List["Filter"], context: "TableContext") -> bool:
        return all(
            strict_equals(context.value_of(record, f.key), f.value) for f in filters
        )
