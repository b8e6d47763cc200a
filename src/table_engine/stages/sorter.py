"""
Sorter Implementation.

Orders records by the single active sort column:
    - No active sort keeps the input order
    - Numeric comparison when both values are numbers
    - Lexicographic string comparison otherwise
    - Stable in both directions (ties keep their input order)
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, List, Optional

from table_engine.domain.accessors import is_numeric, stringify

if TYPE_CHECKING:
    from table_engine.domain.entities import SortState
    from table_engine.pipeline.control_state import ControlState
    from table_engine.pipeline.table_context import TableContext

logger = logging.getLogger(__name__)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison used for sorting column values."""
    if is_numeric(left) and is_numeric(right):
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    left_text, right_text = stringify(left), stringify(right)
    if left_text < right_text:
        return -1
    if left_text > right_text:
        return 1
    return 0


class Sorter:
    """Stable single-key sort."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "sort"

    def apply(
        self,
        records: List[Any],
        state: "ControlState",
        context: "TableContext",
    ) -> List[Any]:
        """Sort records by ``state.sort``."""
        return self.sort(records, state.sort, context)

    def sort(
        self,
        records: List[Any],
        sort_state: Optional["SortState"],
        context: "TableContext",
    ) -> List[Any]:
        """
        Sort records by one column.

        Args:
            records: Records to order (not mutated)
            sort_state: Active sort, or None
            context: Columns of the table

        Returns:
            New ordered list
        """
        if sort_state is None:
            return list(records)

        column = context.get_column(sort_state.key)
        if column is None:
            logger.warning(f"Sort on unknown column '{sort_state.key}' ignored")
            return list(records)

        # sorted() is stable and keeps ties in input order even with reverse=True
        keyed = cmp_to_key(compare_values)
        return sorted(
            records,
            key=lambda record: keyed(column.accessor(record)),
            reverse=sort_state.descending,
        )
