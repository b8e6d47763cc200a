"""
Search Stage Implementation.

Narrows records by free-text match:
    - Only columns flagged searchable participate
    - Values are stringified (None -> "") and lower-cased
    - A record is kept if any searchable column contains the term
    - An empty term keeps every record
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from table_engine.domain.accessors import stringify

if TYPE_CHECKING:
    from table_engine.domain.entities import Column
    from table_engine.pipeline.control_state import ControlState
    from table_engine.pipeline.table_context import TableContext


class SearchStage:
    """Case-insensitive substring search over searchable columns."""

    def __init__(self, enabled: bool = True) -> None:
        """
        Initialize search stage.

        Args:
            enabled: When False, the stage passes all records through
        """
        self.enabled = enabled

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "search"

    def apply(
        self,
        records: List[Any],
        state: "ControlState",
        context: "TableContext",
    ) -> List[Any]:
        """
        Apply the search term.

        Args:
            records: Records to search
            state: Control state carrying the search term
            context: Columns of the table

        Returns:
            Records with at least one matching searchable column
        """
        term = state.search_term
        if not self.enabled or not term:
            return list(records)

        needle = term.lower()
        columns = context.searchable_columns
        return [r for r in records if self._matches(r, needle, columns)]

    @staticmethod
    def _matches(record: Any, needle: str, columns: List["Column"]) -> bool:
        for column in columns:
            if needle in stringify(column.accessor(record)).lower():
                return True
        return False
