"""
Table Context - Column Lookups for a Recomputation Pass.

The TableContext indexes the column descriptors so stages can resolve a
column key to its accessor without scanning the list each time.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from table_engine.domain.entities import Column


class TableContext:
    """Read-only view over the column descriptors of a table."""

    def __init__(self, columns: List[Column]) -> None:
        """
        Initialize table context.

        Args:
            columns: Column descriptors in display order. When two columns
                share a key, the first one wins for lookups.
        """
        self._columns = list(columns)
        self._columns_by_key: Dict[str, Column] = {}
        for column in self._columns:
            self._columns_by_key.setdefault(column.key, column)

    @property
    def columns(self) -> List[Column]:
        """All columns in display order."""
        return list(self._columns)

    @property
    def searchable_columns(self) -> List[Column]:
        return [c for c in self._columns if c.searchable]

    @property
    def sortable_keys(self) -> List[str]:
        return [c.key for c in self._columns if c.sortable]

    def get_column(self, key: str) -> Optional[Column]:
        """Get column by key."""
        return self._columns_by_key.get(key)

    def has_column(self, key: str) -> bool:
        return key in self._columns_by_key

    def value_of(self, record: Any, key: str) -> Any:
        """
        Read a column value from a record.

        Unknown column keys yield None rather than raising.
        """
        column = self._columns_by_key.get(key)
        if column is None:
            return None
        return column.accessor(record)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"TableContext(columns={[c.key for c in self._columns]})"
