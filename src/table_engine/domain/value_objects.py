"""
Value Objects for Domain Layer.

Immutable results produced by the pipeline: per-stage audit entries, the
derived view and the export payload.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from table_engine.domain.entities import SortState


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# A flat, caller-owned dataset snapshot
Records = List[Any]

# Derives the identity key of a record
IdentitySelector = Callable[[Any], Any]

# Receives the full selected-record list after each selection change
SelectionListener = Callable[[List[Any]], None]


class StageResult(BaseModel):
    """Result of a single pipeline stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    details: Dict[str, Any] = Field(default_factory=dict)

    @property
    def reduction_ratio(self) -> float:
        """Share of rows dropped by this stage (0.0 = none, 1.0 = all)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class PageSlice(BaseModel):
    """Output of the paginator."""

    rows: List[Any] = Field(default_factory=list)
    current_page: int = 1
    page_size: int = 10
    total_count: int = 0
    total_pages: int = 1
    page_numbers: List[int] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def start_index(self) -> int:
        """1-based position of the first visible row, 0 when empty."""
        if self.total_count == 0:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based position of the last visible row."""
        return min(self.current_page * self.page_size, self.total_count)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class TableView(BaseModel):
    """Derived view for the current control state."""

    rows: List[Any] = Field(default_factory=list, description="Visible page")
    ordered_rows: List[Any] = Field(
        default_factory=list, description="Filtered and sorted, not paginated"
    )
    total_count: int = 0
    total_pages: int = 1
    current_page: int = 1
    page_size: int = 10
    start_index: int = 0
    end_index: int = 0
    has_previous: bool = False
    has_next: bool = False
    page_numbers: List[int] = Field(default_factory=list)
    sort: Optional[SortState] = None
    loading: bool = False
    empty_text: str = "No data available"
    audit_trail: List[StageResult] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """No rows survived search and filtering (not the same as loading)."""
        return self.total_count == 0


class ExportResult(BaseModel):
    """Delimited text handed to the caller; the engine writes no files."""

    content: str
    filename: str = "table-export.csv"
    media_type: str = "text/csv"
    row_count: int = 0

    model_config = {"frozen": True}
