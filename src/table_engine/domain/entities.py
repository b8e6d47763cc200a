"""
Core Domain Entities.

This module defines the fundamental entities of the Table Engine domain:
column descriptors and the pieces of control state (sort, filters, page)
that drive recomputation of the derived view.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Optional, Union

from pydantic import BaseModel, Field


class SortDirection(str, Enum):
    """Direction of the active sort."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class Column(BaseModel):
    """Describes one column of the table and how to read it from a record."""

    key: str = Field(..., description="Unique column key")
    title: str = Field(..., description="Header text, also used as export header")
    accessor: Callable[[Any], Any] = Field(
        ..., description="Reads this column's value from a record"
    )
    sortable: bool = Field(default=False, description="Sort control enabled")
    searchable: bool = Field(default=False, description="Participates in search")
    render: Optional[Callable[[Any, Any], Any]] = Field(
        default=None, description="Opaque display callback (value, record)"
    )
    width: Optional[Union[str, int]] = Field(
        default=None, description="Opaque display hint"
    )

    model_config = {"frozen": True}

    def value_of(self, record: Any) -> Any:
        """Read this column's value from a record."""
        return self.accessor(record)


class SortState(BaseModel):
    """The single active sort: column key plus direction."""

    key: str
    direction: SortDirection = SortDirection.ASC

    model_config = {"frozen": True}

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def next_for(self, key: str) -> "SortState":
        """
        State after clicking the sort control of ``key``.

        Clicking the active key flips the direction; any other key becomes
        active in ascending order.
        """
        if key == self.key:
            return SortState(key=key, direction=self.direction.flipped())
        return SortState(key=key, direction=SortDirection.ASC)


class FilterOption(BaseModel):
    """One enumerated choice offered for a filter."""

    label: str
    value: Any

    model_config = {"frozen": True}


class Filter(BaseModel):
    """Exact-value predicate on one column. Falsy values are inactive."""

    key: str = Field(..., description="Column key the predicate applies to")
    value: Any = Field(default=None, description="Required value; falsy = inactive")
    label: Optional[str] = Field(default=None, description="UI label")
    options: List[FilterOption] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_active(self) -> bool:
        return bool(self.value)

    @property
    def display_label(self) -> str:
        return self.label or f"Filter by {self.key}"

    def with_value(self, value: Any) -> "Filter":
        return self.model_copy(update={"value": value})


class PageState(BaseModel):
    """Current page (1-based) and page size."""

    current_page: int = 1
    page_size: int = 10

    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    def at(self, page: int) -> "PageState":
        return PageState(current_page=page, page_size=self.page_size)
