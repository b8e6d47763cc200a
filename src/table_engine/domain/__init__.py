"""
Domain Layer - Entities and Value Objects.

Entities:
    - Column: Key, title, accessor and sort/search flags
    - SortState / SortDirection: The single active sort
    - Filter / FilterOption: Exact-value predicates
    - PageState: Current page and page size

Value Objects:
    - StageResult: Audit entry per pipeline stage
    - PageSlice: Paginator output
    - TableView: Derived view handed to presentation layers
    - ExportResult: Delimited export text
"""

from table_engine.domain.accessors import (
    attribute_accessor,
    field_accessor,
    is_numeric,
    strict_equals,
    stringify,
)
from table_engine.domain.entities import (
    Column,
    Filter,
    FilterOption,
    PageState,
    SortDirection,
    SortState,
)
from table_engine.domain.value_objects import (
    ExportResult,
    PageSlice,
    StageResult,
    TableView,
)

__all__ = [
    "attribute_accessor",
    "field_accessor",
    "is_numeric",
    "strict_equals",
    "stringify",
    "Column",
    "Filter",
    "FilterOption",
    "PageState",
    "SortDirection",
    "SortState",
    "ExportResult",
    "PageSlice",
    "StageResult",
    "TableView",
]
