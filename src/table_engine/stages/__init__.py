"""
Stages Package - Search, Filter, Sort and Paginate.

Stages:
    - SearchStage: Free-text match over searchable columns
    - PredicateFilterStage: Conjunction of exact-value filters
    - Sorter: Stable single-key ordering
    - Paginator: Fixed-size slicing with page metadata

Design Principles:
    - Each stage is independently testable
    - Pure functions of (records, control state); inputs never mutated
    - Unknown columns and empty inputs never raise
"""

from table_engine.stages.paginator import Paginator, clamp_page, page_window, total_pages_for
from table_engine.stages.predicate_filter import PredicateFilterStage
from table_engine.stages.search import SearchStage
from table_engine.stages.sorter import Sorter, compare_values

__all__ = [
    "Paginator",
    "PredicateFilterStage",
    "SearchStage",
    "Sorter",
    "clamp_page",
    "compare_values",
    "page_window",
    "total_pages_for",
]
