"""
Table Engine - Search, Filter, Sort and Paginate Tabular Records.

A generic engine that derives a display-ready view from a flat collection
of records and column descriptors. Presentation layers (widgets, templates,
terminal tables) consume the derived view and feed raw control events back
into the engine.

Architecture:
    - Ports & Adapters: stages, loggers and metrics behind Protocols
    - Explicit, caller-owned control state (no hidden singletons)
    - Full synchronous recomputation on every control event
    - Configuration-driven defaults via YAML

Main Components:
    - domain: Columns, filters, sort/page state, derived view
    - stages: SearchStage, PredicateFilterStage, Sorter, Paginator
    - selection: SelectionTracker keyed by record identity
    - export: Delimited text Exporter
    - pipeline: TablePipeline orchestration and TableController events
    - adapters / observability: audit logging and metrics
    - config: Pydantic models and YAML loader

Example:
    >>> from table_engine import Column, create_controller, field_accessor
    >>> columns = [Column(key="name", title="Name", accessor=field_accessor("name"))]
    >>> controller = create_controller(records, columns)
    >>> controller.click_sort("name")
    >>> print(controller.view.rows)

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Table Engine.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import table_engine
        >>> table_engine.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("table_engine").setLevel(level)


from table_engine.domain.accessors import attribute_accessor, field_accessor  # noqa: E402
from table_engine.domain.entities import (  # noqa: E402
    Column,
    Filter,
    FilterOption,
    PageState,
    SortDirection,
    SortState,
)
from table_engine.domain.value_objects import ExportResult, StageResult, TableView  # noqa: E402
from table_engine.factory import create_controller  # noqa: E402

__all__ = [
    "configure_logging",
    "attribute_accessor",
    "field_accessor",
    "Column",
    "Filter",
    "FilterOption",
    "PageState",
    "SortDirection",
    "SortState",
    "ExportResult",
    "StageResult",
    "TableView",
    "create_controller",
]
