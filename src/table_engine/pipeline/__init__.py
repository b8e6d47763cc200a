"""
Pipeline Package - Orchestration and Control Events.

Components:
    - ControlState: Caller-owned search/filter/sort/page state
    - TableContext: Column lookups for stages
    - TablePipeline: Search -> Filter -> Sort -> Paginate
    - TableController: Control events in, derived view out
"""

from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_context import TableContext
from table_engine.pipeline.table_controller import TableController
from table_engine.pipeline.table_pipeline import TablePipeline, default_stages

__all__ = [
    "ControlState",
    "TableContext",
    "TableController",
    "TablePipeline",
    "default_stages",
]
