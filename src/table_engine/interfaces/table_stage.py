"""
Table Stage Protocol.

Defines the interface shared by the narrowing and ordering stages of the
pipeline (search, predicate filter, sort). Each stage is a pure function of
the incoming records and the control state.

The stage is responsible for:
    - Returning a new list (input lists are never mutated)
    - Reading record values only through the context's columns
    - Exposing a unique name for the audit trail

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Stages are stateless (all state via ControlState)
    - Configuration injected via constructor
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from table_engine.pipeline.control_state import ControlState
    from table_engine.pipeline.table_context import TableContext


@runtime_checkable
class TableStageProtocol(Protocol):
    """Abstract interface for pipeline stages."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        ...

    def apply(
        self,
        records: List[Any],
        state: "ControlState",
        context: "TableContext",
    ) -> List[Any]:
        """
        Apply stage logic to records.

        Args:
            records: Output of the previous stage
            state: Current control state
            context: Columns and lookups for the current snapshot

        Returns:
            New list of records for the next stage
        """
        ...
