"""
Observability Package - Structured Logging and Metrics.

Components:
    - ObservabilityManager: structlog-based audit logger and metrics
      collector with correlation IDs
"""

from table_engine.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
    "set_correlation_id",
]
