"""
Interfaces Layer - Abstract Protocols for Dependencies.

High-level modules (pipeline, controller) depend on these abstractions,
not on concrete adapters.

Protocols:
    - TableStageProtocol: Search, filter and sort stages
    - AuditLoggerProtocol: Audit trail of recomputation passes
    - MetricsCollectorProtocol: Timings and counts
"""

from table_engine.interfaces.audit_logger import AuditLoggerProtocol
from table_engine.interfaces.metrics_collector import MetricsCollectorProtocol
from table_engine.interfaces.table_stage import TableStageProtocol

__all__ = [
    "AuditLoggerProtocol",
    "MetricsCollectorProtocol",
    "TableStageProtocol",
]
