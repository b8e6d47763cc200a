"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger records
what each recomputation pass did, which control events triggered it and any
anomalies found in the dataset.

Design Notes:
    - Structured logging (JSON format recommended)
    - Correlation ID per recomputation pass
    - No side effects on derived views
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLoggerProtocol(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the start of a pipeline stage.

        Args:
            stage_name: Name of the stage
            input_count: Number of records entering the stage
            metadata: Optional additional context
        """
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the end of a pipeline stage.

        Args:
            stage_name: Name of the stage
            output_count: Number of records leaving the stage
            duration_seconds: Time taken for the stage
            metadata: Optional additional context
        """
        ...

    def log_control_event(
        self,
        event: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a control event received from the presentation layer."""
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an anomaly or warning.

        Args:
            message: Description of the anomaly
            severity: INFO, WARNING, or ERROR
            context: Optional additional context
        """
        ...
