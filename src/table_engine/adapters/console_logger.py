"""
Console Audit Logger.

A simple audit logger that writes one line per event to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every stage and event. If False, only
                anomalies.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._log("INFO", f"Starting {stage_name} with {input_count} records")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self._verbose:
            return
        self._log(
            "INFO",
            f"Completed {stage_name}: {output_count} records "
            f"({duration_seconds * 1000:.2f}ms)",
        )

    def log_control_event(
        self,
        event: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            details = ", ".join(f"{k}={v!r}" for k, v in (data or {}).items())
            self._log("DEBUG", f"Event {event}" + (f" ({details})" if details else ""))

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
