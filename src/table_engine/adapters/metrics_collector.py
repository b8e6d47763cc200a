"""
In-Memory Metrics Collector.

Stores every recorded metric so tests and debug tooling can inspect how
long recomputation passes took and how many records each stage kept.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a gauge metric."""
        self._record(name, "gauge", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: count, total, min, max and last value."""
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                values = [e["value"] for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "min": min(values),
                    "max": max(values),
                    "last": values[-1],
                }
            return summary

    def get_values(self, name: str, tags: Optional[Dict[str, str]] = None) -> List[float]:
        """Raw values for a metric, optionally restricted to matching tags."""
        with self._lock:
            entries = self._metrics.get(name, [])
            if tags:
                entries = [
                    e for e in entries
                    if all(e["tags"].get(k) == v for k, v in tags.items())
                ]
            return [e["value"] for e in entries]

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            self._metrics.setdefault(name, []).append(
                {
                    "type": metric_type,
                    "value": value,
                    "tags": tags or {},
                    "timestamp": datetime.now().isoformat(),
                }
            )
