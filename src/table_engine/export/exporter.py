"""
Exporter - Delimited Text Export.

Serializes the filtered and sorted (not paginated) records:
    - Header: column titles joined by the delimiter
    - Body: one line per record, each column's value joined by the delimiter
    - String values wrapped in double quotes; None renders empty

Known limitation:
    Delimiter, quote and newline characters inside values are NOT escaped.
    Such values produce text a strict CSV reader may split differently.
    The exporter logs a warning when it emits one.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from table_engine.config.models import ExportConfig
from table_engine.domain.accessors import stringify
from table_engine.domain.entities import Column
from table_engine.domain.value_objects import ExportResult

logger = logging.getLogger(__name__)

QUOTE = '"'


class Exporter:
    """Builds delimited text from records and columns."""

    def __init__(self, config: Optional[ExportConfig] = None) -> None:
        """
        Initialize exporter.

        Args:
            config: Export settings (delimiter, filename, ...)
        """
        self.config = config or ExportConfig()

    def export(self, records: List[Any], columns: List[Column]) -> ExportResult:
        """
        Export records to delimited text.

        Args:
            records: Records in final order (filtered and sorted)
            columns: Columns to emit, in order

        Returns:
            ExportResult with the text and download hints
        """
        content = self.build_text(records, columns)
        return ExportResult(
            content=content,
            filename=self.config.filename,
            media_type=self.config.media_type,
            row_count=len(records),
        )

    def build_text(self, records: List[Any], columns: List[Column]) -> str:
        """Header line, terminator, then body lines joined by the terminator."""
        terminator = self.config.line_terminator
        header = self.config.delimiter.join(c.title for c in columns)
        body = terminator.join(self._format_row(r, columns) for r in records)
        return f"{header}{terminator}{body}"

    def _format_row(self, record: Any, columns: List[Column]) -> str:
        return self.config.delimiter.join(
            self.format_value(column.accessor(record)) for column in columns
        )

    def format_value(self, value: Any) -> str:
        """Quote strings; render everything else as plain text."""
        if isinstance(value, str):
            if self.config.warn_on_unescaped and self._needs_escaping(value):
                logger.warning(
                    f"Exported value {value[:40]!r} contains delimiter, quote or "
                    f"newline characters and is not escaped"
                )
            return f"{QUOTE}{value}{QUOTE}"
        return stringify(value)

    def _needs_escaping(self, value: str) -> bool:
        return (
            self.config.delimiter in value
            or QUOTE in value
            or "\n" in value
            or "\r" in value
        )
