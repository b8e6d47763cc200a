"""
Dataset Validator - Check Snapshot Preconditions.

Checks the caller preconditions the engine relies on but does not enforce:
    - Identity keys are unique within the dataset snapshot
    - Column keys are unique
    - Filters and the active sort name existing columns
    - Every record has a value for the active sort column

Design Notes:
    - Reports issues instead of failing; the pipeline logs them as anomalies
    - raise_for_issues() is available for callers that want fail-fast
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

from table_engine.config.models import ValidationConfig
from table_engine.domain.value_objects import IdentitySelector
from table_engine.errors import DatasetValidationError

if TYPE_CHECKING:
    from table_engine.pipeline.control_state import ControlState
    from table_engine.pipeline.table_context import TableContext

logger = logging.getLogger(__name__)

# Keep messages readable on large snapshots
MAX_REPORTED_KEYS = 5


@dataclass
class ValidationReport:
    """Result of dataset validation."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_issues(self) -> bool:
        return bool(self.errors or self.warnings)

    def raise_for_issues(self) -> None:
        """Raise DatasetValidationError if any errors were found."""
        if self.errors:
            raise DatasetValidationError(self.errors)


class DatasetValidator:
    """Validates a dataset snapshot against columns and control state."""

    def __init__(
        self,
        identity: Optional[IdentitySelector] = None,
        config: Optional[ValidationConfig] = None,
    ) -> None:
        """
        Initialize dataset validator.

        Args:
            identity: Identity selector; identity checks are skipped without it
            config: Which checks to run
        """
        self.identity = identity
        self.config = config or ValidationConfig()

    def validate(
        self,
        records: List[Any],
        context: "TableContext",
        state: Optional["ControlState"] = None,
    ) -> ValidationReport:
        """
        Run all enabled checks.

        Args:
            records: Dataset snapshot
            context: Columns of the table
            state: Control state whose filters and sort are checked

        Returns:
            ValidationReport with errors and warnings
        """
        report = ValidationReport()
        if not self.config.enabled:
            return report

        self._check_column_keys(context, report)
        if self.identity is not None and self.config.check_identity_keys:
            self._check_identity_keys(records, report)
        if state is not None:
            self._check_state_columns(state, context, report)
            if self.config.check_sort_keys:
                self._check_sort_values(records, state, context, report)

        if report.has_issues:
            logger.debug(
                f"Dataset validation: {len(report.errors)} errors, "
                f"{len(report.warnings)} warnings"
            )
        return report

    def _check_column_keys(self, context: "TableContext", report: ValidationReport) -> None:
        counts = Counter(c.key for c in context.columns)
        duplicates = sorted(k for k, n in counts.items() if n > 1)
        if duplicates:
            report.errors.append(f"Duplicate column keys: {duplicates}")

    def _check_identity_keys(self, records: List[Any], report: ValidationReport) -> None:
        counts = Counter(self.identity(r) for r in records)
        duplicates = [k for k, n in counts.items() if n > 1]
        if duplicates:
            shown = duplicates[:MAX_REPORTED_KEYS]
            report.errors.append(
                f"{len(duplicates)} duplicate identity keys, e.g. {shown}"
            )

    def _check_state_columns(
        self,
        state: "ControlState",
        context: "TableContext",
        report: ValidationReport,
    ) -> None:
        for f in state.active_filters:
            if not context.has_column(f.key):
                report.warnings.append(f"Filter references unknown column '{f.key}'")

        if state.sort is not None:
            column = context.get_column(state.sort.key)
            if column is None:
                report.warnings.append(f"Sort references unknown column '{state.sort.key}'")
            elif not column.sortable:
                report.warnings.append(f"Sort column '{state.sort.key}' is not sortable")

    def _check_sort_values(
        self,
        records: List[Any],
        state: "ControlState",
        context: "TableContext",
        report: ValidationReport,
    ) -> None:
        if state.sort is None or not context.has_column(state.sort.key):
            return
        missing = sum(1 for r in records if context.value_of(r, state.sort.key) is None)
        if missing:
            report.warnings.append(
                f"{missing} of {len(records)} records have no value for sort "
                f"column '{state.sort.key}'"
            )
