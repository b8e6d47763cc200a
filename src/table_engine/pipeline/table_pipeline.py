"""
Table Pipeline - Main Orchestrator.

The TablePipeline derives a TableView from a dataset snapshot and a control
state: search, predicate filter and sort stages run in order, then the
paginator slices the result. Every run recomputes from the raw snapshot.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from table_engine.config.models import TableConfig
from table_engine.domain.entities import Column
from table_engine.domain.value_objects import StageResult, TableView
from table_engine.interfaces.audit_logger import AuditLoggerProtocol
from table_engine.interfaces.metrics_collector import MetricsCollectorProtocol
from table_engine.interfaces.table_stage import TableStageProtocol
from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_context import TableContext
from table_engine.stages.paginator import Paginator
from table_engine.stages.predicate_filter import PredicateFilterStage
from table_engine.stages.search import SearchStage
from table_engine.stages.sorter import Sorter
from table_engine.validation.dataset_validator import DatasetValidator

logger = logging.getLogger(__name__)


def default_stages(config: TableConfig) -> List[TableStageProtocol]:
    """Search, predicate filter and sort, honoring enabled features."""
    return [
        SearchStage(enabled=config.features.searchable),
        PredicateFilterStage(enabled=config.features.filterable),
        Sorter(),
    ]


class TablePipeline:
    """Orchestrates one full recomputation of the derived view."""

    def __init__(
        self,
        columns: List[Column],
        config: TableConfig,
        audit_logger: AuditLoggerProtocol,
        metrics_collector: MetricsCollectorProtocol,
        stages: Optional[List[TableStageProtocol]] = None,
        paginator: Optional[Paginator] = None,
        validator: Optional[DatasetValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            columns: Column descriptors in display order
            config: Table configuration
            audit_logger: For audit trail
            metrics_collector: For timings and counts
            stages: Ordered narrowing/ordering stages (default: search,
                predicate filter, sort)
            paginator: Page slicer (default from config)
            validator: Optional dataset validator run before the stages
        """
        self.context = TableContext(columns)
        self.config = config
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.stages = stages if stages is not None else default_stages(config)
        self.paginator = paginator or Paginator(
            enabled=config.features.pagination,
            window_size=config.pagination.page_window,
        )
        self.validator = validator

    @property
    def columns(self) -> List[Column]:
        return self.context.columns

    def run(self, records: List[Any], state: ControlState) -> TableView:
        """
        Derive the view for ``state``.

        The control state is read, never modified; the returned view carries
        the clamped current page for the caller to store back.

        Args:
            records: Dataset snapshot (not mutated)
            state: Current control state

        Returns:
            TableView with the visible page and page metadata
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)

        # 1. Validate snapshot preconditions
        if self.validator is not None:
            self._validate(records, state)

        # 2. Narrow and order
        current = list(records)
        audit_trail: List[StageResult] = []
        for stage in self.stages:
            stage_result, current = self._execute_stage(stage, current, state)
            audit_trail.append(stage_result)

        # 3. Paginate
        page_start = time.perf_counter()
        page = self.paginator.paginate(current, state.page)
        audit_trail.append(
            StageResult(
                stage_name=self.paginator.name,
                input_count=len(current),
                output_count=len(page.rows),
                duration_seconds=time.perf_counter() - page_start,
                details={"current_page": page.current_page, "total_pages": page.total_pages},
            )
        )
        if page.current_page != state.page.current_page:
            logger.debug(
                f"Clamped page {state.page.current_page} -> {page.current_page} "
                f"(total_pages={page.total_pages})"
            )

        # 4. Record totals
        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("recompute_total_seconds", total_duration)
        self.metrics_collector.record_gauge("visible_records", len(page.rows))

        return TableView(
            rows=page.rows,
            ordered_rows=current,
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            page_size=page.page_size,
            start_index=page.start_index,
            end_index=page.end_index,
            has_previous=page.has_previous,
            has_next=page.has_next,
            page_numbers=page.page_numbers,
            sort=state.sort,
            loading=state.loading,
            empty_text=self.config.display.empty_text,
            audit_trail=audit_trail,
            metadata=self._build_metadata(correlation_id, total_duration, len(records)),
        )

    def _validate(self, records: List[Any], state: ControlState) -> None:
        report = self.validator.validate(records, self.context, state)
        for message in report.errors:
            self.audit_logger.log_anomaly(message, severity="ERROR")
        for message in report.warnings:
            self.audit_logger.log_anomaly(message, severity="WARNING")

    def _execute_stage(
        self,
        stage: TableStageProtocol,
        records: List[Any],
        state: ControlState,
    ) -> tuple[StageResult, List[Any]]:
        """Execute a single stage."""
        stage_start = time.perf_counter()
        self.audit_logger.log_stage_start(stage.name, len(records))

        output = stage.apply(records, state, self.context)

        stage_duration = time.perf_counter() - stage_start
        self.audit_logger.log_stage_end(stage.name, len(output), stage_duration)

        self.metrics_collector.record_timing(
            "stage_duration_seconds", stage_duration, {"stage": stage.name}
        )
        self.metrics_collector.record_count(
            "records_dropped_total", len(records) - len(output), {"stage": stage.name}
        )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(output),
            duration_seconds=stage_duration,
        )
        return stage_result, output

    def _build_metadata(self, correlation_id: str, duration: float, dataset_size: int) -> Dict[str, Any]:
        return {
            "correlation_id": correlation_id,
            "duration_seconds": duration,
            "dataset_size": dataset_size,
        }
