"""
Integration Tests for TablePipeline.

Test Aspects Covered:
    ✅ Business Logic: Search, filter, sort and paginate composed in order
    ✅ Audit Trail: One StageResult per stage with counts
    ✅ Observability: Metrics recorded, anomalies logged, correlation IDs
    ✅ Edge Cases: Empty results, clamped pages, caller state not mutated
"""

from __future__ import annotations

from typing import Any, Dict, List
from unittest.mock import Mock

import pytest

from table_engine.adapters.console_logger import ConsoleAuditLogger
from table_engine.adapters.metrics_collector import InMemoryMetricsCollector
from table_engine.config.models import TableConfig
from table_engine.domain.accessors import field_accessor
from table_engine.domain.entities import Column, Filter, PageState, SortDirection, SortState
from table_engine.domain.value_objects import TableView
from table_engine.observability.observability_manager import ObservabilityManager
from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_pipeline import TablePipeline
from table_engine.stages.sorter import Sorter
from table_engine.validation.dataset_validator import DatasetValidator


@pytest.fixture
def pipeline(
    user_columns: List[Column],
    full_config: TableConfig,
    console_logger: ConsoleAuditLogger,
    metrics_collector: InMemoryMetricsCollector,
) -> TablePipeline:
    return TablePipeline(
        columns=user_columns,
        config=full_config,
        audit_logger=console_logger,
        metrics_collector=metrics_collector,
    )


class TestTablePipeline:
    """Integration tests for the full recomputation pass."""

    def test_scenario_people_sorted_and_paged(
        self,
        people: List[Dict[str, Any]],
        people_columns: List[Column],
        full_config: TableConfig,
        console_logger: ConsoleAuditLogger,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: Sort by age ascending, page size 2, page 2
        EXPECTED: Bob only, total_pages=2, full order kept in ordered_rows
        """
        # Arrange
        pipeline = TablePipeline(
            columns=people_columns,
            config=full_config,
            audit_logger=console_logger,
            metrics_collector=metrics_collector,
        )
        state = ControlState(
            sort=SortState(key="age"),
            page=PageState(current_page=2, page_size=2),
        )

        # Act
        view = pipeline.run(people, state)

        # Assert
        assert isinstance(view, TableView)
        assert [r["name"] for r in view.rows] == ["Bob"]
        assert [r["name"] for r in view.ordered_rows] == ["Jane", "John", "Bob"]
        assert view.total_pages == 2
        assert view.total_count == 3

    def test_search_filter_sort_compose(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        """
        SCENARIO: Search "a", filter status=active, sort name descending
        EXPECTED: Only active users containing "a", in descending name order
        """
        # Arrange
        state = ControlState(
            search_term="a",
            filters=[Filter(key="status", value="active")],
            sort=SortState(key="name", direction=SortDirection.DESC),
            page=PageState(current_page=1, page_size=5),
        )

        # Act
        view = pipeline.run(users, state)

        # Assert
        names = [r["name"] for r in view.ordered_rows]
        assert names == sorted(names, reverse=True)
        assert all(r["status"] == "active" for r in view.ordered_rows)
        assert all(
            "a" in r["name"].lower() or "a" in r["email"].lower()
            for r in view.ordered_rows
        )
        assert view.rows == view.ordered_rows[:5]

    def test_audit_trail(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        """
        SCENARIO: Filter role=Admin
        EXPECTED: search, predicate_filter, sort, paginate entries with counts
        """
        # Arrange
        state = ControlState.with_page_size(5)
        state.set_filter(Filter(key="role", value="Admin"))

        # Act
        view = pipeline.run(users, state)

        # Assert
        trail = [(r.stage_name, r.input_count, r.output_count) for r in view.audit_trail]
        assert trail == [
            ("search", 10, 10),
            ("predicate_filter", 10, 2),
            ("sort", 2, 2),
            ("paginate", 2, 2),
        ]
        assert view.audit_trail[-1].details == {"current_page": 1, "total_pages": 1}

    def test_page_clamped_in_view_not_state(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        """
        SCENARIO: Page 9 requested with 2 pages available
        EXPECTED: View shows page 2; caller state untouched
        """
        # Arrange
        state = ControlState(page=PageState(current_page=9, page_size=5))

        # Act
        view = pipeline.run(users, state)

        # Assert
        assert view.current_page == 2
        assert [r["id"] for r in view.rows] == [6, 7, 8, 9, 10]
        assert state.page.current_page == 9

    def test_empty_result(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        """
        SCENARIO: Search term matching nothing
        EXPECTED: Empty view with one page and empty text
        """
        # Act
        view = pipeline.run(users, ControlState(search_term="zzz"))

        # Assert
        assert view.is_empty is True
        assert view.rows == []
        assert view.total_pages == 1
        assert view.start_index == 0
        assert view.empty_text == "No data available"

    def test_metrics_recorded(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        # Act
        pipeline.run(users, ControlState(filters=[Filter(key="role", value="User")]))

        # Assert
        metrics = metrics_collector.get_metrics()
        assert metrics["recompute_total_seconds"]["count"] == 1
        assert metrics["visible_records"]["last"] == 4
        assert metrics_collector.get_values(
            "records_dropped_total", {"stage": "predicate_filter"}
        ) == [6]

    def test_metadata(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        # Act
        first = pipeline.run(users, ControlState())
        second = pipeline.run(users, ControlState())

        # Assert
        assert first.metadata["dataset_size"] == 10
        assert first.metadata["duration_seconds"] >= 0
        assert first.metadata["correlation_id"] != second.metadata["correlation_id"]

    def test_input_not_mutated(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        # Arrange
        snapshot = list(users)

        # Act
        pipeline.run(users, ControlState(sort=SortState(key="name")))

        # Assert
        assert users == snapshot

    def test_recompute_is_deterministic(
        self,
        pipeline: TablePipeline,
        users: List[Dict[str, Any]],
    ) -> None:
        # Arrange
        state = ControlState(search_term="e", sort=SortState(key="role"))

        # Act
        first = pipeline.run(users, state)
        second = pipeline.run(users, state)

        # Assert
        assert first.rows == second.rows
        assert first.ordered_rows == second.ordered_rows

    def test_validator_anomalies_logged(
        self,
        user_columns: List[Column],
        full_config: TableConfig,
    ) -> None:
        """
        SCENARIO: Duplicate ids with ObservabilityManager as audit logger
        EXPECTED: Anomaly event recorded, view still derived
        """
        # Arrange
        observability = ObservabilityManager(service_name="test_table")
        pipeline = TablePipeline(
            columns=user_columns,
            config=full_config,
            audit_logger=observability,
            metrics_collector=observability,
            validator=DatasetValidator(identity=field_accessor("id")),
        )
        records = [
            {"id": 1, "name": "A", "email": "a@x", "role": "User", "status": "active"},
            {"id": 1, "name": "B", "email": "b@x", "role": "User", "status": "active"},
        ]

        # Act
        view = pipeline.run(records, ControlState())

        # Assert
        anomalies = observability.get_events("anomaly")
        assert len(anomalies) == 1
        assert anomalies[0]["severity"] == "ERROR"
        assert view.total_count == 2
        assert "stage_duration_seconds" in observability.get_metrics()


class TestPipelineCollaborators:
    """Pipeline calls into its collaborators."""

    def test_audit_logger_calls(
        self,
        people: List[Dict[str, Any]],
        people_columns: List[Column],
        full_config: TableConfig,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: Mock audit logger
        EXPECTED: Correlation ID set once, start/end logged for three stages
        """
        # Arrange
        audit = Mock()
        pipeline = TablePipeline(
            columns=people_columns,
            config=full_config,
            audit_logger=audit,
            metrics_collector=metrics_collector,
        )

        # Act
        pipeline.run(people, ControlState())

        # Assert
        audit.set_correlation_id.assert_called_once()
        assert [c.args[0] for c in audit.log_stage_start.call_args_list] == [
            "search",
            "predicate_filter",
            "sort",
        ]
        assert audit.log_stage_end.call_count == 3
        audit.log_anomaly.assert_not_called()

    def test_custom_stage_list(
        self,
        people: List[Dict[str, Any]],
        people_columns: List[Column],
        full_config: TableConfig,
        console_logger: ConsoleAuditLogger,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: Extra stage keeping only adults over 26
        EXPECTED: Stage runs between the defaults and appears in the trail
        """
        # Arrange
        adults = Mock()
        adults.name = "adults"
        adults.apply.side_effect = lambda records, state, context: [
            r for r in records if r["age"] > 26
        ]
        pipeline = TablePipeline(
            columns=people_columns,
            config=full_config,
            audit_logger=console_logger,
            metrics_collector=metrics_collector,
            stages=[adults, Sorter()],
        )

        # Act
        view = pipeline.run(people, ControlState(sort=SortState(key="age")))

        # Assert
        assert [r["name"] for r in view.rows] == ["John", "Bob"]
        assert [r.stage_name for r in view.audit_trail] == ["adults", "sort", "paginate"]
