"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Dict, List

import pytest

from table_engine.adapters.console_logger import ConsoleAuditLogger
from table_engine.adapters.metrics_collector import InMemoryMetricsCollector
from table_engine.config.models import FeatureConfig, PaginationConfig, TableConfig
from table_engine.domain.accessors import field_accessor
from table_engine.domain.entities import Column
from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_context import TableContext


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def people() -> List[Dict[str, Any]]:
    """The three-person dataset used throughout the scenarios."""
    return [
        {"id": 1, "name": "John", "age": 30},
        {"id": 2, "name": "Jane", "age": 25},
        {"id": 3, "name": "Bob", "age": 40},
    ]


@pytest.fixture
def people_columns() -> List[Column]:
    """Name (searchable, sortable) and age (sortable) columns."""
    return [
        Column(
            key="name",
            title="Name",
            accessor=field_accessor("name"),
            sortable=True,
            searchable=True,
        ),
        Column(key="age", title="Age", accessor=field_accessor("age"), sortable=True),
    ]


@pytest.fixture
def people_context(people_columns: List[Column]) -> TableContext:
    return TableContext(people_columns)


@pytest.fixture
def users() -> List[Dict[str, Any]]:
    """A user directory with roles and statuses."""
    return [
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin", "status": "active"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "User", "status": "active"},
        {"id": 3, "name": "Bob Johnson", "email": "bob@example.com", "role": "Editor", "status": "inactive"},
        {"id": 4, "name": "Alice Williams", "email": "alice@example.com", "role": "User", "status": "active"},
        {"id": 5, "name": "Charlie Brown", "email": "charlie@example.com", "role": "Viewer", "status": "inactive"},
        {"id": 6, "name": "Eva Garcia", "email": "eva@example.com", "role": "User", "status": "active"},
        {"id": 7, "name": "David Lee", "email": "david@example.com", "role": "Admin", "status": "active"},
        {"id": 8, "name": "Grace Wang", "email": "grace@example.com", "role": "Editor", "status": "active"},
        {"id": 9, "name": "Tom Wilson", "email": "tom@example.com", "role": "Viewer", "status": "inactive"},
        {"id": 10, "name": "Sofia Martinez", "email": "sofia@example.com", "role": "User", "status": "active"},
    ]


@pytest.fixture
def user_columns() -> List[Column]:
    """Columns for the user directory."""
    return [
        Column(key="name", title="Name", accessor=field_accessor("name"), sortable=True, searchable=True),
        Column(key="email", title="Email", accessor=field_accessor("email"), sortable=True, searchable=True),
        Column(key="role", title="Role", accessor=field_accessor("role"), sortable=True),
        Column(key="status", title="Status", accessor=field_accessor("status")),
    ]


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create quiet console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def full_config() -> TableConfig:
    """Every feature enabled, page size 5."""
    return TableConfig(
        features=FeatureConfig(
            searchable=True,
            filterable=True,
            selectable=True,
            pagination=True,
            exportable=True,
        ),
        pagination=PaginationConfig(page_size=5),
    )


@pytest.fixture
def state() -> ControlState:
    """Fresh control state with the default page size."""
    return ControlState()
