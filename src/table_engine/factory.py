"""
Factory - Wire a TableController from Columns and Configuration.

Builds the default collaborators (stages, paginator, validator, exporter,
selection tracker, audit logger, metrics collector) so callers only supply
their records and columns.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from table_engine.adapters.console_logger import ConsoleAuditLogger
from table_engine.adapters.metrics_collector import InMemoryMetricsCollector
from table_engine.config.loader import ConfigLoader, load_config
from table_engine.config.models import TableConfig
from table_engine.domain.accessors import field_accessor
from table_engine.domain.entities import Column
from table_engine.domain.value_objects import IdentitySelector, SelectionListener
from table_engine.export.exporter import Exporter
from table_engine.interfaces.audit_logger import AuditLoggerProtocol
from table_engine.interfaces.metrics_collector import MetricsCollectorProtocol
from table_engine.pipeline.control_state import ControlState
from table_engine.pipeline.table_controller import TableController
from table_engine.pipeline.table_pipeline import TablePipeline
from table_engine.selection.selection_tracker import SelectionTracker
from table_engine.validation.dataset_validator import DatasetValidator

logger = logging.getLogger(__name__)


def create_controller(
    records: List[Any],
    columns: List[Column],
    config: Union[TableConfig, Dict[str, Any], str, Path, None] = None,
    identity: Optional[IdentitySelector] = None,
    on_selection_change: Optional[SelectionListener] = None,
    state: Optional[ControlState] = None,
    audit_logger: Optional[AuditLoggerProtocol] = None,
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
    profile: Optional[str] = None,
) -> TableController:
    """
    Build a fully wired TableController.

    Args:
        records: Initial dataset snapshot
        columns: Column descriptors in display order
        config: TableConfig, a config dict, or a path to a YAML file
        identity: Identity selector (default: the "id" field of mappings)
        on_selection_change: Receives the full selection after each change
        state: Caller-owned control state (default from config)
        audit_logger: Audit logger (default: quiet ConsoleAuditLogger)
        metrics_collector: Metrics collector (default: in-memory)
        profile: Profile merged over a YAML config file

    Returns:
        TableController with its first view already computed
    """
    table_config = _resolve_config(config, profile)
    identity = identity or field_accessor("id")

    validator = None
    if table_config.validation.enabled:
        validator = DatasetValidator(identity=identity, config=table_config.validation)

    pipeline = TablePipeline(
        columns=columns,
        config=table_config,
        audit_logger=audit_logger or ConsoleAuditLogger(verbose=False),
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
        validator=validator,
    )

    logger.debug(
        f"Creating table controller: {len(records)} records, {len(columns)} columns"
    )
    return TableController(
        records=records,
        pipeline=pipeline,
        selection=SelectionTracker(identity, on_change=on_selection_change),
        exporter=Exporter(table_config.export),
        identity=identity,
        state=state,
        config=table_config,
    )


def _resolve_config(
    config: Union[TableConfig, Dict[str, Any], str, Path, None],
    profile: Optional[str],
) -> TableConfig:
    if config is None:
        return TableConfig()
    if isinstance(config, TableConfig):
        return config
    if isinstance(config, dict):
        return ConfigLoader().load_from_dict(config)
    # Profiles live in <root>/config/profiles next to <root>/config/<file>.yaml
    path = Path(config).resolve()
    return load_config(path, profile=profile, base_path=path.parent.parent)
