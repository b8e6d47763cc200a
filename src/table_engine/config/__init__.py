"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - TableConfig: Root configuration object
    - FeatureConfig: Enabled control surfaces (search, selection, ...)
    - PaginationConfig: Page size and page-button window
    - ExportConfig: Delimiter, filename, media type
    - DisplayConfig: Empty text and search placeholder
    - ValidationConfig: Dataset checks before each pass

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over a base file
"""

from table_engine.config.loader import ConfigLoader, load_config
from table_engine.config.models import (
    DisplayConfig,
    ExportConfig,
    FeatureConfig,
    PaginationConfig,
    TableConfig,
    ValidationConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DisplayConfig",
    "ExportConfig",
    "FeatureConfig",
    "PaginationConfig",
    "TableConfig",
    "ValidationConfig",
]
