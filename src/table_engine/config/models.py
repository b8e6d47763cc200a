"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FeatureConfig(BaseModel):
    """Which control surfaces of the table are enabled."""

    searchable: bool = False
    filterable: bool = True
    selectable: bool = False
    pagination: bool = False
    exportable: bool = False


class PaginationConfig(BaseModel):
    """Page size and page-button window."""

    page_size: int = Field(default=10, ge=1)
    page_window: int = Field(default=5, ge=1)


class ExportConfig(BaseModel):
    """Delimited text export settings."""

    delimiter: str = Field(default=",", min_length=1)
    line_terminator: str = Field(default="\n", min_length=1)
    filename: str = "table-export.csv"
    media_type: str = "text/csv"
    warn_on_unescaped: bool = True


class DisplayConfig(BaseModel):
    """Text handed to presentation layers."""

    empty_text: str = "No data available"
    search_placeholder: str = "Search..."


class ValidationConfig(BaseModel):
    """Dataset validation run before each recomputation pass."""

    enabled: bool = True
    check_identity_keys: bool = True
    check_sort_keys: bool = True


class TableConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    features: FeatureConfig = Field(default_factory=FeatureConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    model_config = {"populate_by_name": True}
