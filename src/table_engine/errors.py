"""
Exceptions raised by Table Engine.

Derivation of views never raises for empty results, missing values or
disabled features; these exceptions cover configuration loading and
explicit validation requests.
"""

from __future__ import annotations

from typing import List, Optional


class TableEngineError(Exception):
    """Base class for all Table Engine errors."""


class ConfigurationError(TableEngineError):
    """Raised when a configuration file or profile cannot be loaded."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class DatasetValidationError(TableEngineError):
    """Raised by DatasetValidator.raise_for_issues when errors were found."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
