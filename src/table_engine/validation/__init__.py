"""
Validation Package - Dataset Precondition Checks.

Components:
    - DatasetValidator: Identity/column key uniqueness, unknown columns,
      missing sort values
    - ValidationReport: Errors and warnings found
"""

from table_engine.validation.dataset_validator import DatasetValidator, ValidationReport

__all__ = ["DatasetValidator", "ValidationReport"]
