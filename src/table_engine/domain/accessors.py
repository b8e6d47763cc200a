"""
Column Accessors and Value Helpers.

Records are opaque to the engine. Every column carries an explicit accessor
callable; these factories build the common ones so callers never rely on
implicit key lookup.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable

Accessor = Callable[[Any], Any]


def field_accessor(field_name: str, default: Any = None) -> Accessor:
    """
    Build an accessor reading a key from mapping-like records.

    Args:
        field_name: Key to read
        default: Value returned when the key is missing

    Returns:
        Callable taking a record and returning the field value
    """

    def _get(record: Any) -> Any:
        return record.get(field_name, default)

    _get.__name__ = f"field_{field_name}"
    return _get


def attribute_accessor(attribute_name: str, default: Any = None) -> Accessor:
    """Build an accessor reading an attribute from object records."""

    def _get(record: Any) -> Any:
        return getattr(record, attribute_name, default)

    _get.__name__ = f"attr_{attribute_name}"
    return _get


def stringify(value: Any) -> str:
    """Render a value as text; missing values become an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_numeric(value: Any) -> bool:
    """True for real numbers. Booleans are not treated as numbers."""
    return isinstance(value, Number) and not isinstance(value, bool)


def strict_equals(left: Any, right: Any) -> bool:
    """
    Equality without cross-type coercion.

    Python's ``==`` treats ``True == 1``; filters must not, so booleans only
    ever equal booleans. Numbers of different numeric types still compare by
    value.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return left == right
