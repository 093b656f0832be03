"""Column Spec Compiler - Parses column specs and emits SQL and Drift tables."""

from .main import (
    ColumnSpec,
    normalize_type,
    parse_column_spec,
    columns_to_sql,
    columns_to_drift,
    SQL_TYPES,
    DRIFT_TYPES,
    TYPE_ALIASES,
)

__all__ = [
    "ColumnSpec",
    "normalize_type",
    "parse_column_spec",
    "columns_to_sql",
    "columns_to_drift",
    "SQL_TYPES",
    "DRIFT_TYPES",
    "TYPE_ALIASES",
]
