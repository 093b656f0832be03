"""
Column Spec Compiler - Turns a compact column DSL into SQL and Drift code.

A spec is a comma-separated list of ``name:type[:modifier]*`` segments:

    id:int:pk
    title:text
    userId:uuid:fk(auth.users.id)
    createdAt:datetime:default(now())
    synced:bool:default(false)
    email:text:nullable

Parsing produces ``ColumnSpec`` records; the emitters are pure functions of
a table name and those records. Identifiers are validated on the way in
and again in each emitter, because emitted text is plain interpolation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Final, Sequence

from saas_tools.shared import (
    ColumnSpecError,
    assert_valid_identifier,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)

# Raw type aliases to normalized types. Normalized names map to themselves.
TYPE_ALIASES: Final[dict[str, str]] = {
    "str": "text",
    "string": "text",
    "varchar": "text",
    "char": "text",
    "text": "text",
    "int": "integer",
    "number": "integer",
    "integer": "integer",
    "bigint": "bigint",
    "float": "real",
    "double": "real",
    "decimal": "real",
    "real": "real",
    "bool": "boolean",
    "boolean": "boolean",
    "date": "datetime",
    "timestamp": "datetime",
    "timestamptz": "datetime",
    "time": "datetime",
    "datetime": "datetime",
    "uuid": "uuid",
    "json": "jsonb",
    "jsonb": "jsonb",
    "blob": "blob",
    "bytes": "blob",
    "binary": "blob",
}

SQL_TYPES: Final[dict[str, str]] = {
    "integer": "INTEGER",
    "bigint": "BIGINT",
    "text": "TEXT",
    "boolean": "BOOLEAN",
    "real": "REAL",
    "datetime": "TIMESTAMPTZ",
    "uuid": "UUID",
    "jsonb": "JSONB",
    "blob": "BYTEA",
}

DRIFT_TYPES: Final[dict[str, str]] = {
    "integer": "integer",
    "bigint": "int64",
    "text": "text",
    "boolean": "boolean",
    "real": "real",
    "datetime": "dateTime",
    "uuid": "text",
    "jsonb": "text",
    "blob": "blob",
}

NUMERIC_TYPES: Final[frozenset[str]] = frozenset({"integer", "real", "bigint"})
NOW_TOKENS: Final[frozenset[str]] = frozenset({"now", "now()"})

PRIMARY_KEY_MODIFIERS: Final[frozenset[str]] = frozenset({"pk", "primarykey", "primary_key"})
AUTO_INCREMENT_MODIFIERS: Final[frozenset[str]] = frozenset(
    {"autoincrement", "auto_increment", "serial"}
)
NULLABLE_MODIFIERS: Final[frozenset[str]] = frozenset({"nullable", "null"})

_FK_PATTERN: Final[re.Pattern[str]] = re.compile(r"fk\(([^)]+)\)", re.IGNORECASE)
_DEFAULT_PATTERN: Final[re.Pattern[str]] = re.compile(r"default\((.+)\)", re.IGNORECASE)

DEFAULT_FK_COLUMN: Final[str] = "id"

FORMAT_HINT: Final[str] = (
    "Format: name:type[:modifiers] "
    "(e.g., id:int:pk, title:text, userId:uuid:fk(auth.users.id))"
)
MODIFIER_HINT: Final[str] = (
    "Valid modifiers: pk, fk(table.column), nullable, default(value), autoincrement"
)


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """One column parsed from a column spec string."""

    name: str
    type: str
    is_primary_key: bool = False
    is_auto_increment: bool = False
    is_foreign_key: bool = False
    foreign_key_table: str | None = None
    foreign_key_column: str | None = None
    is_nullable: bool = False
    default_value: str | None = None


def normalize_type(raw_type: str) -> str:
    """Map a raw type alias to its normalized name.

    Unknown types pass through lower-cased.
    """
    lowered = raw_type.lower()
    return TYPE_ALIASES.get(lowered, lowered)


def _parse_foreign_key(ref: str) -> tuple[str, str]:
    """Split an ``fk(...)`` reference into (table, column)."""
    parts = ref.split(".")
    if len(parts) >= 2:
        table_parts, column = parts[:-1], parts[-1]
    else:
        table_parts, column = parts, DEFAULT_FK_COLUMN

    for part in table_parts:
        assert_valid_identifier(part, "foreign key table")
    assert_valid_identifier(column, "foreign key column")

    return ".".join(table_parts), column


def _apply_modifier(fields: dict[str, Any], modifier: str, definition: str) -> None:
    """Record the effect of one modifier token in ``fields``."""
    keyword = modifier.lower()

    if keyword in PRIMARY_KEY_MODIFIERS:
        fields["is_primary_key"] = True
        return
    if keyword in AUTO_INCREMENT_MODIFIERS:
        fields["is_auto_increment"] = True
        return
    if keyword in NULLABLE_MODIFIERS:
        fields["is_nullable"] = True
        return

    fk_match = _FK_PATTERN.fullmatch(modifier)
    if fk_match:
        table, column = _parse_foreign_key(fk_match.group(1))
        fields["is_foreign_key"] = True
        fields["foreign_key_table"] = table
        fields["foreign_key_column"] = column
        return

    # Greedy capture keeps nested parens, e.g. default(now()).
    default_match = _DEFAULT_PATTERN.fullmatch(modifier)
    if default_match:
        fields["default_value"] = default_match.group(1)
        return

    raise ColumnSpecError(f'Unknown modifier: "{modifier}"', definition, MODIFIER_HINT)


def _parse_column(definition: str) -> ColumnSpec:
    segments = [segment.strip() for segment in definition.split(":")]

    if len(segments) < 2:
        raise ColumnSpecError(
            f'Invalid column definition: "{definition}"',
            definition,
            FORMAT_HINT,
        )

    name, raw_type, *modifiers = segments
    if not name or not raw_type:
        raise ColumnSpecError(
            f'Missing name or type in column: "{definition}"',
            definition,
            "Each column must have a name and type",
        )

    fields: dict[str, Any] = {"name": name, "type": normalize_type(raw_type)}
    for modifier in modifiers:
        _apply_modifier(fields, modifier, definition)

    return ColumnSpec(**fields)


def parse_column_spec(spec: str) -> list[ColumnSpec]:
    """Parse a comma-separated column spec into ColumnSpec records.

    Empty segments are skipped. The first invalid segment aborts the
    whole parse.

    Raises:
        ColumnSpecError: On a malformed segment or unknown modifier.
        IdentifierError: On an invalid foreign key reference.
    """
    return [
        _parse_column(part)
        for part in (raw.strip() for raw in spec.split(","))
        if part
    ]


def sql_type(normalized_type: str) -> str:
    return SQL_TYPES.get(normalized_type, "TEXT")


def drift_type(normalized_type: str) -> str:
    return DRIFT_TYPES.get(normalized_type, "text")


def format_sql_default(value: str, normalized_type: str) -> str:
    """Render a default value as a SQL literal.

    String literals have embedded single quotes doubled.
    """
    if value in NOW_TOKENS:
        return "now()"
    if normalized_type == "boolean":
        return "true" if value.lower() == "true" else "false"
    if normalized_type in NUMERIC_TYPES:
        return value
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def format_drift_default(value: str, normalized_type: str) -> str:
    """Render a default value as a Dart expression for ``withDefault``."""
    if value in NOW_TOKENS:
        return "currentDateAndTime"
    if normalized_type == "boolean":
        return f"const Constant({'true' if value.lower() == 'true' else 'false'})"
    if normalized_type in NUMERIC_TYPES:
        return f"const Constant({value})"
    escaped = value.replace("'", "\\'")
    return f"const Constant('{escaped}')"


def _checked_name(name: str, role: str, convert: Callable[[str], str]) -> str:
    """Validate a name before and after case conversion; return the converted form."""
    assert_valid_identifier(name, role)
    converted = convert(name)
    assert_valid_identifier(converted, role)
    return converted


def _sql_column(column: ColumnSpec) -> str:
    col_name = _checked_name(column.name, "column name", to_snake_case)

    if column.is_primary_key and column.is_auto_increment:
        storage = (
            "UUID DEFAULT gen_random_uuid()" if column.type == "uuid" else "SERIAL"
        )
        line = f"  {col_name} {storage} PRIMARY KEY"
    elif column.is_primary_key:
        line = f"  {col_name} {sql_type(column.type)} PRIMARY KEY"
    else:
        line = f"  {col_name} {sql_type(column.type)}"
        if not column.is_nullable:
            line += " NOT NULL"

    if column.default_value is not None and not column.is_primary_key:
        line += f" DEFAULT {format_sql_default(column.default_value, column.type)}"

    if column.is_foreign_key and column.foreign_key_table:
        ref_column = column.foreign_key_column or DEFAULT_FK_COLUMN
        line += (
            f" REFERENCES {column.foreign_key_table}({ref_column}) ON DELETE CASCADE"
        )

    return line


def columns_to_sql(table_name: str, columns: Sequence[ColumnSpec]) -> str:
    """Build a ``CREATE TABLE`` statement.

    Args:
        table_name: Table identifier; emitted in snake_case.
        columns: Parsed columns, in output order.

    Raises:
        IdentifierError: If the table or any column name is not a safe identifier.
    """
    table = _checked_name(table_name, "table name", to_snake_case)
    lines = [_sql_column(column) for column in columns]
    body = ",\n".join(lines)
    return f"CREATE TABLE {table} (\n{body}\n);"


def _drift_column(column: ColumnSpec) -> str:
    getter = _checked_name(column.name, "column name", to_camel_case)
    builder = drift_type(column.type)
    line = f"  {builder}Column get {getter} => {builder}()"

    if column.is_primary_key and column.is_auto_increment:
        line += ".autoIncrement()"
    if column.is_nullable:
        line += ".nullable()"
    if column.default_value is not None:
        line += f".withDefault({format_drift_default(column.default_value, column.type)})"

    return line + "();"


def columns_to_drift(table_name: str, columns: Sequence[ColumnSpec]) -> str:
    """Build a Drift ``Table`` class definition.

    Raises:
        IdentifierError: If the table or any column name is not a safe identifier.
    """
    class_name = _checked_name(table_name, "table name", to_pascal_case)
    lines = [f"class {class_name} extends Table {{"]
    lines.extend(_drift_column(column) for column in columns)
    lines.append("}")
    return "\n".join(lines)
