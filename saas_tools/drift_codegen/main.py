"""
Drift Code Generator - Generates Drift tables, DAOs and migrations.

Usage:
    saas gen drift table Items --columns "id:int:pk:autoincrement,title:text"
    saas gen drift dao Items --output lib/db/daos/items_dao.dart
    saas gen drift migration add_due_date
"""

from __future__ import annotations

import argparse
import os
from datetime import date
from pathlib import Path
from typing import Final

from saas_tools.column_spec import columns_to_drift, parse_column_spec
from saas_tools.shared import (
    CLIError,
    ExitCode,
    TemplateRenderer,
    assert_valid_identifier,
    handle_error,
    write_output,
)

VALID_TYPES: Final[tuple[str, ...]] = ("table", "dao", "migration")
TEMPLATE_CATEGORY: Final[str] = "drift"


def generate(
    kind: str,
    name: str,
    columns: str | None = None,
    renderer: TemplateRenderer | None = None,
    today: date | None = None,
) -> str:
    """Generate Drift source for a table, DAO or migration.

    Args:
        kind: One of ``table``, ``dao`` or ``migration``.
        name: Table, DAO or migration name.
        columns: Column spec, required for ``table``.
        renderer: Template renderer to use; a new one is created if omitted.
        today: Date stamped into migrations. Defaults to today.

    Raises:
        CLIError: On an unknown kind, missing columns, or invalid input.
    """
    if kind not in VALID_TYPES:
        raise CLIError(
            f'Invalid type: "{kind}"',
            ExitCode.USAGE_ERROR,
            f"Valid types: {', '.join(VALID_TYPES)}",
        )

    if kind == "table":
        if not columns:
            raise CLIError(
                "Columns specification required for table generation",
                ExitCode.USAGE_ERROR,
                'Use --columns "id:int:pk,title:text,userId:uuid:fk(auth.users)"',
            )
        return columns_to_drift(name, parse_column_spec(columns))

    renderer = renderer or TemplateRenderer()

    if kind == "dao":
        assert_valid_identifier(name, "DAO name")
        return renderer.render(TEMPLATE_CATEGORY, "dao.dart", name=name, table_name=name)

    assert_valid_identifier(name, "migration name")
    stamp = (today or date.today()).strftime("%Y%m%d")
    return renderer.render(TEMPLATE_CATEGORY, "migration.dart", name=name, date=stamp)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen drift",
        description="Generate Drift database code",
    )
    parser.add_argument("type", help=f"What to generate: {', '.join(VALID_TYPES)}")
    parser.add_argument("name", help="Table, DAO or migration name")
    parser.add_argument(
        "-c",
        "--columns",
        help="Column specification (for table), e.g. 'id:int:pk,title:text'",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path, relative to the current directory",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("SAAS_DEBUG")),
        help="Show stack traces on failure",
    )

    args = parser.parse_args(argv)

    try:
        output = generate(args.type, args.name, columns=args.columns)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output)
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
