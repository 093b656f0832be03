"""
PowerSync Generator - Generates sync rules and client schemas for a table.

Usage:
    saas gen powersync rules todos --user-column owner_id
    saas gen powersync schema todos --output lib/powersync/todos_schema.dart
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Final

from saas_tools.shared import (
    CLIError,
    ExitCode,
    TemplateRenderer,
    assert_valid_identifier,
    handle_error,
    write_output,
)

TEMPLATE_CATEGORY: Final[str] = "powersync"

# Output type -> template name
TEMPLATES: Final[dict[str, str]] = {
    "rules": "rules.yaml",
    "schema": "schema.dart",
}
VALID_TYPES: Final[tuple[str, ...]] = tuple(TEMPLATES)
DEFAULT_USER_COLUMN: Final[str] = "user_id"


def generate(
    kind: str,
    table: str,
    user_column: str = DEFAULT_USER_COLUMN,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render PowerSync sync rules or a client schema for ``table``.

    Raises:
        CLIError: On an unknown kind.
        IdentifierError: If the table or user column is not a safe identifier.
    """
    template = TEMPLATES.get(kind)
    if template is None:
        raise CLIError(
            f'Invalid type: "{kind}"',
            ExitCode.USAGE_ERROR,
            f"Valid types: {', '.join(VALID_TYPES)}",
        )

    assert_valid_identifier(table, "table name")
    assert_valid_identifier(user_column, "user column")

    renderer = renderer or TemplateRenderer()
    return renderer.render(
        TEMPLATE_CATEGORY, template, table=table, user_column=user_column
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen powersync",
        description="Generate PowerSync sync rules",
    )
    parser.add_argument("type", help=f"What to generate: {', '.join(VALID_TYPES)}")
    parser.add_argument("table", help="Table name")
    parser.add_argument(
        "-u",
        "--user-column",
        default=DEFAULT_USER_COLUMN,
        help="User ID column for sync rules",
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
        output = generate(args.type, args.table, args.user_column)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output, end="")
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
