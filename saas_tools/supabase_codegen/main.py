"""
Supabase SQL Generator - Generates table migrations and RLS policies.

Usage:
    saas supabase create-table recipes --columns "id:uuid:pk,title:text"
    saas supabase create-table recipes --columns "..." --write
    saas supabase rls recipes --policy user-owned --column user_id
"""

from __future__ import annotations

import argparse
import os
from datetime import datetime
from pathlib import Path
from typing import Final

from saas_tools.column_spec import columns_to_sql, parse_column_spec
from saas_tools.shared import (
    CLIError,
    ExitCode,
    ProjectConfig,
    TemplateRenderer,
    assert_valid_identifier,
    handle_error,
    load_project_config,
    to_snake_case,
    write_output,
)
from saas_tools.shared.config import DEFAULT_SUPABASE_PATH

TEMPLATE_CATEGORY: Final[str] = "supabase"

# Policy type -> template name
RLS_POLICIES: Final[dict[str, str]] = {
    "user-owned": "rls_user_owned.sql",
    "team-owned": "rls_team_owned.sql",
    "public-read": "rls_public_read.sql",
    "admin-only": "rls_admin_only.sql",
}
DEFAULT_POLICY: Final[str] = "user-owned"
DEFAULT_OWNER_COLUMN: Final[str] = "user_id"


def create_table_sql(
    name: str,
    columns: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Build a migration that creates ``name`` and enables RLS on it."""
    if not columns:
        raise CLIError(
            "Columns specification required",
            ExitCode.USAGE_ERROR,
            'Use --columns "id:uuid:pk,title:text,user_id:uuid:fk(auth.users)"',
        )

    create_sql = columns_to_sql(name, parse_column_spec(columns))
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        TEMPLATE_CATEGORY,
        "create_table.sql",
        table=to_snake_case(name),
        create_sql=create_sql,
    )


def rls_policy_sql(
    table: str,
    policy: str = DEFAULT_POLICY,
    column: str = DEFAULT_OWNER_COLUMN,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the row-level security policies for ``table``.

    Raises:
        CLIError: If the policy type is unknown.
        IdentifierError: If the table or column name is not a safe identifier.
    """
    template = RLS_POLICIES.get(policy)
    if template is None:
        raise CLIError(
            f'Invalid policy type: "{policy}"',
            ExitCode.USAGE_ERROR,
            f"Valid types: {', '.join(RLS_POLICIES)}",
        )

    assert_valid_identifier(table, "table name")
    assert_valid_identifier(column, "column name")

    renderer = renderer or TemplateRenderer()
    return renderer.render(TEMPLATE_CATEGORY, template, table=table, column=column)


def migration_path(
    name: str,
    config: ProjectConfig | None,
    now: datetime | None = None,
) -> Path:
    """Return where a create-table migration for ``name`` is written.

    Uses the Supabase CLI naming scheme, ``<YYYYMMDDHHMMSS>_<name>.sql``,
    under the configured Supabase directory.
    """
    stamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    filename = f"{stamp}_create_{to_snake_case(name)}_table.sql"
    if config is not None:
        return config.migrations_dir / filename
    return Path(DEFAULT_SUPABASE_PATH) / "migrations" / filename


def _cmd_create_table(args: argparse.Namespace, renderer: TemplateRenderer) -> None:
    sql = create_table_sql(args.name, args.columns, renderer)

    if not args.write:
        print(sql, end="")
        return

    config = load_project_config()
    base_dir = config.root if config is not None else None
    written = write_output(migration_path(args.name, config), sql, base_dir)
    print(f"Generated {written}")


def _cmd_rls(args: argparse.Namespace, renderer: TemplateRenderer) -> None:
    print(rls_policy_sql(args.table, args.policy, args.column, renderer), end="")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas supabase",
        description="Generate Supabase SQL",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("SAAS_DEBUG")),
        help="Show stack traces on failure",
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    create = subparsers.add_parser("create-table", help="Generate CREATE TABLE SQL")
    create.add_argument("name", help="Table name")
    create.add_argument("-c", "--columns", help="Column specification")
    create.add_argument(
        "--write",
        action="store_true",
        help="Write a migration file into the Supabase migrations directory",
    )
    create.set_defaults(handler=_cmd_create_table)

    rls = subparsers.add_parser("rls", help="Generate RLS policies")
    rls.add_argument("table", help="Table name")
    rls.add_argument(
        "-p",
        "--policy",
        default=DEFAULT_POLICY,
        help=f"Policy type: {', '.join(RLS_POLICIES)}",
    )
    rls.add_argument(
        "-c",
        "--column",
        default=DEFAULT_OWNER_COLUMN,
        help="User/team ID column",
    )
    rls.set_defaults(handler=_cmd_rls)

    args = parser.parse_args(argv)

    try:
        args.handler(args, TemplateRenderer())
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
