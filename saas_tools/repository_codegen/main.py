"""
Repository Generator - Generates a repository interface and Supabase implementation.

Usage:
    saas gen repository Recipe
    saas gen repository RecipeRepository --entity Recipe -o lib/data/recipe_repository.dart
"""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path
from typing import Final

from saas_tools.shared import (
    CLIError,
    TemplateRenderer,
    assert_valid_identifier,
    handle_error,
    to_pascal_case,
    write_output,
)

TEMPLATE_CATEGORY: Final[str] = "repository"
REPOSITORY_SUFFIX: Final[str] = "Repository"

_SUFFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"Repository$", re.IGNORECASE)


def repository_names(name: str, entity: str | None = None) -> tuple[str, str]:
    """Return ``(repository_name, entity_name)`` for a repository.

    The entity defaults to ``name`` without its ``Repository`` suffix.

    Raises:
        IdentifierError: If either name is not a safe identifier.
    """
    assert_valid_identifier(name, "repository name")
    entity_name = entity if entity is not None else _SUFFIX_PATTERN.sub("", name)
    assert_valid_identifier(entity_name, "entity name")

    repository_name = to_pascal_case(name)
    if not repository_name.endswith(REPOSITORY_SUFFIX):
        repository_name += REPOSITORY_SUFFIX
    return repository_name, to_pascal_case(entity_name)


def generate(
    name: str,
    entity: str | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    repository_name, entity_name = repository_names(name, entity)
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        TEMPLATE_CATEGORY,
        "repository.dart",
        repository_name=repository_name,
        entity_name=entity_name,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen repository",
        description="Generate repository pattern",
    )
    parser.add_argument("name", help="Repository name")
    parser.add_argument("-e", "--entity", help="Entity name")
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
        output = generate(args.name, args.entity)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output, end="")
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
