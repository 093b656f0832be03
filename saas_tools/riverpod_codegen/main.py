"""
Riverpod Generator - Generates Riverpod providers from templates.

Usage:
    saas gen riverpod notifier Counter --state int
    saas gen riverpod async-notifier TodoList --state "List<Todo>"
    saas gen riverpod family userProfile --state User -o lib/providers/user.dart
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
    assert_valid_dart_type,
    assert_valid_identifier,
    handle_error,
    write_output,
)

TEMPLATE_CATEGORY: Final[str] = "riverpod"

# Provider pattern -> template name
TEMPLATES: Final[dict[str, str]] = {
    "notifier": "notifier.dart",
    "async-notifier": "async_notifier.dart",
    "future": "future.dart",
    "stream": "stream.dart",
    "family": "family.dart",
}
VALID_PATTERNS: Final[tuple[str, ...]] = tuple(TEMPLATES)
DEFAULT_STATE: Final[str] = "dynamic"


def generate(
    pattern: str,
    name: str,
    state: str | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a Riverpod provider.

    Args:
        pattern: One of ``VALID_PATTERNS``.
        name: Provider name; class and function names are derived from it.
        state: Dart state type. ``dynamic`` when omitted.
        renderer: Template renderer to use; a new one is created if omitted.

    Raises:
        CLIError: On an unknown pattern.
        IdentifierError: If the name or state type is unsafe to interpolate.
    """
    template = TEMPLATES.get(pattern)
    if template is None:
        raise CLIError(
            f'Invalid pattern: "{pattern}"',
            ExitCode.USAGE_ERROR,
            f"Valid patterns: {', '.join(VALID_PATTERNS)}",
        )

    assert_valid_identifier(name, "provider name")
    if state is not None:
        assert_valid_dart_type(state, "state type")

    renderer = renderer or TemplateRenderer()
    return renderer.render(
        TEMPLATE_CATEGORY,
        template,
        name=name,
        state=state or DEFAULT_STATE,
        has_state=state is not None,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen riverpod",
        description="Generate Riverpod providers",
    )
    parser.add_argument("pattern", help=f"Pattern: {', '.join(VALID_PATTERNS)}")
    parser.add_argument("name", help="Provider name")
    parser.add_argument("-s", "--state", help='State type (e.g., "List<User>")')
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
        output = generate(args.pattern, args.name, args.state)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output, end="")
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
