"""
Freezed Generator - Generates immutable Freezed model classes.

A field spec is a comma-separated list of ``name:Type`` pairs; a trailing
``?`` on the type makes the field nullable:

    id:String,name:String,email:String?,tags:List<String>

Usage:
    saas gen freezed User --fields "id:String,name:String,email:String?"
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
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

TEMPLATE_CATEGORY: Final[str] = "freezed"
FIELDS_HINT: Final[str] = 'Use --fields "id:String,name:String,email:String?"'


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One model field parsed from a field spec."""

    name: str
    type: str
    is_nullable: bool = False

    @property
    def dart_type(self) -> str:
        return f"{self.type}?" if self.is_nullable else self.type


def parse_field_spec(spec: str) -> list[FieldSpec]:
    """Parse ``name:Type[?]`` pairs into FieldSpec records.

    Segments without both a name and a type are skipped. The type may
    contain commas inside generics, e.g. ``Map<String, int>``.

    Raises:
        IdentifierError: On an unsafe field name or type.
    """
    fields: list[FieldSpec] = []
    for segment in _split_fields(spec):
        field_name, _, field_type = segment.partition(":")
        field_name, field_type = field_name.strip(), field_type.strip()
        if not field_name or not field_type:
            continue

        is_nullable = field_type.endswith("?")
        clean_type = field_type[:-1].rstrip() if is_nullable else field_type

        assert_valid_identifier(field_name, "field name")
        assert_valid_dart_type(clean_type, "field type")
        fields.append(FieldSpec(field_name, clean_type, is_nullable))
    return fields


def _split_fields(spec: str) -> list[str]:
    """Split on commas that are not inside ``<...>``."""
    segments: list[str] = []
    depth = 0
    current: list[str] = []
    for char in spec:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        if char == "," and depth <= 0:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    segments.append("".join(current))
    return segments


def generate(
    name: str,
    fields: str | None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a Freezed model class.

    Raises:
        CLIError: If no fields are given.
        IdentifierError: On an unsafe model name, field name or type.
    """
    assert_valid_identifier(name, "model name")
    parsed = parse_field_spec(fields or "")
    if not parsed:
        raise CLIError(
            "Fields specification required for Freezed generation",
            ExitCode.USAGE_ERROR,
            FIELDS_HINT,
        )

    renderer = renderer or TemplateRenderer()
    return renderer.render(TEMPLATE_CATEGORY, "model.dart", name=name, fields=parsed)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen freezed",
        description="Generate Freezed models",
    )
    parser.add_argument("name", help="Model name")
    parser.add_argument(
        "-f",
        "--fields",
        help="Field specification (e.g., id:String,name:String,email:String?)",
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
        output = generate(args.name, args.fields)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output, end="")
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
