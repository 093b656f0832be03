"""Input validation for names and arguments that end up in generated text.

Generated SQL and source code are built by plain string interpolation, so
every table, column and reference name must pass ``validate_identifier``
before it reaches an emitter.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import CLIError, ExitCode, IdentifierError

# Letter or underscore, then letters, digits or underscores.
IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Project and edge function names: letters, digits, hyphens, underscores.
PROJECT_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")

# Worker names: the deploy tool rejects underscores.
WORKER_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9-]*")

# Dart type names, with generics and nullability: Map<String, int>?
DART_TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_<>, ?]*")


def validate_identifier(name: str) -> bool:
    """Return True if ``name`` is a safe SQL identifier."""
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def assert_valid_identifier(name: str, role: str) -> None:
    """Raise IdentifierError unless ``name`` is a safe SQL identifier.

    Args:
        name: The identifier to check.
        role: What the identifier names, e.g. "table name" or "column name".
    """
    if not validate_identifier(name):
        raise IdentifierError(
            name,
            role,
            f"{role.capitalize()} must start with a letter or underscore, "
            "and contain only letters, numbers, and underscores.",
        )


def validate_project_name(name: str) -> bool:
    return PROJECT_NAME_PATTERN.fullmatch(name) is not None


def assert_valid_project_name(name: str) -> None:
    if not validate_project_name(name):
        raise CLIError(
            f'Invalid project name: "{name}"',
            ExitCode.GENERAL_ERROR,
            "Project name must start with a letter and contain only letters, "
            "numbers, hyphens, and underscores.",
        )


def validate_worker_name(name: str) -> bool:
    return WORKER_NAME_PATTERN.fullmatch(name) is not None


def assert_valid_worker_name(name: str) -> None:
    if not validate_worker_name(name):
        raise CLIError(
            f'Invalid worker name: "{name}"',
            ExitCode.GENERAL_ERROR,
            "Worker name must start with a letter and contain only letters, "
            "numbers, and hyphens (no underscores).",
        )



def validate_dart_type(value: str) -> bool:
    """Return True if ``value`` looks like a Dart type, e.g. ``List<User>?``."""
    return (
        DART_TYPE_PATTERN.fullmatch(value) is not None
        and value.count("<") == value.count(">")
    )


def assert_valid_dart_type(value: str, role: str = "type") -> None:
    if not validate_dart_type(value):
        raise IdentifierError(
            value,
            role,
            f"{role.capitalize()} must be a Dart type such as String, int? "
            "or Map<String, dynamic>.",
        )
