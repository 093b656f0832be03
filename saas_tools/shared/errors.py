"""Custom exceptions and error reporting for the CLI."""

from __future__ import annotations

import sys
import traceback
from typing import Final, TextIO


class ExitCode:
    """Process exit codes used by every command."""

    SUCCESS: Final[int] = 0
    GENERAL_ERROR: Final[int] = 1
    USAGE_ERROR: Final[int] = 2
    CONFIG_ERROR: Final[int] = 3
    NETWORK_ERROR: Final[int] = 4
    AUTH_ERROR: Final[int] = 5


class CLIError(Exception):
    """Base exception for user-facing failures.

    Carries an exit code and an optional hint so the entry point can
    render every failure the same way.
    """

    def __init__(
        self,
        message: str,
        exit_code: int = ExitCode.GENERAL_ERROR,
        hint: str | None = None,
        see_also: str | None = None,
    ) -> None:
        self.message = message
        self.exit_code = exit_code
        self.hint = hint
        self.see_also = see_also
        super().__init__(message)


class ConfigError(CLIError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        config_path: str | None = None,
    ) -> None:
        self.config_path = config_path
        if config_path:
            message = f"[{config_path}] {message}"
        super().__init__(message, ExitCode.CONFIG_ERROR, hint)


class IdentifierError(CLIError):
    """Raised when a name or type is not safe to interpolate into generated code."""

    def __init__(self, value: str, role: str, hint: str | None = None) -> None:
        self.value = value
        self.role = role
        super().__init__(f'Invalid {role}: "{value}"', ExitCode.GENERAL_ERROR, hint)


class ColumnSpecError(CLIError):
    """Raised when a column definition cannot be parsed."""

    def __init__(self, message: str, definition: str, hint: str | None = None) -> None:
        self.definition = definition
        super().__init__(message, ExitCode.GENERAL_ERROR, hint)


class TemplateError(CLIError):
    """Raised when a code template is missing or fails to render."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        super().__init__(
            f"Template '{template}': {reason}",
            ExitCode.GENERAL_ERROR,
            "Reinstall the package or check the templates directory",
        )


def format_error(error: CLIError) -> str:
    """Render an error with its hint and reference lines."""
    lines = [f"Error: {error.message}"]
    if error.hint:
        lines.append(f"Hint: {error.hint}")
    if error.see_also:
        lines.append(f"See: {error.see_also}")
    return "\n".join(lines)


def handle_error(
    error: BaseException,
    *,
    debug: bool = False,
    stream: TextIO | None = None,
) -> int:
    """Report an error and return the exit code the process should use."""
    out = stream if stream is not None else sys.stderr

    if isinstance(error, CLIError):
        print(format_error(error), file=out)
        exit_code = error.exit_code
    else:
        print(f"Error: {error}", file=out)
        exit_code = ExitCode.GENERAL_ERROR

    if debug:
        print("\nStack trace:", file=out)
        print(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            file=out,
        )

    return exit_code
