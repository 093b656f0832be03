"""Output path handling for generated files."""

from __future__ import annotations

from pathlib import Path

from .errors import CLIError, ExitCode


def validate_output_path(user_path: str | Path, base_dir: Path | None = None) -> Path:
    """Resolve an output path, refusing anything outside ``base_dir``.

    Args:
        user_path: Path supplied on the command line, relative or absolute.
        base_dir: Directory output is restricted to. Defaults to the cwd.

    Returns:
        The resolved absolute path.

    Raises:
        CLIError: If the path escapes the base directory.
    """
    base = (base_dir if base_dir is not None else Path.cwd()).resolve()
    target = (base / user_path).resolve()

    if not target.is_relative_to(base):
        raise CLIError(
            f'Output path escapes project directory: "{user_path}"',
            ExitCode.GENERAL_ERROR,
            "Output path must be within the current project directory. "
            'Use relative paths like "./lib/output.dart".',
        )

    return target


def write_output(user_path: str | Path, content: str, base_dir: Path | None = None) -> Path:
    """Validate ``user_path`` and write ``content`` to it.

    Parent directories are created as needed. Returns the written path.
    """
    target = validate_output_path(user_path, base_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target
