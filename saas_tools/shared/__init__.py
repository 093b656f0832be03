"""Shared utilities for the code generators."""

from .errors import (
    CLIError,
    ColumnSpecError,
    ConfigError,
    ExitCode,
    IdentifierError,
    TemplateError,
    format_error,
    handle_error,
)
from .naming import (
    pluralize,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from .validation import (
    assert_valid_dart_type,
    assert_valid_identifier,
    assert_valid_project_name,
    assert_valid_worker_name,
    validate_dart_type,
    validate_identifier,
    validate_project_name,
    validate_worker_name,
)
from .paths import validate_output_path, write_output
from .config import ProjectConfig, load_project_config
from .templates import TemplateRenderer

__all__ = [
    # Errors
    "CLIError",
    "ColumnSpecError",
    "ConfigError",
    "ExitCode",
    "IdentifierError",
    "TemplateError",
    "format_error",
    "handle_error",
    # Naming utilities
    "pluralize",
    "singularize",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    # Validation
    "assert_valid_dart_type",
    "assert_valid_identifier",
    "assert_valid_project_name",
    "assert_valid_worker_name",
    "validate_dart_type",
    "validate_identifier",
    "validate_project_name",
    "validate_worker_name",
    # Output and configuration
    "validate_output_path",
    "write_output",
    "ProjectConfig",
    "load_project_config",
    "TemplateRenderer",
]
