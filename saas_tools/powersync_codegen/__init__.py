"""PowerSync Generator - Generates sync rules and client schemas."""

from .main import (
    DEFAULT_USER_COLUMN,
    VALID_TYPES,
    generate,
    main,
)

__all__ = [
    "DEFAULT_USER_COLUMN",
    "VALID_TYPES",
    "generate",
    "main",
]
