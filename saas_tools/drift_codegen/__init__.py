"""Drift Code Generator - Generates Drift tables, DAOs and migrations."""

from .main import (
    VALID_TYPES,
    generate,
    main,
)

__all__ = [
    "VALID_TYPES",
    "generate",
    "main",
]
