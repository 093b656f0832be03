"""Riverpod Generator - Generates Riverpod providers."""

from .main import (
    VALID_PATTERNS,
    generate,
    main,
)

__all__ = [
    "VALID_PATTERNS",
    "generate",
    "main",
]
