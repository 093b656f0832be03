"""Freezed Generator - Generates immutable Freezed models."""

from .main import (
    FieldSpec,
    generate,
    main,
    parse_field_spec,
)

__all__ = [
    "FieldSpec",
    "generate",
    "main",
    "parse_field_spec",
]
