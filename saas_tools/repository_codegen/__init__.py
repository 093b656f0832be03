"""Repository Generator - Generates repository classes."""

from .main import (
    generate,
    main,
    repository_names,
)

__all__ = [
    "generate",
    "main",
    "repository_names",
]
