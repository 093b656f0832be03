"""GoRouter Generator - Generates GoRoute definitions."""

from .main import (
    RouteParam,
    generate,
    main,
    parse_params,
    route_path,
)

__all__ = [
    "RouteParam",
    "generate",
    "main",
    "parse_params",
    "route_path",
]
