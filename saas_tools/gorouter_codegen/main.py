"""
GoRouter Generator - Generates a GoRoute definition for a screen.

Usage:
    saas gen gorouter recipeDetail --path /recipe/:id
    saas gen gorouter userPosts --path /users/:userId/posts/:page --params userId,page:int
"""

from __future__ import annotations

import argparse
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from saas_tools.shared import (
    CLIError,
    IdentifierError,
    TemplateRenderer,
    assert_valid_dart_type,
    assert_valid_identifier,
    handle_error,
    to_kebab_case,
    to_pascal_case,
    write_output,
)

TEMPLATE_CATEGORY: Final[str] = "gorouter"
DEFAULT_PARAM_TYPE: Final[str] = "String"

# Route paths: slash-separated segments, ``:name`` marks a path parameter.
ROUTE_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(r"/[A-Za-z0-9_/:-]*")
_PATH_PARAM: Final[re.Pattern[str]] = re.compile(r":(\w+)")

# Dart types parsed from the path string; anything else is passed as-is.
_PARSERS: Final[dict[str, str]] = {
    "int": "int.parse",
    "double": "double.parse",
    "num": "num.parse",
}


@dataclass(frozen=True, slots=True)
class RouteParam:
    name: str
    type: str = DEFAULT_PARAM_TYPE

    @property
    def expression(self) -> str:
        """Dart expression reading this parameter from ``state``."""
        raw = f"state.pathParameters['{self.name}']!"
        parser = _PARSERS.get(self.type)
        return f"{parser}({raw})" if parser else raw


def parse_params(spec: str) -> list[RouteParam]:
    """Parse ``name[:Type]`` pairs; the type defaults to ``String``."""
    params: list[RouteParam] = []
    for segment in spec.split(","):
        param_name, _, param_type = segment.partition(":")
        param_name = param_name.strip()
        if not param_name:
            continue
        param_type = param_type.strip() or DEFAULT_PARAM_TYPE

        assert_valid_identifier(param_name, "path parameter")
        assert_valid_dart_type(param_type, "parameter type")
        params.append(RouteParam(param_name, param_type))
    return params


def route_path(name: str, path: str | None = None) -> str:
    """Return the route path, defaulting to ``/<kebab(name)>``.

    Raises:
        IdentifierError: If the path contains characters outside the route grammar.
    """
    result = path or f"/{to_kebab_case(name)}"
    if ROUTE_PATH_PATTERN.fullmatch(result) is None:
        raise IdentifierError(
            result,
            "route path",
            "Route path must start with / and contain only letters, numbers, "
            "underscores, hyphens, slashes and :params.",
        )
    return result


def generate(
    name: str,
    path: str | None = None,
    params: str | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a GoRoute for the ``<Name>Screen`` widget.

    Path parameters come from ``params`` when given, otherwise from the
    ``:name`` segments of the path, all typed ``String``.

    Raises:
        IdentifierError: On an unsafe route name, path, parameter or type.
    """
    assert_valid_identifier(name, "route name")
    resolved_path = route_path(name, path)

    parsed = parse_params(params) if params else []
    if not parsed:
        parsed = parse_params(",".join(_PATH_PARAM.findall(resolved_path)))

    renderer = renderer or TemplateRenderer()
    return renderer.render(
        TEMPLATE_CATEGORY,
        "route.dart",
        name=name,
        route_name=to_kebab_case(name),
        path=resolved_path,
        params=parsed,
        screen_name=f"{to_pascal_case(name)}Screen",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="saas gen gorouter",
        description="Generate GoRouter routes",
    )
    parser.add_argument("name", help="Route name")
    parser.add_argument("-p", "--path", help="Route path (e.g., /recipe/:id)")
    parser.add_argument("--params", help="Path parameters (e.g., id:String,page:int)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path, relative to the current directory",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("SAAS_DEBUG")),
        help="Show stack traces on failure",
    )

    args = parser.parse_args(argv)

    try:
        output = generate(args.name, args.path, args.params)

        if args.output:
            written = write_output(args.output, output)
            print(f"Generated {written}")
        else:
            print(output, end="")
    except CLIError as e:
        raise SystemExit(handle_error(e, debug=args.debug)) from e


if __name__ == "__main__":
    main()
