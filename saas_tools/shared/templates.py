"""Jinja2 template rendering for generated source files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    UndefinedError,
)

from .errors import TemplateError
from .naming import (
    pluralize,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)

TEMPLATE_DIR: Final[Path] = Path(__file__).parent.parent / "templates"
TEMPLATE_SUFFIX: Final[str] = ".j2"


@dataclass
class TemplateRenderer:
    """Renders templates from a directory, compiling each one once.

    One renderer is created per command invocation and passed to the
    generators that need it.
    """

    template_dir: Path = TEMPLATE_DIR
    env: Environment = field(init=False)
    _compiled: dict[str, Template] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self.env.filters.update(
            snake_case=to_snake_case,
            camel_case=to_camel_case,
            pascal_case=to_pascal_case,
            kebab_case=to_kebab_case,
            singularize=singularize,
            pluralize=pluralize,
        )

    def load(self, category: str, name: str, /) -> Template:
        """Return the compiled ``<category>/<name>.j2`` template."""
        key = f"{category}/{name}{TEMPLATE_SUFFIX}"
        template = self._compiled.get(key)
        if template is None:
            try:
                template = self.env.get_template(key)
            except TemplateNotFound as e:
                raise TemplateError(key, "not found") from e
            self._compiled[key] = template
        return template

    def render(self, category: str, name: str, /, **context: Any) -> str:
        template = self.load(category, name)
        try:
            return template.render(**context)
        except UndefinedError as e:
            raise TemplateError(f"{category}/{name}{TEMPLATE_SUFFIX}", str(e)) from e

    def list_templates(self, category: str) -> list[str]:
        """List template names available in a category, without suffix."""
        category_dir = self.template_dir / category
        if not category_dir.is_dir():
            return []
        return sorted(
            p.name.removesuffix(TEMPLATE_SUFFIX)
            for p in category_dir.iterdir()
            if p.is_file() and p.name.endswith(TEMPLATE_SUFFIX)
        )
