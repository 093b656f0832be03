"""Project configuration loading (``saas.yaml``)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

from .errors import ConfigError
from .validation import validate_project_name

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("saas.yaml", "saas.yml")
PROJECT_TYPES: Final[frozenset[str]] = frozenset({"flutter", "dart", "other"})
DEFAULT_SUPABASE_PATH: Final[str] = "supabase"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Settings read from the project's ``saas.yaml``."""

    path: Path
    name: str | None = None
    project_type: str = "other"
    supabase_path: str = DEFAULT_SUPABASE_PATH

    @property
    def root(self) -> Path:
        return self.path.parent

    @property
    def migrations_dir(self) -> Path:
        return self.root / self.supabase_path / "migrations"


def find_project_config(search_path: Path | None = None) -> Path | None:
    """Return the config file in ``search_path`` (default cwd), if any."""
    start = search_path if search_path is not None else Path.cwd()
    for filename in CONFIG_FILENAMES:
        candidate = start / filename
        if candidate.is_file():
            return candidate
    return None


def _section(data: dict[str, Any], key: str, config_path: Path) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(
            f"'{key}' must be a mapping",
            "Check the structure of your saas.yaml file",
            str(config_path),
        )
    return value


def load_project_config_from_path(config_path: Path) -> ProjectConfig:
    """Load and validate a project config file.

    Raises:
        ConfigError: If the file cannot be read, parsed, or has bad values.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Failed to read project config: {e}",
            "Check file permissions",
            str(config_path),
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML: {e}",
            "Check the YAML syntax in your saas.yaml file",
            str(config_path),
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            "Config root must be a mapping",
            "Check the YAML syntax in your saas.yaml file",
            str(config_path),
        )

    project = _section(data, "project", config_path)
    supabase = _section(data, "supabase", config_path)

    name = project.get("name")
    if name is not None and not validate_project_name(str(name)):
        raise ConfigError(
            f'Invalid project name: "{name}"',
            "Project name must start with a letter and contain only letters, "
            "numbers, hyphens, and underscores.",
            str(config_path),
        )

    project_type = str(project.get("type", "other"))
    if project_type not in PROJECT_TYPES:
        raise ConfigError(
            f"Unknown project type '{project_type}'",
            f"Valid types: {', '.join(sorted(PROJECT_TYPES))}",
            str(config_path),
        )

    return ProjectConfig(
        path=config_path.resolve(),
        name=str(name) if name is not None else None,
        project_type=project_type,
        supabase_path=str(supabase.get("path") or DEFAULT_SUPABASE_PATH),
    )


def load_project_config(search_path: Path | None = None) -> ProjectConfig | None:
    """Load ``saas.yaml`` (or ``saas.yml``) from ``search_path``.

    Returns None when the directory holds no project config.
    """
    config_path = find_project_config(search_path)
    if config_path is None:
        return None
    return load_project_config_from_path(config_path)
