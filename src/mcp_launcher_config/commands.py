"""Capability surface for a front end that speaks plain JSON data.

Every function takes and returns JSON-compatible values. Any failure is
raised as CommandError carrying a human-readable message; the typed error
is kept as ``__cause__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import CommandError, ConfigError
from .models.preferences import AppPreferences
from .models.project import ProjectConfig
from .picker import pick_project_directory
from .stores.preferences import load_app_preferences, save_app_preferences
from .stores.project import load_project_config, save_project_config
from .validation import validate_project_config

if TYPE_CHECKING:
    from pathlib import Path

    from .picker import DirectoryPicker


def select_directory(picker: DirectoryPicker | None = None) -> str | None:
    try:
        chosen = pick_project_directory(picker)
    except ConfigError as e:
        raise CommandError(f"Failed to select directory: {e}") from e
    return str(chosen) if chosen is not None else None


def save_mcp_config(directory: str, config: dict[str, Any]) -> None:
    project = _project_from_data(config)
    try:
        save_project_config(directory, project)
    except ConfigError as e:
        raise CommandError(str(e)) from e


def load_mcp_config(directory: str) -> dict[str, Any] | None:
    try:
        project = load_project_config(directory)
    except ConfigError as e:
        raise CommandError(str(e)) from e
    if project is None:
        return None
    return project.model_dump(mode="json", by_alias=True)


def load_app_config(data_dir: Path | str | None = None) -> dict[str, Any]:
    try:
        prefs = load_app_preferences(data_dir)
    except ConfigError as e:
        raise CommandError(str(e)) from e
    return prefs.model_dump(mode="json")


def save_app_config(config: dict[str, Any], data_dir: Path | str | None = None) -> None:
    try:
        prefs = AppPreferences.model_validate(config)
    except ValidationError as e:
        raise CommandError(f"Invalid app config: {e}") from e
    try:
        save_app_preferences(prefs, data_dir)
    except ConfigError as e:
        raise CommandError(str(e)) from e


def validate_mcp_config(config: dict[str, Any]) -> None:
    project = _project_from_data(config)
    try:
        validate_project_config(project)
    except ConfigError as e:
        raise CommandError(str(e)) from e


def _project_from_data(config: dict[str, Any]) -> ProjectConfig:
    try:
        return ProjectConfig.model_validate(config, by_alias=True, by_name=False)
    except ValidationError as e:
        raise CommandError(f"Invalid MCP config: {e}") from e
