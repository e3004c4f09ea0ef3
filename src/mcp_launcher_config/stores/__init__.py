from ._io import DocumentRead, read_document
from .preferences import app_preferences_path, load_app_preferences, save_app_preferences
from .project import (
    PROJECT_CONFIG_FILENAME,
    load_project_config,
    project_config_path,
    save_project_config,
)

__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "DocumentRead",
    "app_preferences_path",
    "load_app_preferences",
    "load_project_config",
    "project_config_path",
    "read_document",
    "save_app_preferences",
    "save_project_config",
]
