import logging

from .errors import (
    CommandError,
    ConfigError,
    ConfigValidationError,
    EmptyCommandError,
    EmptyServerNameError,
    EmptyServerSetError,
    IoError,
    ParseError,
    PickerChannelError,
    SerializationError,
)
from .models import AppPreferences, ProjectConfig, ServerEntry, parse_server_entry
from .picker import (
    DirectoryPicker,
    FixedDirectoryPicker,
    TkDirectoryPicker,
    pick_project_directory,
)
from .settings import RuntimeSettings, load_settings
from .stores import (
    app_preferences_path,
    load_app_preferences,
    load_project_config,
    project_config_path,
    save_app_preferences,
    save_project_config,
)
from .validation import ValidationResult, check_project_config, validate_project_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AppPreferences",
    "CommandError",
    "ConfigError",
    "ConfigValidationError",
    "DirectoryPicker",
    "EmptyCommandError",
    "EmptyServerNameError",
    "EmptyServerSetError",
    "FixedDirectoryPicker",
    "IoError",
    "ParseError",
    "PickerChannelError",
    "ProjectConfig",
    "RuntimeSettings",
    "SerializationError",
    "ServerEntry",
    "TkDirectoryPicker",
    "ValidationResult",
    "app_preferences_path",
    "check_project_config",
    "load_app_preferences",
    "load_project_config",
    "load_settings",
    "parse_server_entry",
    "pick_project_directory",
    "project_config_path",
    "save_app_preferences",
    "save_project_config",
    "validate_project_config",
]
