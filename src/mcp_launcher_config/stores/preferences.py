from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

from ..errors import IoError
from ..models.preferences import AppPreferences
from ..settings import load_settings
from ._io import read_document, write_document

logger = logging.getLogger(__name__)


def app_preferences_path(data_dir: Path | str | None = None) -> Path:
    """Path of config.json in the app data directory.

    ``data_dir`` overrides the OS-provided directory (see settings.load_settings).
    """
    return load_settings(Path(data_dir) if data_dir is not None else None).app_config_file


def load_app_preferences(data_dir: Path | str | None = None) -> AppPreferences:
    """Load the app's preferences, or the defaults on first run.

    Raises IoError if the file cannot be read and ParseError if it is malformed;
    a malformed file is never replaced by defaults.
    """
    read = read_document(app_preferences_path(data_dir), AppPreferences)
    if read.status == "absent":
        logger.debug("No app preferences at %s, using defaults", read.path)
        return AppPreferences.default()
    return cast("AppPreferences", read.unwrap())


def save_app_preferences(
    preferences: AppPreferences, data_dir: Path | str | None = None
) -> None:
    """Write the preferences wholesale, creating the data directory if needed."""
    path = app_preferences_path(data_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(
            f"Failed to create app data directory {path.parent}: {e}", path=path.parent
        ) from e
    write_document(path, preferences.to_json(path))
    logger.info(
        "Saved app preferences (%d saved server(s)) to %s",
        len(preferences.saved_servers),
        path,
    )
