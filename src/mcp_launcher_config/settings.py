"""Runtime settings: where the app keeps its own config.json."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .errors import IoError

APP_IDENTIFIER = "mcp-launcher"
DATA_DIR_ENV = "MCP_LAUNCHER_DATA_DIR"


@dataclass(frozen=True)
class RuntimeSettings:
    app_identifier: str
    data_dir: Path

    @property
    def app_config_file(self) -> Path:
        return self.data_dir / "config.json"


def _platform_data_root() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def default_data_dir(app_identifier: str = APP_IDENTIFIER) -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    try:
        return _platform_data_root() / app_identifier
    except RuntimeError as e:
        # Path.home() fails when no home directory can be determined
        raise IoError(f"Failed to get app data directory: {e}") from e


def load_settings(data_dir: Path | None = None) -> RuntimeSettings:
    return RuntimeSettings(
        app_identifier=APP_IDENTIFIER,
        data_dir=Path(data_dir) if data_dir is not None else default_data_dir(),
    )
