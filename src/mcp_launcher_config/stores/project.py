from __future__ import annotations

import logging
from pathlib import Path

from ..models.project import ProjectConfig
from ._io import read_document, write_document

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".mcp.json"


def project_config_path(directory: Path | str) -> Path:
    return Path(directory) / PROJECT_CONFIG_FILENAME


def save_project_config(directory: Path | str, config: ProjectConfig) -> None:
    """Write ``config`` to <directory>/.mcp.json, replacing any existing file.

    No validation and no merge: whatever is in memory is what ends up on disk.
    Raises SerializationError if the config cannot be encoded and IoError if
    the file cannot be written (missing directory, permissions, disk full).
    """
    path = project_config_path(directory)
    text = config.to_json(path)
    write_document(path, text)
    logger.info("Saved %d MCP server(s) to %s", len(config.servers), path)


def load_project_config(directory: Path | str) -> ProjectConfig | None:
    """Load <directory>/.mcp.json.

    Returns None when the directory has no .mcp.json yet. Raises IoError if
    the file cannot be read and ParseError if it is not a valid document.
    """
    return read_document(project_config_path(directory), ProjectConfig).unwrap()
