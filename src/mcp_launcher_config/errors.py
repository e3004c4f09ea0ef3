from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Base class for every failure raised by this package.

    Attributes:
        path: The file or directory involved, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class IoError(ConfigError):
    """Raised when a config file or directory cannot be opened, read, written or created."""


class ParseError(ConfigError):
    """Raised when a document is not valid JSON or does not have the expected shape."""


class SerializationError(ConfigError):
    """Raised when an in-memory document cannot be encoded as JSON."""


class ConfigValidationError(ConfigError):
    """Raised when a project config is loadable but not sane enough to save."""


class EmptyServerSetError(ConfigValidationError):
    def __init__(self) -> None:
        super().__init__("At least one MCP server must be configured")


class EmptyServerNameError(ConfigValidationError):
    def __init__(self) -> None:
        super().__init__("Server name cannot be empty")


class EmptyCommandError(ConfigValidationError):
    """Raised when a server entry has no command.

    Attributes:
        name: The server whose command is empty.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Command for server '{name}' cannot be empty")


class PickerChannelError(ConfigError):
    """Raised when the directory dialog fails before delivering a result."""


class CommandError(Exception):
    """Failure crossing the front-end boundary, flattened to a message string."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
