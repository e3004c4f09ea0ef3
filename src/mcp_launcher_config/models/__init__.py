from .preferences import AppPreferences
from .project import ProjectConfig, parse_server_entry
from .server import ServerEntry

__all__ = [
    "AppPreferences",
    "ProjectConfig",
    "ServerEntry",
    "parse_server_entry",
]
