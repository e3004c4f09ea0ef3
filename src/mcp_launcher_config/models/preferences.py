from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from ._codec import decode, encode
from .server import ServerEntry

if TYPE_CHECKING:
    from pathlib import Path

    from .project import ProjectConfig


class AppPreferences(BaseModel):
    """Contents of the app's own config.json.

    ``saved_servers`` is an ordered list of (name, entry) pairs, not a map:
    the order the user saved servers in is kept, and a name may in principle
    appear twice.
    """

    saved_servers: list[tuple[str, ServerEntry]]
    last_directory: str | None = None

    @classmethod
    def default(cls) -> AppPreferences:
        """First-run preferences: nothing saved, no last directory."""
        return cls(saved_servers=[])

    @classmethod
    def from_json(cls, text: str | bytes, path: Path | None = None) -> AppPreferences:
        return decode(cls, text, path)

    def to_json(self, path: Path | None = None) -> str:
        return encode(self, path)

    def saved_server(self, name: str) -> ServerEntry | None:
        for saved_name, entry in self.saved_servers:
            if saved_name == name:
                return entry
        return None

    def remember_server(
        self, name: str, entry: ServerEntry, replacing: str | None = None
    ) -> AppPreferences:
        """Return a copy with ``(name, entry)`` saved.

        An existing pair named ``name`` (or ``replacing``, when renaming) is
        updated in place; otherwise the pair is appended.
        """
        servers = list(self.saved_servers)
        if replacing is not None and replacing != name:
            old = _index_of(servers, replacing)
            if old is not None:
                if _index_of(servers, name) is not None:
                    del servers[old]
                else:
                    servers[old] = (name, entry)
                    return self.model_copy(update={"saved_servers": servers})
        idx = _index_of(servers, name)
        if idx is None:
            servers.append((name, entry))
        else:
            servers[idx] = (name, entry)
        return self.model_copy(update={"saved_servers": servers})

    def forget_server(self, name: str) -> AppPreferences:
        servers = [pair for pair in self.saved_servers if pair[0] != name]
        return self.model_copy(update={"saved_servers": servers})

    def remember_project(self, config: ProjectConfig) -> AppPreferences:
        """Save every server of ``config``, as when a whole document is applied."""
        prefs = self
        for name, entry in config.servers.items():
            prefs = prefs.remember_server(name, entry)
        return prefs

    def with_last_directory(self, directory: str | None) -> AppPreferences:
        return self.model_copy(update={"last_directory": directory})


def _index_of(servers: list[tuple[str, ServerEntry]], name: str) -> int | None:
    for i, (saved_name, _) in enumerate(servers):
        if saved_name == name:
            return i
    return None
