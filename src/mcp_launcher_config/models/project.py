from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ParseError
from ._codec import decode, encode
from .server import ServerEntry

if TYPE_CHECKING:
    from pathlib import Path


class ProjectConfig(BaseModel):
    """Contents of .mcp.json: server name -> ServerEntry.

    An empty ``servers`` map loads fine; whether the document is fit to save
    is decided by :func:`mcp_launcher_config.validation.validate_project_config`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    servers: dict[str, ServerEntry] = Field(alias="mcpServers")

    @classmethod
    def from_json(cls, text: str | bytes, path: Path | None = None) -> ProjectConfig:
        return decode(cls, text, path)

    def to_json(self, path: Path | None = None) -> str:
        return encode(self, path)

    def with_server(
        self, name: str, entry: ServerEntry, replacing: str | None = None
    ) -> ProjectConfig:
        """Return a copy with ``entry`` stored under ``name``.

        ``replacing`` is the key the entry was edited from; when it differs
        from ``name`` the old key is dropped, so renaming never duplicates.
        """
        servers = dict(self.servers)
        if replacing is not None and replacing != name:
            servers.pop(replacing, None)
        servers[name] = entry
        return self.model_copy(update={"servers": servers})

    def without_server(self, name: str) -> ProjectConfig:
        servers = {k: v for k, v in self.servers.items() if k != name}
        return self.model_copy(update={"servers": servers})

    def compact(self) -> ProjectConfig:
        servers = {k: v.compact() for k, v in self.servers.items()}
        return self.model_copy(update={"servers": servers})


def parse_server_entry(text: str) -> tuple[str | None, ServerEntry]:
    """Parse a single server pasted into an editor.

    Accepts a bare entry (``{"command": ...}``), for which no name is known,
    or an ``{"mcpServers": {...}}`` wrapper, in which case the first server
    and its name are returned.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError("Server definition must be a JSON object")

    try:
        if "mcpServers" in data:
            config = ProjectConfig.model_validate(data, by_alias=True, by_name=False)
            if not config.servers:
                raise ParseError("No servers found in mcpServers")
            name, entry = next(iter(config.servers.items()))
            return name, entry
        return None, ServerEntry.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid server definition: {e}") from e
