from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class ServerEntry(BaseModel):
    """One MCP server definition (command, args, env).

    ``env`` is ``None`` when the entry has no environment; it is then left out
    of the serialized form entirely rather than written as ``null`` or ``{}``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    command: str
    args: list[str] = []
    env: dict[str, str] | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_env(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.env is None:
            data.pop("env", None)
        return data

    def compact(self) -> ServerEntry:
        """Return a copy with an empty ``env`` map dropped."""
        if self.env is not None and not self.env:
            return self.model_copy(update={"env": None})
        return self
