from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import ParseError, SerializationError

if TYPE_CHECKING:
    from pathlib import Path

_T = TypeVar("_T", bound=BaseModel)


def decode(model_class: type[_T], text: str | bytes, path: Path | None = None) -> _T:
    """Decode a whole JSON document into ``model_class``, rejecting anything malformed."""
    # by_name=False: documents must use the wire keys (mcpServers), not field names
    try:
        return model_class.model_validate_json(text, by_alias=True, by_name=False)
    except ValidationError as e:
        where = f" in {path}" if path is not None else ""
        raise ParseError(f"Invalid {model_class.__name__}{where}: {e}", path=path) from e


def encode(model: BaseModel, path: Path | None = None) -> str:
    try:
        return model.model_dump_json(indent=2, by_alias=True)
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Failed to serialize {type(model).__name__}: {e}", path=path
        ) from e
