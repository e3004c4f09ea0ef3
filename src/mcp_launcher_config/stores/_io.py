"""Whole-document reads and writes shared by both stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, TypeVar

from pydantic import BaseModel

from ..errors import IoError, ParseError
from ..models._codec import decode

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=BaseModel)

ReadStatus = Literal["absent", "parsed", "malformed"]


@dataclass
class DocumentRead(Generic[_T]):
    """Outcome of reading one config document.

    Exactly one of ``value`` (parsed) or ``error`` (malformed) is set;
    neither is set when the file does not exist.
    """

    status: ReadStatus
    path: Path
    value: _T | None = None
    error: ParseError | None = None

    def unwrap(self) -> _T | None:
        """Return the parsed value, None when absent, or raise the parse error."""
        if self.error is not None:
            raise self.error
        return self.value


def read_document(path: Path, model_class: type[_T]) -> DocumentRead[_T]:
    """Read and decode ``path``; a missing file is reported, not raised.

    Read failures other than absence raise IoError.
    """
    if not path.exists():
        logger.debug("No document at %s", path)
        return DocumentRead(status="absent", path=path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise IoError(f"Failed to read config file {path}: {e}", path=path) from e

    try:
        value = decode(model_class, content, path)
    except ParseError as e:
        logger.debug("Malformed document at %s: %s", path, e)
        return DocumentRead(status="malformed", path=path, error=e)
    logger.debug("Read %s from %s", model_class.__name__, path)
    return DocumentRead(status="parsed", path=path, value=value)


def write_document(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in full.

    The text goes to a sibling temp file first, then over the target, so a
    failed write leaves the previous document intact.
    """
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise IoError(f"Failed to write config file {path}: {e}", path=path) from e
    logger.debug("Wrote %d bytes to %s", len(text), path)
