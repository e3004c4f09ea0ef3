from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import (
    ConfigValidationError,
    EmptyCommandError,
    EmptyServerNameError,
    EmptyServerSetError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.project import ProjectConfig


def iter_project_errors(config: ProjectConfig) -> Iterator[ConfigValidationError]:
    if not config.servers:
        yield EmptyServerSetError()
        return

    # args and env are unconstrained
    for name, server in config.servers.items():
        if not name:
            yield EmptyServerNameError()
        if not server.command:
            yield EmptyCommandError(name)
