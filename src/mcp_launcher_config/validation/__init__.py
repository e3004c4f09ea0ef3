from __future__ import annotations

from typing import TYPE_CHECKING

from ._project import iter_project_errors
from ._result import ValidationResult

if TYPE_CHECKING:
    from ..models.project import ProjectConfig


def validate_project_config(config: ProjectConfig) -> None:
    """Check that a project config is sane enough to save.

    Raises the first failure: EmptyServerSetError when there are no servers,
    then per server EmptyServerNameError or EmptyCommandError(name).
    Saving does not call this; callers decide whether drafts may be written.
    """
    for error in iter_project_errors(config):
        raise error


def check_project_config(config: ProjectConfig) -> ValidationResult:
    """Collect every failure instead of stopping at the first."""
    return ValidationResult(errors=list(iter_project_errors(config)))


__all__ = [
    "ValidationResult",
    "check_project_config",
    "validate_project_config",
]
