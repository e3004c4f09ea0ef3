from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import ConfigValidationError


@dataclass
class ValidationResult:
    """Every problem found in a project config, in check order.

    Attributes:
        errors: The failures, as the exceptions validate_project_config would raise.
        valid: True if there are no errors.
    """

    errors: list[ConfigValidationError]

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [str(e) for e in self.errors]
