"""Domain exceptions raised by survey services and translated at the API boundary."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from typing import Any


class SurveyError(Exception):
    """Base class for survey application errors."""


@dataclass(frozen=True)
class FieldViolation:
    """A validation failure scoped to one input field."""

    field: str
    code: str
    default_message: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


class FieldValidationError(SurveyError):
    """Raised by application code when submitted values break field rules."""

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations = list(violations)
        super().__init__(f"{len(self.violations)} field violation(s)")


class ResourceNotFoundError(SurveyError):
    """Raised when one or more requested resources do not exist."""

    error_code = "not_found"
    resource = "resource"

    def __init__(self, ids: Iterable[Any]) -> None:
        self.ids = tuple(ids)
        if not self.ids:
            raise ValueError("at least one missing id is required")
        super().__init__(f"{self.resource} not found: {', '.join(str(item) for item in self.ids)}")


class QuestionNotFoundError(ResourceNotFoundError):
    """Raised when referenced questions do not exist."""

    error_code = "question_not_found"
    resource = "question"


class UserNotFoundError(ResourceNotFoundError):
    """Raised when referenced users do not exist."""

    error_code = "user_not_found"
    resource = "user"
