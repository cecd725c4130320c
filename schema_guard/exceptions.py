"""
Exception taxonomy for the validation wrapper.

Messages equal the fixed contract strings in ``schema_guard.config.constants``
so callers can keep matching on message prefixes, while the classes allow
structured ``except`` clauses.
"""
from __future__ import annotations

from typing import Iterable, List

from schema_guard.config.constants import (
    INVALID_SCHEMA_MESSAGE,
    MISSING_DATA_MESSAGE,
    VALIDATION_FAILED_PREFIX,
)
from schema_guard.models.validation import ValidationIssue


class SchemaGuardError(Exception):
    """Base class for every error raised by schema_guard itself."""


class MissingDataError(SchemaGuardError, ValueError):
    """Raised when the value to validate is None."""

    def __init__(self) -> None:
        super().__init__(MISSING_DATA_MESSAGE)


class InvalidSchemaError(SchemaGuardError, TypeError):
    """Raised when the schema argument is not a recognized schema."""

    def __init__(self) -> None:
        super().__init__(INVALID_SCHEMA_MESSAGE)


class SchemaValidationError(SchemaGuardError):
    """
    Structured validation failure raised by ``Schema.parse``.

    Carries the engine's own summary message and the individual issues.
    """

    def __init__(self, summary: str, issues: Iterable[ValidationIssue]) -> None:
        self.summary = summary
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__(summary)

    @property
    def messages(self) -> List[str]:
        return [issue.message for issue in self.issues]


class ValidationFailedError(SchemaGuardError, ValueError):
    """Raised by validate_or_throw when the data does not satisfy the schema."""

    def __init__(self, summary: str, issues: Iterable[ValidationIssue]) -> None:
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__(f"{VALIDATION_FAILED_PREFIX}{summary}")
