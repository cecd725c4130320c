"""
ValidationResult — encapsulates the outcome of a single validate() call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union


class ErrorKind(str, Enum):
    """Failure category carried by a failed ValidationResult."""

    MISSING_DATA = "missing_data"
    INVALID_SCHEMA = "invalid_schema"
    VALIDATION_FAILED = "validation_failed"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-level problem reported by a schema engine."""

    path: Tuple[Union[str, int], ...]
    message: str
    code: Optional[str] = None

    @property
    def location(self) -> str:
        if not self.path:
            return "<root>"
        return ".".join(str(p) for p in self.path)


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validating one value against a schema.

    Exactly one of ``data`` (on success) and ``error`` (on failure) is
    populated; ``success`` always agrees with which one it is.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    issues: Tuple[ValidationIssue, ...] = ()
    # Original exception for UNEXPECTED failures (audit only)
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def ok(cls, data: Any) -> "ValidationResult":
        return cls(success=True, data=data, error=None)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        error: str,
        issues: Tuple[ValidationIssue, ...] = (),
        cause: Optional[BaseException] = None,
    ) -> "ValidationResult":
        return cls(success=False, data=None, error=error, kind=kind, issues=tuple(issues), cause=cause)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "data": self.data,
            "error": self.error,
        }
