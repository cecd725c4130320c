"""
Validation wrapper — two calling conventions over a Schema engine.

- validate_or_throw(): returns the parsed value or raises
- validate():          never raises, returns a ValidationResult

Both reject ``None`` data and anything that is not a recognized schema
before the engine is invoked (see ``as_schema``).
"""
from __future__ import annotations

import logging
import reprlib
from typing import Any, Iterable

from schema_guard.config import settings
from schema_guard.config.constants import (
    INVALID_SCHEMA_MESSAGE,
    ISSUE_SEPARATOR,
    MISSING_DATA_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    VALIDATION_FAILED_PREFIX,
)
from schema_guard.exceptions import (
    InvalidSchemaError,
    MissingDataError,
    SchemaValidationError,
    ValidationFailedError,
)
from schema_guard.models.schema import as_schema
from schema_guard.models.validation import ErrorKind, ValidationIssue, ValidationResult
from schema_guard.validation.metrics import record_outcome, timed_validation

logger = logging.getLogger(__name__)

OPERATION_THROW = "validate_or_throw"
OPERATION_RESULT = "validate"


# ======================================================================
# Internal helpers
# ======================================================================

def _preview(data: Any) -> str:
    text = reprlib.repr(data)
    limit = settings.MAX_LOG_DATA_CHARS
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def _log_rejection(operation: str, data: Any, issues: Iterable[ValidationIssue]) -> None:
    if not (settings.LOG_VALIDATION_FAILURES and logger.isEnabledFor(logging.DEBUG)):
        return
    logger.debug(
        "%s rejected %s: %s",
        operation,
        _preview(data),
        "; ".join(f"{issue.location}: {issue.message}" for issue in issues),
    )


# ======================================================================
# Public API
# ======================================================================

def validate_or_throw(data: Any, schema: Any) -> Any:
    """
    Validate *data* against *schema* and return the parsed value.

    Args:
        data: The value to validate. ``None`` is rejected.
        schema: A :class:`~schema_guard.models.schema.Schema`, a pydantic
            ``BaseModel`` subclass or a pydantic ``TypeAdapter``.

    Returns:
        Whatever the schema's ``parse`` returns (a model instance for
        pydantic models, the unchanged value for JSON Schema).

    Raises:
        MissingDataError: ``data`` is ``None`` ("Data is missing").
        InvalidSchemaError: ``schema`` is not a recognized schema.
        ValidationFailedError: The data violates the schema; the message is
            ``"Validation failed: "`` followed by the engine's summary.
        Exception: Any other error raised by the engine, unchanged.

    Pydantic schemas run in lax mode unless built with ``strict=True``, so
    ``"2"`` is accepted for an ``int`` field by default.
    """
    if data is None:
        record_outcome(OPERATION_THROW, ErrorKind.MISSING_DATA.value)
        raise MissingDataError()

    resolved = as_schema(schema)
    if resolved is None:
        record_outcome(OPERATION_THROW, ErrorKind.INVALID_SCHEMA.value)
        raise InvalidSchemaError()

    try:
        with timed_validation(OPERATION_THROW):
            value = resolved.parse(data)
    except SchemaValidationError as e:
        record_outcome(OPERATION_THROW, ErrorKind.VALIDATION_FAILED.value)
        _log_rejection(OPERATION_THROW, data, e.issues)
        raise ValidationFailedError(e.summary, e.issues) from e
    except Exception:
        record_outcome(OPERATION_THROW, ErrorKind.UNEXPECTED.value)
        raise

    record_outcome(OPERATION_THROW, "success")
    return value


def validate(data: Any, schema: Any) -> ValidationResult:
    """
    Validate *data* against *schema* without raising.

    Every failure is reported through the returned record:

    ==================  ==========================================================
    kind                error
    ==================  ==========================================================
    missing_data        ``"Data is missing"``
    invalid_schema      ``"Invalid schema: must be a Zod schema"``
    validation_failed   ``"Validation failed: "`` + comma-joined issue messages
    unexpected          ``"Unknown error occurred during validation"``
    ==================  ==========================================================

    For ``unexpected`` the original exception is kept on ``result.cause`` and
    logged with its traceback.

    Pydantic schemas run in lax mode unless built with ``strict=True``.
    """
    if data is None:
        record_outcome(OPERATION_RESULT, ErrorKind.MISSING_DATA.value)
        return ValidationResult.failure(ErrorKind.MISSING_DATA, MISSING_DATA_MESSAGE)

    resolved = as_schema(schema)
    if resolved is None:
        record_outcome(OPERATION_RESULT, ErrorKind.INVALID_SCHEMA.value)
        return ValidationResult.failure(ErrorKind.INVALID_SCHEMA, INVALID_SCHEMA_MESSAGE)

    try:
        with timed_validation(OPERATION_RESULT):
            value = resolved.parse(data)
    except SchemaValidationError as e:
        record_outcome(OPERATION_RESULT, ErrorKind.VALIDATION_FAILED.value)
        _log_rejection(OPERATION_RESULT, data, e.issues)
        return ValidationResult.failure(
            ErrorKind.VALIDATION_FAILED,
            VALIDATION_FAILED_PREFIX + ISSUE_SEPARATOR.join(e.messages),
            issues=tuple(e.issues),
        )
    except Exception as e:
        record_outcome(OPERATION_RESULT, ErrorKind.UNEXPECTED.value)
        logger.exception("Unexpected error while validating against %r", resolved)
        return ValidationResult.failure(ErrorKind.UNEXPECTED, UNKNOWN_ERROR_MESSAGE, cause=e)

    record_outcome(OPERATION_RESULT, "success")
    return ValidationResult.ok(value)
