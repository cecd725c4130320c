"""
schema_guard — validate data against a schema, raising or returning a result.
"""
from schema_guard.exceptions import (
    InvalidSchemaError,
    MissingDataError,
    SchemaGuardError,
    SchemaValidationError,
    ValidationFailedError,
)
from schema_guard.models.schema import JsonSchema, PydanticSchema, Schema, as_schema
from schema_guard.models.validation import ErrorKind, ValidationIssue, ValidationResult
from schema_guard.validation.validator import validate, validate_or_throw

__all__ = [
    "validate",
    "validate_or_throw",
    "ValidationResult",
    "ValidationIssue",
    "ErrorKind",
    "Schema",
    "PydanticSchema",
    "JsonSchema",
    "as_schema",
    "SchemaGuardError",
    "MissingDataError",
    "InvalidSchemaError",
    "SchemaValidationError",
    "ValidationFailedError",
]
