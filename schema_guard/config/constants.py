"""
Fixed message strings returned or raised by the validation wrapper.

These are part of the public contract: callers match on them (or on the
``Validation failed:`` prefix), so the wording must not change.
"""

MISSING_DATA_MESSAGE: str = "Data is missing"

# Historical wording, kept verbatim for compatibility with existing callers.
INVALID_SCHEMA_MESSAGE: str = "Invalid schema: must be a Zod schema"

VALIDATION_FAILED_PREFIX: str = "Validation failed: "

UNKNOWN_ERROR_MESSAGE: str = "Unknown error occurred during validation"

# Separator between individual issue messages in ValidationResult.error
ISSUE_SEPARATOR: str = ", "
