"""
Unit tests for validate_or_throw (raising calling convention).
"""
import pytest

from schema_guard.config.constants import INVALID_SCHEMA_MESSAGE, MISSING_DATA_MESSAGE
from schema_guard.exceptions import (
    InvalidSchemaError,
    MissingDataError,
    SchemaGuardError,
    SchemaValidationError,
    ValidationFailedError,
)
from schema_guard.models.schema import JsonSchema
from schema_guard.validation.validator import validate_or_throw


class _DuckSchema:
    """Has a parse method but is not a Schema."""

    def parse(self, data):
        return data


class TestValidateOrThrowSuccess:
    def test_returns_parsed_model(self, valid_person, person_schema, person_model):
        result = validate_or_throw(valid_person, person_schema)
        assert isinstance(result, person_model)
        assert result.model_dump() == valid_person

    def test_json_schema_returns_data_unchanged(self, valid_person, person_json_schema):
        result = validate_or_throw(valid_person, person_json_schema)
        assert result == valid_person
        assert result is valid_person

    def test_accepts_raw_model_class(self, valid_person, person_model):
        assert validate_or_throw(valid_person, person_model).name == "Alice"

    @pytest.mark.parametrize("value", [0, "", [], False])
    def test_falsy_data_is_not_missing(self, value):
        assert validate_or_throw(value, JsonSchema({})) == value


class TestValidateOrThrowMissingData:
    def test_none_raises(self, person_schema):
        with pytest.raises(MissingDataError) as exc_info:
            validate_or_throw(None, person_schema)
        assert str(exc_info.value) == MISSING_DATA_MESSAGE

    def test_missing_data_checked_before_schema(self):
        with pytest.raises(MissingDataError):
            validate_or_throw(None, {})

    def test_is_value_error(self, person_schema):
        with pytest.raises(ValueError, match="^Data is missing$"):
            validate_or_throw(None, person_schema)


class TestValidateOrThrowInvalidSchema:
    @pytest.mark.parametrize("schema", [{}, None, "schema", 42, _DuckSchema(), {"type": "object"}])
    def test_non_schema_raises(self, schema):
        with pytest.raises(InvalidSchemaError) as exc_info:
            validate_or_throw({}, schema)
        assert str(exc_info.value) == INVALID_SCHEMA_MESSAGE

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            validate_or_throw({"a": 1}, {})


class TestValidateOrThrowValidationFailure:
    def test_message_prefix(self, invalid_person, person_schema):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_or_throw(invalid_person, person_schema)
        assert str(exc_info.value).startswith("Validation failed:")

    def test_message_carries_engine_summary(self, invalid_person, person_schema):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_or_throw(invalid_person, person_schema)
        cause = exc_info.value.__cause__
        assert isinstance(cause, SchemaValidationError)
        assert str(exc_info.value) == f"Validation failed: {cause.summary}"
        assert "Person" in str(exc_info.value)

    def test_issues_exposed(self, invalid_person, person_schema):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_or_throw(invalid_person, person_schema)
        issues = exc_info.value.issues
        assert len(issues) == 1
        assert issues[0].path == ("age",)

    def test_json_schema_failure(self, invalid_person, person_json_schema):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_or_throw(invalid_person, person_json_schema)
        assert str(exc_info.value) == "Validation failed: age: 'thirty' is not of type 'number'"

    def test_all_library_errors_share_base(self, invalid_person, person_schema):
        with pytest.raises(SchemaGuardError):
            validate_or_throw(invalid_person, person_schema)


class TestValidateOrThrowUnexpected:
    def test_non_validation_error_propagates_unchanged(self, exploding_schema):
        with pytest.raises(RuntimeError, match="engine exploded") as exc_info:
            validate_or_throw({"a": 1}, exploding_schema)
        assert not isinstance(exc_info.value, SchemaGuardError)
