"""
Schema capability and the engine adapters shipped with schema_guard.

A schema is anything that subclasses :class:`Schema` and implements
``parse``: return the validated (possibly normalized) value, or raise
:class:`~schema_guard.exceptions.SchemaValidationError` listing the
field-level issues.  Two engines are adapted out of the box:

* :class:`PydanticSchema` — pydantic v2 models, ``TypeAdapter`` instances
  and plain type annotations (``list[int]``, ``Union[str, int]`` …).
* :class:`JsonSchema` — JSON Schema documents checked with ``jsonschema``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from types import GenericAlias
from typing import Any, List, Optional, Union

from jsonschema import FormatChecker
from jsonschema.validators import validator_for
from pydantic import BaseModel, TypeAdapter, ValidationError

from schema_guard.config import settings
from schema_guard.exceptions import SchemaValidationError
from schema_guard.models.validation import ValidationIssue


class Schema(ABC):
    """Base class every schema accepted by validate()/validate_or_throw() derives from."""

    @abstractmethod
    def parse(self, data: Any) -> Any:
        """
        Validate *data* and return the normalized value.

        Raises:
            SchemaValidationError: If *data* violates the schema.
        """


def _is_model_class(obj: Any) -> bool:
    # list[int] passes isinstance(obj, type) on 3.10
    return isinstance(obj, type) and not isinstance(obj, GenericAlias) and issubclass(obj, BaseModel)


# ======================================================================
# pydantic
# ======================================================================

class PydanticSchema(Schema):
    """
    Adapter for pydantic v2.

    Args:
        target: A ``BaseModel`` subclass, a ``TypeAdapter``, or any type
            annotation pydantic can build a ``TypeAdapter`` for.
        strict: Forwarded to pydantic.  ``None`` keeps the model's own
            configuration (lax mode unless the model says otherwise).
    """

    def __init__(self, target: Any, *, strict: Optional[bool] = None) -> None:
        self.strict = strict
        self._model: Optional[type] = None
        self._adapter: Optional[TypeAdapter] = None

        if isinstance(target, TypeAdapter):
            self._adapter = target
        elif _is_model_class(target):
            self._model = target
        else:
            self._adapter = TypeAdapter(target)

    def parse(self, data: Any) -> Any:
        try:
            if self._model is not None:
                return self._model.model_validate(data, strict=self.strict)
            return self._adapter.validate_python(data, strict=self.strict)
        except ValidationError as e:
            issues = [
                ValidationIssue(
                    path=tuple(err.get("loc", ())),
                    message=err["msg"],
                    code=err.get("type"),
                )
                for err in e.errors(include_url=False)
            ]
            raise SchemaValidationError(str(e), issues) from e

    def __repr__(self) -> str:
        target = self._model.__name__ if self._model is not None else repr(self._adapter)
        return f"PydanticSchema({target}, strict={self.strict})"


# ======================================================================
# JSON Schema
# ======================================================================

class JsonSchema(Schema):
    """
    Adapter for JSON Schema documents.

    The validator class is picked from the document's ``$schema`` keyword
    (latest draft when absent) and the document itself is checked up front,
    so a malformed schema raises ``jsonschema.exceptions.SchemaError`` here
    rather than on first use.

    ``parse`` never transforms the data: a valid value is returned as-is.
    """

    def __init__(self, schema: Union[dict, bool], *, format_check: Optional[bool] = None) -> None:
        if format_check is None:
            format_check = settings.JSONSCHEMA_FORMAT_CHECK

        validator_cls = validator_for(schema)
        validator_cls.check_schema(schema)

        self.schema = schema
        self.format_check = format_check
        self._validator = validator_cls(
            schema,
            format_checker=FormatChecker() if format_check else None,
        )

    def parse(self, data: Any) -> Any:
        errors = sorted(
            self._validator.iter_errors(data),
            key=lambda e: [(isinstance(p, str), p) for p in e.absolute_path],
        )
        if not errors:
            return data

        issues: List[ValidationIssue] = [
            ValidationIssue(
                path=tuple(e.absolute_path),
                message=e.message,
                code=str(e.validator),
            )
            for e in errors
        ]
        summary = "; ".join(f"{issue.location}: {issue.message}" for issue in issues)
        raise SchemaValidationError(summary, issues)

    def __repr__(self) -> str:
        title = self.schema.get("title") if isinstance(self.schema, dict) else self.schema
        return f"JsonSchema(title={title!r}, format_check={self.format_check})"


# ======================================================================
# Capability probe
# ======================================================================

def as_schema(obj: Any) -> Optional[Schema]:
    """
    Return *obj* as a :class:`Schema`, or ``None`` if it is not one.

    Accepted: ``Schema`` instances, pydantic ``BaseModel`` subclasses and
    ``TypeAdapter`` instances.  Plain dicts and objects that merely expose a
    ``parse`` method are rejected; wrap JSON Schema documents in
    :class:`JsonSchema` explicitly.
    """
    if isinstance(obj, Schema):
        return obj
    if isinstance(obj, TypeAdapter):
        return PydanticSchema(obj)
    if _is_model_class(obj):
        return PydanticSchema(obj)
    return None
