"""
Shared test fixtures for the schema_guard test suite.
"""
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from schema_guard.models.schema import JsonSchema, PydanticSchema, Schema


# ==========================================================================
# pydantic models
# ==========================================================================

class Person(BaseModel):
    name: str
    age: float = Field(..., gt=0)


class Contact(BaseModel):
    name: str
    contacts: List[str]


class UserEnvelope(BaseModel):
    user: Contact


class OptionalAge(BaseModel):
    name: str
    age: Optional[float] = None


class Credentials(BaseModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=8)


# ==========================================================================
# Custom schemas
# ==========================================================================

class ExplodingSchema(Schema):
    """Schema whose engine fails with something other than a validation error."""

    def parse(self, data):
        raise RuntimeError("engine exploded")


# ==========================================================================
# Fixtures
# ==========================================================================

@pytest.fixture
def person_model():
    return Person


@pytest.fixture
def person_schema():
    return PydanticSchema(Person)


@pytest.fixture
def person_json_schema():
    return JsonSchema(
        {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "age": {"type": "number", "exclusiveMinimum": 0},
            },
            "required": ["name", "age"],
        }
    )


@pytest.fixture
def valid_person():
    return {"name": "Alice", "age": 30}


@pytest.fixture
def invalid_person():
    return {"name": "Bob", "age": "thirty"}


@pytest.fixture
def int_list_schema():
    return PydanticSchema(List[int], strict=True)


@pytest.fixture
def exploding_schema():
    return ExplodingSchema()


@pytest.fixture
def model_classes():
    return {
        "nested": UserEnvelope,
        "optional": OptionalAge,
        "credentials": Credentials,
    }
