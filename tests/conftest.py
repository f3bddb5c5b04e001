"""
Global pytest configuration and fixtures.
"""

import pytest

from recordkit import Field, Record, RecordkitConfigModel, SchemaRegistry

RECORDKIT_ENV_VARS = (
    "RECORDKIT_CONFIG",
    "RECORDKIT_DEBUG",
    "RECORDKIT_STRICT_TYPES",
    "RECORDKIT_NULL_AS_ABSENT",
    "RECORDKIT_INACCESSIBLE_INPUT",
)


@pytest.fixture(autouse=True)
def clean_recordkit_env(monkeypatch):
    """Keep the developer's environment from leaking into configuration tests."""
    for name in RECORDKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry():
    """A fresh registry with default configuration."""
    return SchemaRegistry(config=RecordkitConfigModel())


@pytest.fixture
def make_registry():
    """Factory for registries with custom configuration."""

    def _make(**settings):
        return SchemaRegistry(config=RecordkitConfigModel(**settings))

    return _make


def define_person_types(registry):
    """Declare the Person/Pet example records in ``registry``."""

    class Pet(Record, registry=registry):
        name = Field("string", required=True, accessible=True)

    class Person(Record, registry=registry):
        name = Field("string", required=True, accessible=True)
        age = Field("int", accessible=True)
        pets = Field("Pet[]", accessible=True)
        secret = Field("string", accessible=False)

    return Person, Pet


@pytest.fixture
def person_types(registry):
    return define_person_types(registry)


@pytest.fixture
def Person(person_types):
    return person_types[0]


@pytest.fixture
def Pet(person_types):
    return person_types[1]


@pytest.fixture
def define_people():
    """Declare the Person/Pet example records in a given registry."""
    return define_person_types
