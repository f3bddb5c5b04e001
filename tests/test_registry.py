"""Tests for recordkit.schema (field declarations and the schema registry)."""

import logging
import threading

import pytest

from recordkit import (
    Field,
    Record,
    SchemaDefinitionError,
    SchemaFieldModel,
    SchemaRegistry,
    UnknownTypeError,
)
from recordkit.schema import raw_type_of


class TestFieldDeclarations:
    """Python declarations translate into raw type names."""

    @pytest.mark.parametrize(
        "declared,raw_type",
        [
            ("Pet[]", "Pet[]"),
            (str, "string"),
            (int, "int"),
            (float, "float"),
            (bool, "bool"),
            (object, "mixed"),
            ([int], "int[]"),
            ([[str]], "string[][]"),
        ],
    )
    def test_raw_type_of(self, declared, raw_type):
        assert raw_type_of(declared) == raw_type

    def test_record_classes(self, Pet):
        assert raw_type_of(Pet) == "Pet"
        assert raw_type_of([Pet]) == "Pet[]"

    @pytest.mark.parametrize("declared", [dict, [int, str], [], {"a": 1}, 42])
    def test_unsupported_declarations(self, declared):
        with pytest.raises(UnknownTypeError):
            raw_type_of(declared)

    def test_field_defaults(self):
        field = Field()
        assert (field.raw_type, field.required, field.accessible) == ("mixed", False, True)


class TestSchemaCache:
    """Schemas are built once per record type."""

    def test_schema_contents(self, registry, Person):
        schema = registry.schema_for(Person)

        assert schema.name == "Person"
        assert schema.field_names == ["name", "age", "pets", "secret"]
        assert schema.get_field("pets") == SchemaFieldModel(name="pets", type="Pet[]")
        assert [f.name for f in schema.accessible_fields()] == ["name", "age", "pets"]

    def test_schema_built_once(self, registry, Person):
        assert registry.schema_for(Person) is registry.schema_for(Person)
        assert Person.schema() is registry.schema_for(Person)

    def test_concurrent_builds_converge(self, registry, Person):
        results = []
        barrier = threading.Barrier(8)

        def build():
            barrier.wait()
            results.append(registry.schema_for(Person))

        threads = [threading.Thread(target=build) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(schema is results[0] for schema in results)

    def test_schema_is_immutable(self, registry, Person):
        schema = registry.schema_for(Person)
        with pytest.raises(Exception):
            schema.name = "Other"

    def test_describe(self, registry, Person):
        field = registry.describe(Person, "secret")
        assert field is not None
        assert field.accessible is False
        assert registry.describe(Person, "nickname") is None

    def test_docstring_becomes_description(self, registry):
        class Invoice(Record, registry=registry):
            """A customer invoice."""

            total = Field(float)

        assert Invoice.schema().description == "A customer invoice."


class TestRegistration:
    """Record classes register themselves by name."""

    def test_lookup(self, registry, Person, Pet):
        assert registry.lookup("Person") is Person
        assert registry.lookup("Pet") is Pet
        assert registry.lookup("Nobody") is None
        assert "Pet" in registry
        assert registry.record_names() == ["Pet", "Person"]

    def test_custom_record_name(self, registry):
        class AnimalRecord(Record, registry=registry, name="Animal"):
            species = Field(str)

        assert registry.lookup("Animal") is AnimalRecord
        assert AnimalRecord.__record_name__ == "Animal"

    def test_reregistration_replaces(self, registry, Pet, caplog):
        with caplog.at_level(logging.WARNING, logger="recordkit.schema.registry"):

            class Pet(Record, registry=registry):  # noqa: F811
                nickname = Field(str)

        assert registry.lookup("Pet") is Pet
        assert "already registered" in caplog.text

    def test_unregister(self, registry, Pet):
        registry.unregister("Pet")
        assert registry.lookup("Pet") is None

    def test_separate_registries(self, registry):
        other = SchemaRegistry()

        class Tag(Record, registry=other):
            label = Field(str)

        assert other.lookup("Tag") is Tag
        assert registry.lookup("Tag") is None


class TestSchemaErrors:
    """Invalid declarations are reported as configuration errors."""

    def test_malformed_type(self, registry):
        class Broken(Record, registry=registry):
            items = Field("Pet[")

        with pytest.raises(UnknownTypeError) as exc_info:
            registry.schema_for(Broken)

        assert exc_info.value.record_type == "Broken"
        assert exc_info.value.field_name == "items"

    def test_unknown_type_in_strict_mode(self, make_registry):
        strict = make_registry(strict_types=True)

        class Owner(Record, registry=strict):
            pet = Field("Animal")

        with pytest.raises(UnknownTypeError) as exc_info:
            Owner({})
        assert exc_info.value.type_name == "Animal"

    def test_unknown_type_is_mixed_by_default(self, registry):
        class Owner(Record, registry=registry):
            pet = Field("Animal")

        assert Owner(pet=["anything"]).pet == ["anything"]

    def test_underscore_field_names(self, registry):
        class Hidden(Record, registry=registry):
            _token = Field(str)

        with pytest.raises(SchemaDefinitionError):
            registry.schema_for(Hidden)

    def test_record_class_from_another_registry(self, registry):
        other = SchemaRegistry()

        class Pet(Record, registry=other):
            name = Field(str, required=True)

        class Owner(Record, registry=registry):
            pet = Field(Pet)
            pets = Field([Pet])

        with pytest.raises(SchemaDefinitionError) as exc_info:
            Owner({"pet": {"bogus": 1}})

        assert exc_info.value.record_type == "Owner"
        assert exc_info.value.field_name == "pet"

    def test_record_class_from_same_registry(self, registry, Pet):
        class Owner(Record, registry=registry):
            pets = Field([Pet])

        assert Owner.schema().get_field("pets").raw_type == "Pet[]"
        assert isinstance(Owner({"pets": [{"name": "Rex"}]}).pets[0], Pet)

    def test_field_shadowing_record_method(self, registry):
        with pytest.raises(SchemaDefinitionError) as exc_info:

            class Doc(Record, registry=registry):
                to_map = Field(str)

        assert exc_info.value.field_name == "to_map"
        assert registry.lookup("Doc") is None
