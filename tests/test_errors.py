"""Tests for recordkit.errors."""

from recordkit import (
    InaccessibleFieldError,
    MethodNotFoundError,
    MissingFieldError,
    RecordError,
    SchemaDefinitionError,
    TypeMismatchError,
    UnknownTypeError,
    ValidationError,
)


class TestErrorHierarchy:
    """Input errors versus programming errors."""

    def test_validation_errors(self):
        for error in (
            MissingFieldError("Person", "name"),
            InaccessibleFieldError("Person", "secret"),
            TypeMismatchError("Person", "pets", "Pet[]"),
        ):
            assert isinstance(error, ValidationError)
            assert isinstance(error, ValueError)
            assert isinstance(error, RecordError)

    def test_programming_errors(self):
        unknown = UnknownTypeError("Animal", "Person", "pet")
        missing_method = MethodNotFoundError("Person", "rename")

        assert isinstance(unknown, SchemaDefinitionError)
        assert not isinstance(unknown, ValidationError)
        assert isinstance(missing_method, AttributeError)
        assert not isinstance(missing_method, ValidationError)


class TestErrorDetails:
    """Errors carry enough context to build a diagnostic."""

    def test_missing_field(self):
        error = MissingFieldError("Person", "name")

        assert str(error) == "Missing required field 'name' for Person"
        assert error.to_dict() == {
            "error": "MissingFieldError",
            "message": "Missing required field 'name' for Person",
            "record_type": "Person",
            "field": "name",
        }

    def test_type_mismatch(self):
        error = TypeMismatchError("Person", "pets", "Pet[]")

        assert error.expected_type == "Pet[]"
        assert error.to_dict()["expected_type"] == "Pet[]"
        assert "expected Pet[]" in str(error)

    def test_unknown_type(self):
        assert str(UnknownTypeError("Animal")) == "Unknown type 'Animal'"
        assert str(UnknownTypeError("Animal", "Person", "pet")) == (
            "Unknown type 'Animal' on field 'pet' of Person"
        )
        assert UnknownTypeError("Animal").to_dict()["type"] == "Animal"

    def test_method_not_found(self):
        error = MethodNotFoundError("Person", "rename")

        assert str(error) == "Invalid method Person.rename"
        assert error.method_name == "rename"
        assert "field" not in error.to_dict()
