"""Error taxonomy for recordkit.

Two families of errors are raised by the engine:

- :class:`ValidationError` subclasses describe bad *input*: a required field
  is missing, a field is unknown or not accessible, or a value does not match
  the declared type. Callers are expected to recover from these, typically by
  reporting them back to whoever supplied the data.
- :class:`SchemaDefinitionError` and :class:`MethodNotFoundError` describe a
  defect in the record declarations or in the calling code. They should be
  treated as programming errors.

Every error carries the record type name and, where it applies, the field
name, so a diagnostic can be built without re-deriving any context.
"""

from typing import Any


class RecordError(Exception):
    """Base class for all recordkit errors."""

    def __init__(
        self,
        message: str,
        record_type: str | None = None,
        field_name: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.record_type = record_type
        self.field_name = field_name

    def to_dict(self) -> dict[str, Any]:
        """Render the error as a plain dictionary (used for JSON output)."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.record_type is not None:
            result["record_type"] = self.record_type
        if self.field_name is not None:
            result["field"] = self.field_name
        return result


class ValidationError(RecordError, ValueError):
    """Raised when input data does not satisfy a record schema."""


class MissingFieldError(ValidationError):
    """A required field is absent from the construction input."""

    def __init__(self, record_type: str, field_name: str):
        super().__init__(
            f"Missing required field '{field_name}' for {record_type}",
            record_type=record_type,
            field_name=field_name,
        )


class InaccessibleFieldError(ValidationError):
    """A field is not declared on the record, or is declared but not accessible."""

    def __init__(self, record_type: str, field_name: str):
        super().__init__(
            f"Unknown or inaccessible field '{field_name}' for {record_type}",
            record_type=record_type,
            field_name=field_name,
        )


class TypeMismatchError(ValidationError):
    """A value does not match the declared type of the field it is assigned to."""

    def __init__(self, record_type: str, field_name: str, expected_type: str):
        super().__init__(
            f"Invalid value for field '{field_name}' of {record_type}: expected {expected_type}",
            record_type=record_type,
            field_name=field_name,
        )
        self.expected_type = expected_type

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["expected_type"] = self.expected_type
        return result


class SchemaDefinitionError(RecordError):
    """Raised when record declarations themselves are invalid."""


class UnknownTypeError(SchemaDefinitionError):
    """A field declares a type that cannot be interpreted."""

    def __init__(
        self,
        type_name: str,
        record_type: str | None = None,
        field_name: str | None = None,
    ):
        location = ""
        if record_type is not None and field_name is not None:
            location = f" on field '{field_name}' of {record_type}"
        elif record_type is not None:
            location = f" on {record_type}"
        super().__init__(
            f"Unknown type '{type_name}'{location}",
            record_type=record_type,
            field_name=field_name,
        )
        self.type_name = type_name

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["type"] = self.type_name
        return result


class MethodNotFoundError(RecordError, AttributeError):
    """A named accessor call does not match the get/set naming patterns."""

    def __init__(self, record_type: str, method_name: str):
        super().__init__(
            f"Invalid method {record_type}.{method_name}",
            record_type=record_type,
        )
        self.method_name = method_name


__all__ = [
    "RecordError",
    "ValidationError",
    "MissingFieldError",
    "InaccessibleFieldError",
    "TypeMismatchError",
    "SchemaDefinitionError",
    "UnknownTypeError",
    "MethodNotFoundError",
]
