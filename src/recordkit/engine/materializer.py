"""Construction of record instances from untyped input mappings."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from recordkit.errors import InaccessibleFieldError, MissingFieldError, TypeMismatchError
from recordkit.schema.models import RecordSchemaModel, SchemaFieldModel

from .coercer import CoercionError, ValueCoercer

if TYPE_CHECKING:
    from recordkit.record import Record
    from recordkit.schema import SchemaRegistry

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Record")


class Materializer:
    """Builds validated record instances from nested mappings.

    Fields are processed in schema declaration order. For each field:

    1. if the input contains the field name, the value is assigned (see
       :meth:`assign`);
    2. otherwise, if the field is required, :class:`MissingFieldError` is raised;
    3. otherwise the field is left absent.

    Construction is all-or-nothing: the first error propagates and the
    partially populated instance is discarded. Errors raised while
    materializing nested records propagate unchanged, keeping the nested
    record and field names.

    Example:
        >>> materializer = Materializer(default_registry)
        >>> person = materializer.construct(Person, {"name": "Alice", "pets": [{"name": "Rex"}]})
        >>> person.pets[0].name
        'Rex'
    """

    def __init__(self, registry: "SchemaRegistry"):
        self.registry = registry
        self.config = registry.config
        self.resolver = registry.resolver()
        self.coercer = ValueCoercer(registry, self.construct)

    def construct(self, record_cls: type[R], data: Mapping[str, Any]) -> R:
        """Create an instance of ``record_cls`` from ``data``.

        Raises:
            MissingFieldError: A required field is absent
            InaccessibleFieldError: A non-accessible field is present in the input
            TypeMismatchError: A value does not match its field's declared type
        """
        instance = record_cls.__new__(record_cls)
        instance._values = {}
        self.populate(instance, data)
        return instance

    def populate(self, instance: "Record", data: Mapping[str, Any]) -> None:
        """Fill a freshly created instance from ``data``."""
        schema = self.registry.schema_for(type(instance))
        logger.debug(f"Materializing '{schema.name}' from keys {list(data)}")

        for field in schema.fields:
            if self._is_present(data, field.name):
                if not field.accessible and self.config.inaccessible_input == "ignore":
                    logger.debug(f"Ignoring inaccessible field '{field.name}' of '{schema.name}'")
                    continue
                self._assign(instance, schema, field, data[field.name])
            elif field.required:
                raise MissingFieldError(schema.name, field.name)

    def assign(self, instance: "Record", field_name: str, value: Any) -> None:
        """Validate ``value`` and store it on a single field of ``instance``.

        Raises:
            InaccessibleFieldError: The field is undeclared or not accessible
            TypeMismatchError: The value does not match the declared type
        """
        schema = self.registry.schema_for(type(instance))
        field = schema.get_field(field_name)
        if field is None:
            raise InaccessibleFieldError(schema.name, field_name)
        self._assign(instance, schema, field, value)

    def _is_present(self, data: Mapping[str, Any], name: str) -> bool:
        if name not in data:
            return False
        return not (self.config.null_as_absent and data[name] is None)

    def _assign(
        self,
        instance: "Record",
        schema: RecordSchemaModel,
        field: SchemaFieldModel,
        value: Any,
    ) -> None:
        if not field.accessible:
            raise InaccessibleFieldError(schema.name, field.name)

        descriptor = self.resolver.resolve(field.raw_type, schema.name, field.name)
        try:
            validated = self.coercer.check(descriptor, value)
        except CoercionError as e:
            logger.debug(f"Rejected value for '{schema.name}.{field.name}': {e}")
            raise TypeMismatchError(schema.name, field.name, field.raw_type) from None

        instance._values[field.name] = validated
