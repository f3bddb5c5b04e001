"""Name-based field access through the accessibility rules.

The accessor gate is the only way field values are read or written after
construction. It serves three call styles:

- ``gate.get(person, "name")`` / ``gate.set(person, "name", "Bob")``
- named accessor calls resolved with :meth:`AccessorGate.dispatch`:
  ``get_name()``, ``set_name(v)``, ``getName()``, ``setName(v)``
- plain attributes on records, backed by :class:`~recordkit.schema.Field`
"""

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from recordkit.errors import InaccessibleFieldError, MethodNotFoundError

from .materializer import Materializer

if TYPE_CHECKING:
    from recordkit.record import Record

logger = logging.getLogger(__name__)

_ACCESSOR_PATTERN = re.compile(r"^(get|set)(_?)(\w+)$")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _lcfirst(name: str) -> str:
    return name[:1].lower() + name[1:]


def _camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class AccessorGate:
    """Dispatches get/set operations keyed by field name.

    Args:
        materializer: Materializer used to validate and store values on set
    """

    def __init__(self, materializer: Materializer):
        self.materializer = materializer
        self.registry = materializer.registry

    def get(self, instance: "Record", field_name: str) -> Any:
        """Return the stored value of a field, or None if it was never set.

        Raises:
            InaccessibleFieldError: The field is undeclared or not accessible
        """
        self._accessible_field(instance, field_name)
        return instance._values.get(field_name)

    def is_set(self, instance: "Record", field_name: str) -> bool:
        self._accessible_field(instance, field_name)
        return field_name in instance._values

    def set(self, instance: "Record", field_name: str, value: Any) -> None:
        """Validate a value and store it on a field.

        The caller must hold exclusive access to ``instance`` for the duration
        of the call.

        Raises:
            InaccessibleFieldError: The field is undeclared or not accessible
            TypeMismatchError: The value does not match the declared type
        """
        self._accessible_field(instance, field_name)
        self.materializer.assign(instance, field_name, value)

    def dispatch(self, instance: "Record", method_name: str) -> Callable[..., Any]:
        """Resolve a named accessor call into a bound get or set operation.

        Both ``get_first_name`` and ``getFirstName`` styles are recognized.
        The field name is not checked here: calling the returned callable
        raises :class:`InaccessibleFieldError` for unknown fields.

        Raises:
            MethodNotFoundError: The name matches neither naming pattern
        """
        match = _ACCESSOR_PATTERN.match(method_name)
        if match is None:
            raise MethodNotFoundError(type(instance).__record_name__, method_name)

        operation, separator, suffix = match.groups()
        if separator:
            field_name = suffix
        elif suffix[:1].isupper():
            field_name = self._field_name_from_camel(instance, suffix)
        else:
            raise MethodNotFoundError(type(instance).__record_name__, method_name)

        if operation == "get":

            def getter() -> Any:
                return self.get(instance, field_name)

            return getter

        def setter(value: Any) -> None:
            self.set(instance, field_name, value)

        return setter

    def call(self, instance: "Record", method_name: str, *args: Any) -> Any:
        """Resolve and invoke a named accessor call in one step."""
        return self.dispatch(instance, method_name)(*args)

    def _field_name_from_camel(self, instance: "Record", suffix: str) -> str:
        schema = self.registry.schema_for(type(instance))
        candidate = _lcfirst(suffix)
        if schema.get_field(candidate) is None:
            snake = _camel_to_snake(suffix)
            if schema.get_field(snake) is not None:
                return snake
        return candidate

    def _accessible_field(self, instance: "Record", field_name: str) -> None:
        schema = self.registry.schema_for(type(instance))
        field = schema.get_field(field_name)
        if field is None or not field.accessible:
            logger.debug(f"Denied access to '{schema.name}.{field_name}'")
            raise InaccessibleFieldError(schema.name, field_name)
