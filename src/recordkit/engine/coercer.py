"""Value checking against type descriptors."""

import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from recordkit.errors import UnknownTypeError
from recordkit.types import (
    ArrayOf,
    MixedType,
    RecordRef,
    ScalarKind,
    ScalarType,
    TypeDescriptor,
)

if TYPE_CHECKING:
    from recordkit.record import Record
    from recordkit.schema import SchemaRegistry

logger = logging.getLogger(__name__)


class CoercionError(ValueError):
    """A value does not match a type descriptor.

    Raised by :class:`ValueCoercer` without field context; the materializer
    turns it into a :class:`~recordkit.errors.TypeMismatchError` naming the
    field and its declared type.
    """

    def __init__(self, descriptor: TypeDescriptor, value: Any):
        super().__init__(f"Expected {descriptor}, got {type(value).__name__}")
        self.descriptor = descriptor
        self.value = value


def is_sequence(value: Any) -> bool:
    """Ordered lists only: strings, bytes and mappings don't count."""
    return isinstance(value, (list, tuple))


def _check_scalar(kind: ScalarKind, value: Any) -> bool:
    # bool is a subclass of int, so it has to be excluded explicitly
    if kind is ScalarKind.BOOL:
        return isinstance(value, bool)
    if kind is ScalarKind.INT:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is ScalarKind.STRING:
        return isinstance(value, str)
    if kind is ScalarKind.FLOAT:
        return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    return False


class ValueCoercer:
    """Checks values against type descriptors, materializing nested records.

    Args:
        registry: Registry used to look up referenced record classes
        materialize: Callable building a record instance from a mapping;
            nested validation errors it raises propagate unchanged
    """

    def __init__(
        self,
        registry: "SchemaRegistry",
        materialize: Callable[[type["Record"], Mapping[str, Any]], "Record"],
    ):
        self.registry = registry
        self._materialize = materialize

    def check(self, descriptor: TypeDescriptor, value: Any) -> Any:
        """Validate a value, returning the value to store.

        Scalars and mixed values are returned unmodified. Mappings given for
        record types are materialized, and arrays are returned as new lists.
        Numeric strings such as ``"1.5"`` are rejected for ``float``: values
        are never converted.

        Raises:
            CoercionError: If the value does not match the descriptor
            UnknownTypeError: If a referenced record type is no longer registered
        """
        if isinstance(descriptor, MixedType):
            return value

        if isinstance(descriptor, ScalarType):
            if not _check_scalar(descriptor.kind, value):
                raise CoercionError(descriptor, value)
            return value

        if isinstance(descriptor, RecordRef):
            return self._check_record(descriptor, value)

        if isinstance(descriptor, ArrayOf):
            if not is_sequence(value):
                raise CoercionError(descriptor, value)
            return [self.check(descriptor.item, item) for item in value]

        raise TypeError(f"Unsupported type descriptor: {descriptor!r}")

    def _check_record(self, descriptor: RecordRef, value: Any) -> Any:
        record_cls = self.registry.lookup(descriptor.record_name)
        if record_cls is None:
            raise UnknownTypeError(descriptor.record_name)

        if isinstance(value, record_cls):
            return value
        if isinstance(value, Mapping):
            logger.debug(f"Materializing nested '{descriptor.record_name}'")
            return self._materialize(record_cls, value)
        raise CoercionError(descriptor, value)
