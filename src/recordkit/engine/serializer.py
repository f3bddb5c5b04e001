"""Conversion between record instances and plain nested mappings."""

import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, TypeVar

from .materializer import Materializer

if TYPE_CHECKING:
    from recordkit.record import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Record")


def normalize_generic(value: Any) -> Any:
    """Deep-convert generic objects into plain dictionaries.

    ``SimpleNamespace`` instances become dicts; lists, tuples and dicts are
    traversed; every other value is returned untouched.

    Example:
        >>> normalize_generic(SimpleNamespace(name="Rex", tags=[SimpleNamespace(k=1)]))
        {'name': 'Rex', 'tags': [{'k': 1}]}
    """
    if isinstance(value, SimpleNamespace):
        return {key: normalize_generic(item) for key, item in vars(value).items()}
    if isinstance(value, Mapping):
        return {key: normalize_generic(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_generic(item) for item in value]
    return value


class Serializer:
    """Serializes records to mappings and materializes them back.

    Args:
        materializer: Materializer used for the mapping-to-record direction
    """

    def __init__(self, materializer: Materializer):
        self.materializer = materializer
        self.registry = materializer.registry

    def to_map(self, instance: "Record") -> dict[str, Any]:
        """Convert a record into a plain nested dictionary.

        Only accessible fields that are currently set are emitted, in
        declaration order. Nested records, including records inside lists,
        are converted recursively.
        """
        schema = self.registry.schema_for(type(instance))
        result: dict[str, Any] = {}
        for field in schema.fields:
            if field.accessible and field.name in instance._values:
                result[field.name] = self._export(instance._values[field.name])
        return result

    def _export(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._export(item) for item in value]
        if isinstance(value, Mapping):
            return {key: self._export(item) for key, item in value.items()}
        # Duck-typed to avoid importing the record module here
        if getattr(type(value), "__record_name__", None) is not None and hasattr(value, "_values"):
            return self.to_map(value)
        return value

    def from_map(self, record_cls: type[R], data: Mapping[str, Any]) -> R:
        """Materialize a record from a mapping; identical to construction."""
        return self.materializer.construct(record_cls, data)

    def from_generic_object(self, record_cls: type[R], obj: Any) -> R:
        """Materialize a record from a generic object graph.

        Raises:
            TypeError: If ``obj`` is neither a generic object nor a mapping
        """
        if not isinstance(obj, (SimpleNamespace, Mapping)):
            raise TypeError(
                f"Cannot build {record_cls.__record_name__} from {type(obj).__name__}, "
                "expected a SimpleNamespace or a mapping"
            )
        logger.debug(f"Normalizing generic object for '{record_cls.__record_name__}'")
        return self.from_map(record_cls, normalize_generic(obj))
