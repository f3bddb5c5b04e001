"""Record registry and schema cache.

The registry plays the part of the schema introspector for the engine: it maps
record names to record classes, and builds the ordered field schema of each
record class exactly once, on first use. After that the cached
:class:`RecordSchemaModel` is never mutated, so any number of threads may
read it concurrently.
"""

import logging
import threading
from typing import TYPE_CHECKING

from recordkit.config import RecordkitConfigModel, load_config
from recordkit.errors import SchemaDefinitionError, UnknownTypeError
from recordkit.types import TypeResolver, is_well_formed

from .fields import Field
from .models import RecordSchemaModel, SchemaFieldModel

if TYPE_CHECKING:
    from recordkit.engine import Engine
    from recordkit.record import Record

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Maps record names to record classes and caches their schemas.

    Args:
        config: Engine configuration. If omitted it is loaded with
            :func:`recordkit.config.load_config` the first time it is needed.

    Example:
        >>> registry = SchemaRegistry()
        >>> class Pet(Record, registry=registry):
        ...     name = Field(str, required=True)
        >>> registry.lookup("Pet") is Pet
        True
        >>> registry.schema_for(Pet).field_names
        ['name']
    """

    def __init__(self, config: RecordkitConfigModel | None = None):
        self._config = config
        self._records: dict[str, type["Record"]] = {}
        self._schemas: dict[type["Record"], RecordSchemaModel] = {}
        self._engine: "Engine | None" = None
        self._lock = threading.RLock()

    @property
    def config(self) -> RecordkitConfigModel:
        if self._config is None:
            with self._lock:
                if self._config is None:
                    self._config = load_config()
        return self._config

    @property
    def engine(self) -> "Engine":
        """The materializer, accessor gate and serializer bound to this registry."""
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    from recordkit.engine import Engine

                    self._engine = Engine(self)
        return self._engine

    def resolver(self) -> TypeResolver:
        """Create a type resolver bound to this registry's record names."""
        return TypeResolver(self.is_record, strict=self.config.strict_types)

    def register(self, record_cls: type["Record"]) -> None:
        """Register a record class under its record name.

        Registering a different class under a name already in use replaces the
        previous class.
        """
        name = record_cls.__record_name__
        with self._lock:
            previous = self._records.get(name)
            if previous is not None and previous is not record_cls:
                logger.warning(f"Record type '{name}' is already registered, replacing it")
                self._schemas.pop(previous, None)
            self._records[name] = record_cls
        logger.debug(f"Registered record type '{name}'")

    def unregister(self, name: str) -> None:
        with self._lock:
            record_cls = self._records.pop(name, None)
            if record_cls is not None:
                self._schemas.pop(record_cls, None)

    def lookup(self, name: str) -> type["Record"] | None:
        return self._records.get(name)

    def is_record(self, name: str) -> bool:
        return name in self._records

    def record_names(self) -> list[str]:
        return list(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def schema_for(self, record_cls: type["Record"]) -> RecordSchemaModel:
        """Return the cached schema of a record class, building it on first use.

        Raises:
            UnknownTypeError: If a field declares a type that cannot be interpreted
        """
        schema = self._schemas.get(record_cls)
        if schema is not None:
            return schema

        with self._lock:
            schema = self._schemas.get(record_cls)
            if schema is None:
                schema = self._build_schema(record_cls)
                self._schemas[record_cls] = schema
        return schema

    def describe(self, record_cls: type["Record"], field_name: str) -> SchemaFieldModel | None:
        """Return the descriptor of a single field, or None if it is not declared."""
        return self.schema_for(record_cls).get_field(field_name)

    def _build_schema(self, record_cls: type["Record"]) -> RecordSchemaModel:
        record_name = record_cls.__record_name__

        # Base classes first, so inherited fields keep their original position
        declared: dict[str, SchemaFieldModel] = {}
        for klass in reversed(record_cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Field):
                    self._check_reference(record_name, attr, value)
                    declared[attr] = value.describe(attr)

        for field in declared.values():
            if field.name.startswith("_"):
                raise SchemaDefinitionError(
                    f"Field names must not start with an underscore: '{field.name}'",
                    record_type=record_name,
                    field_name=field.name,
                )
            if not is_well_formed(field.raw_type):
                raise UnknownTypeError(field.raw_type, record_name, field.name)

        if self.config.strict_types:
            resolver = self.resolver()
            for field in declared.values():
                resolver.resolve(field.raw_type, record_name, field.name)

        schema = RecordSchemaModel(
            name=record_name,
            description=(record_cls.__doc__ or "").strip() or None,
            fields=tuple(declared.values()),
        )
        logger.debug(f"Built schema for '{record_name}': {schema.field_names}")
        return schema

    def _check_reference(self, record_name: str, field_name: str, field: Field) -> None:
        # A referenced class must be the one registered under its record name
        referenced = field.record_cls
        if referenced is None or self.lookup(referenced.__record_name__) is referenced:
            return
        raise SchemaDefinitionError(
            f"Field '{field_name}' of {record_name} references record type "
            f"'{referenced.__record_name__}', which is not registered in this registry",
            record_type=record_name,
            field_name=field_name,
        )


default_registry = SchemaRegistry()
