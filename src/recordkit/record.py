"""The record base class.

Record types are declared as subclasses of :class:`Record` with
:class:`~recordkit.schema.Field` attributes::

    class Pet(Record):
        name = Field(str, required=True)

    class Person(Record):
        name = Field(str, required=True)
        age = Field(int)
        pets = Field([Pet])
        internal_id = Field(int, accessible=False)

    person = Person({"name": "Alice", "pets": [{"name": "Rex"}]})
    person.pets[0].name          # 'Rex'
    person.getName()             # 'Alice'
    person.set_age(30)
    person.to_map()              # {'name': 'Alice', 'age': 30, 'pets': [{'name': 'Rex'}]}
"""

import types
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from recordkit.engine import Engine
from recordkit.errors import SchemaDefinitionError
from recordkit.schema import (
    Field,
    RecordSchemaModel,
    SchemaFieldModel,
    SchemaRegistry,
    default_registry,
)

R = TypeVar("R", bound="Record")


class Record:
    """Base class for typed records.

    Subclasses register themselves in a registry under their record name when
    the class is created. Both can be chosen with class keywords::

        class Pet(Record, registry=my_registry, name="Animal"):
            ...

    Instances are built from a mapping and/or keyword values, and are
    validated field by field in declaration order. Unset fields are absent:
    reading them returns None and they are left out of :meth:`to_map`.
    """

    __registry__: ClassVar[SchemaRegistry] = default_registry
    __record_name__: ClassVar[str] = "Record"

    _values: dict[str, Any]

    def __init_subclass__(
        cls,
        registry: SchemaRegistry | None = None,
        name: str | None = None,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls.__registry__ = registry
        cls.__record_name__ = name or cls.__name__
        _check_field_names(cls)
        cls.__registry__.register(cls)

    def __init__(self, data: Mapping[str, Any] | None = None, /, **values: Any):
        self._values = {}
        merged = dict(data) if data is not None else {}
        merged.update(values)
        self._engine().materializer.populate(self, merged)

    @classmethod
    def _engine(cls) -> Engine:
        return cls.__registry__.engine

    @classmethod
    def schema(cls) -> RecordSchemaModel:
        """Return the cached schema of this record type."""
        return cls.__registry__.schema_for(cls)

    @classmethod
    def from_map(cls: type[R], data: Mapping[str, Any]) -> R:
        return cls._engine().serializer.from_map(cls, data)

    @classmethod
    def from_object(cls: type[R], obj: Any) -> R:
        """Build a record from a generic object graph (e.g. SimpleNamespace)."""
        return cls._engine().serializer.from_generic_object(cls, obj)

    def to_map(self) -> dict[str, Any]:
        return self._engine().serializer.to_map(self)

    def is_set(self, field_name: str) -> bool:
        return self._engine().accessor.is_set(self, field_name)

    def _get_field(self, field_name: str) -> Any:
        return self._engine().accessor.get(self, field_name)

    def _set_field(self, field_name: str, value: Any) -> None:
        self._engine().accessor.set(self, field_name, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for get_x()/setX() style calls
        if name.startswith("_"):
            raise AttributeError(name)
        return self._engine().accessor.dispatch(self, name)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"{self.__record_name__}({values})"


def _check_field_names(record_cls: type[Record]) -> None:
    """Reject fields that would shadow a :class:`Record` attribute, e.g. ``to_map``."""
    for attr, value in vars(record_cls).items():
        if isinstance(value, Field) and hasattr(Record, attr):
            raise SchemaDefinitionError(
                f"Field name '{attr}' clashes with Record.{attr}",
                record_type=record_cls.__record_name__,
                field_name=attr,
            )


def define_record(
    name: str,
    fields: Iterable[SchemaFieldModel],
    registry: SchemaRegistry | None = None,
    description: str | None = None,
) -> type[Record]:
    """Create and register a record class from field descriptors.

    Example:
        >>> Pet = define_record("Pet", [SchemaFieldModel(name="name", type="string")])
        >>> Pet({"name": "Rex"}).to_map()
        {'name': 'Rex'}
    """
    namespace: dict[str, Any] = {
        field.name: Field(
            field.raw_type,
            required=field.required,
            accessible=field.accessible,
            description=field.description,
        )
        for field in fields
    }
    namespace["__module__"] = __name__
    if description:
        namespace["__doc__"] = description

    kwds: dict[str, Any] = {"name": name}
    if registry is not None:
        kwds["registry"] = registry
    return types.new_class(name, (Record,), kwds, lambda ns: ns.update(namespace))
