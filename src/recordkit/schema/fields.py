"""Field declarations for record classes."""

from typing import TYPE_CHECKING, Any

from recordkit.errors import UnknownTypeError
from recordkit.types import ARRAY_MARKER

from .models import SchemaFieldModel

if TYPE_CHECKING:
    from recordkit.record import Record

_BUILTIN_TYPES: dict[Any, str] = {
    bool: "bool",
    int: "int",
    float: "float",
    str: "string",
    object: "mixed",
    Any: "mixed",
}


def raw_type_of(declared: Any) -> str:
    """Translate a declared Python type into its raw type name.

    Accepts a raw type string, one of the builtins ``bool``, ``int``,
    ``float``, ``str`` or ``object``, a record class, or a one-element list
    wrapping any of those to declare an array.

    Raises:
        UnknownTypeError: If the declaration cannot be expressed as a raw type
    """
    if isinstance(declared, str):
        return declared
    if isinstance(declared, list):
        if len(declared) != 1:
            raise UnknownTypeError(repr(declared))
        return raw_type_of(declared[0]) + ARRAY_MARKER
    try:
        builtin = _BUILTIN_TYPES.get(declared)
    except TypeError:
        # Unhashable declarations
        builtin = None
    if builtin is not None:
        return builtin
    record_name = getattr(declared, "__record_name__", None)
    if isinstance(declared, type) and isinstance(record_name, str):
        return record_name
    raise UnknownTypeError(getattr(declared, "__name__", repr(declared)))


def referenced_record(declared: Any) -> type | None:
    """Return the record class a declaration refers to, looking through arrays."""
    while isinstance(declared, list) and len(declared) == 1:
        declared = declared[0]
    if isinstance(declared, type) and isinstance(getattr(declared, "__record_name__", None), str):
        return declared
    return None


class Field:
    """Declares a field on a :class:`~recordkit.record.Record` subclass.

    Reading and writing the attribute on an instance goes through the
    accessor gate, so accessibility and type checks apply to plain attribute
    syntax as well.

    Example:
        >>> class Pet(Record):
        ...     name = Field(str, required=True)
        ...     tags = Field(["string"])
        ...     owner_notes = Field("mixed", accessible=False)
    """

    def __init__(
        self,
        type: Any = "mixed",
        *,
        required: bool = False,
        accessible: bool = True,
        description: str | None = None,
    ):
        self.raw_type = raw_type_of(type)
        self.record_cls = referenced_record(type)
        self.required = required
        self.accessible = accessible
        self.description = description
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Record | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._get_field(self._require_name())

    def __set__(self, instance: "Record", value: Any) -> None:
        instance._set_field(self._require_name(), value)

    def _require_name(self) -> str:
        if self.name is None:
            raise AttributeError("Field is not bound to a record class")
        return self.name

    def describe(self, name: str | None = None) -> SchemaFieldModel:
        """Build the schema descriptor for this declaration."""
        return SchemaFieldModel(
            name=name or self._require_name(),
            raw_type=self.raw_type,
            required=self.required,
            accessible=self.accessible,
            description=self.description,
        )

    def __repr__(self) -> str:
        flags = []
        if self.required:
            flags.append("required")
        if not self.accessible:
            flags.append("inaccessible")
        suffix = f", {', '.join(flags)}" if flags else ""
        return f"Field({self.raw_type!r}{suffix})"
