"""Type descriptors and the resolver that derives them from raw type names.

A field declares its type as a raw string such as ``"string"``, ``"Pet"`` or
``"Pet[]"``. :class:`TypeResolver` turns that string into one of the
descriptor variants below, which the coercer then checks values against.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .errors import UnknownTypeError

ARRAY_MARKER = "[]"

# A dotted identifier optionally followed by one or more array markers
RAW_TYPE_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*(\[\])*$")


class ScalarKind(str, Enum):
    """Scalar kinds understood by the coercer."""

    BOOL = "bool"
    INT = "int"
    STRING = "string"
    FLOAT = "float"


SCALAR_KEYWORDS: dict[str, ScalarKind] = {
    "bool": ScalarKind.BOOL,
    "boolean": ScalarKind.BOOL,
    "int": ScalarKind.INT,
    "integer": ScalarKind.INT,
    "long": ScalarKind.INT,
    "string": ScalarKind.STRING,
    "float": ScalarKind.FLOAT,
    "double": ScalarKind.FLOAT,
}

# Names that always mean "any value", even when unknown names are rejected
PSEUDO_TYPES = frozenset({"mixed", "array", "object", "any"})


@dataclass(frozen=True)
class ScalarType:
    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class MixedType:
    def __str__(self) -> str:
        return "mixed"


@dataclass(frozen=True)
class RecordRef:
    record_name: str

    def __str__(self) -> str:
        return self.record_name


@dataclass(frozen=True)
class ArrayOf:
    item: "TypeDescriptor"

    def __str__(self) -> str:
        return f"{self.item}{ARRAY_MARKER}"


TypeDescriptor = ScalarType | MixedType | RecordRef | ArrayOf

MIXED = MixedType()


def is_array_type(raw_type: str) -> bool:
    return raw_type.endswith(ARRAY_MARKER)


def strip_array_marker(raw_type: str) -> str:
    """Returns the item type of an array type, e.g. ``Pet[]`` -> ``Pet``."""
    return raw_type[: -len(ARRAY_MARKER)]


def is_well_formed(raw_type: str) -> bool:
    return bool(RAW_TYPE_PATTERN.match(raw_type))


class TypeResolver:
    """Resolves raw declared type names into :data:`TypeDescriptor` values.

    Args:
        is_record: Callable telling whether a name identifies a known record type
        strict: If True, names that are neither scalar keywords, pseudo-types
            nor known records raise :class:`UnknownTypeError` instead of
            resolving to ``mixed``

    Example:
        >>> resolver = TypeResolver(lambda name: name == "Pet")
        >>> resolver.resolve("Pet[]")
        ArrayOf(item=RecordRef(record_name='Pet'))
        >>> resolver.resolve("long")
        ScalarType(kind=<ScalarKind.INT: 'int'>)
    """

    def __init__(self, is_record: Callable[[str], bool], strict: bool = False):
        self._is_record = is_record
        self.strict = strict

    def resolve(
        self,
        raw_type: str,
        record_type: str | None = None,
        field_name: str | None = None,
    ) -> TypeDescriptor:
        """Resolve a raw type name.

        Args:
            raw_type: The declared type, e.g. ``"int"`` or ``"Pet[]"``
            record_type: Record owning the field, used for error context only
            field_name: Field being resolved, used for error context only

        Raises:
            UnknownTypeError: If the name is malformed, or unknown in strict mode
        """
        if not is_well_formed(raw_type):
            raise UnknownTypeError(raw_type, record_type, field_name)

        if is_array_type(raw_type):
            return ArrayOf(self.resolve(strip_array_marker(raw_type), record_type, field_name))

        kind = SCALAR_KEYWORDS.get(raw_type)
        if kind is not None:
            return ScalarType(kind)

        if self._is_record(raw_type):
            return RecordRef(raw_type)

        if self.strict and raw_type not in PSEUDO_TYPES:
            raise UnknownTypeError(raw_type, record_type, field_name)

        return MIXED
