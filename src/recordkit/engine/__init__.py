"""The record engine: coercion, materialization, accessor gate and serializer.

## Key Components

- `ValueCoercer`: Checks values against type descriptors
- `Materializer`: Builds record instances from nested mappings
- `AccessorGate`: Name-based get/set through the accessibility rules
- `Serializer`: Converts records to plain mappings and back
- `Engine`: The four components wired to a single registry
"""

from typing import TYPE_CHECKING

from .accessor import AccessorGate
from .coercer import CoercionError, ValueCoercer, is_sequence
from .materializer import Materializer
from .serializer import Serializer, normalize_generic

if TYPE_CHECKING:
    from recordkit.schema import SchemaRegistry


class Engine:
    """All engine components bound to one registry.

    Example:
        >>> engine = Engine(default_registry)
        >>> person = engine.materializer.construct(Person, {"name": "Alice"})
        >>> engine.serializer.to_map(person)
        {'name': 'Alice'}
    """

    def __init__(self, registry: "SchemaRegistry"):
        self.registry = registry
        self.materializer = Materializer(registry)
        self.coercer = self.materializer.coercer
        self.accessor = AccessorGate(self.materializer)
        self.serializer = Serializer(self.materializer)


__all__ = [
    "Engine",
    "AccessorGate",
    "CoercionError",
    "Materializer",
    "Serializer",
    "ValueCoercer",
    "is_sequence",
    "normalize_generic",
]
