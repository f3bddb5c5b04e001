"""recordkit - schema-driven record materialization and validation.

recordkit builds validated, typed object graphs from untyped nested data
(decoded JSON, YAML, form data) and converts them back into plain mappings.

## Key Components

### Declaring records
- `Record`: Base class for record types
- `Field`: Declares a field (type, required, accessible)
- `define_record()` / `load_records()`: Create record types from schema documents

### Engine
- `Materializer`: Builds instances from mappings, field by field
- `ValueCoercer`: Checks values against resolved type descriptors
- `AccessorGate`: Name-based get/set through the accessibility rules
- `Serializer`: `to_map`, `from_map`, `from_generic_object`

### Errors
- `MissingFieldError`, `InaccessibleFieldError`, `TypeMismatchError`:
  input validation failures
- `UnknownTypeError`, `MethodNotFoundError`: declaration/integration defects

## Quick Example

```python
from recordkit import Field, Record

class Pet(Record):
    name = Field(str, required=True)

class Person(Record):
    name = Field(str, required=True)
    age = Field(int)
    pets = Field([Pet])

person = Person.from_map({"name": "Alice", "pets": [{"name": "Rex"}]})
person.pets[0].name   # 'Rex'
person.to_map()       # {'name': 'Alice', 'pets': [{'name': 'Rex'}]}
```
"""

from .config import RecordkitConfigModel, load_config
from .engine import AccessorGate, Engine, Materializer, Serializer, ValueCoercer
from .errors import (
    InaccessibleFieldError,
    MethodNotFoundError,
    MissingFieldError,
    RecordError,
    SchemaDefinitionError,
    TypeMismatchError,
    UnknownTypeError,
    ValidationError,
)
from .loaders import load_records
from .record import Record, define_record
from .schema import (
    Field,
    RecordSchemaModel,
    SchemaFieldModel,
    SchemaRegistry,
    default_registry,
)
from .types import ArrayOf, MixedType, RecordRef, ScalarKind, ScalarType, TypeResolver
from .version import PACKAGE_VERSION as __version__

__all__ = [
    # Records
    "Record",
    "Field",
    "define_record",
    "load_records",
    # Schema
    "SchemaFieldModel",
    "RecordSchemaModel",
    "SchemaRegistry",
    "default_registry",
    # Types
    "TypeResolver",
    "ScalarKind",
    "ScalarType",
    "MixedType",
    "RecordRef",
    "ArrayOf",
    # Engine
    "Engine",
    "Materializer",
    "ValueCoercer",
    "AccessorGate",
    "Serializer",
    # Config
    "RecordkitConfigModel",
    "load_config",
    # Errors
    "RecordError",
    "ValidationError",
    "MissingFieldError",
    "InaccessibleFieldError",
    "TypeMismatchError",
    "SchemaDefinitionError",
    "UnknownTypeError",
    "MethodNotFoundError",
    "__version__",
]
