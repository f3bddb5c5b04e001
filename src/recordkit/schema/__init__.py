"""Record schemas: field declarations, schema models and the record registry.

## Key Components

- `Field`: Declares a field on a record class
- `SchemaFieldModel`: Descriptor of a single field (name, type, flags)
- `RecordSchemaModel`: Ordered field descriptors of a record type
- `SchemaDocumentModel`: Validated form of a YAML/JSON schema document
- `SchemaRegistry`: Record lookup plus the per-type schema cache
- `default_registry`: The process-wide registry used when none is given
"""

from .fields import Field, raw_type_of
from .models import RecordSchemaModel, SchemaDocumentModel, SchemaFieldModel
from .registry import SchemaRegistry, default_registry

__all__ = [
    "Field",
    "raw_type_of",
    "SchemaFieldModel",
    "RecordSchemaModel",
    "SchemaDocumentModel",
    "SchemaRegistry",
    "default_registry",
]
