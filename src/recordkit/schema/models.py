"""Pydantic models describing record schemas.

These models are the output of the schema introspector: one
:class:`SchemaFieldModel` per declared field, grouped in declaration order into
a :class:`RecordSchemaModel`. They are also the validated form of schema
documents loaded from YAML or JSON.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from recordkit.models import RecordkitBaseModel


class SchemaFieldModel(RecordkitBaseModel):
    """Descriptor of a single record field.

    Attributes:
        name: The field name.
        raw_type: The declared type, e.g. ``"string"`` or ``"Pet[]"``
            (``type`` in schema documents).
        required: Whether the field must be present at construction time.
        accessible: Whether the field is reachable through get/set/serialize.
        description: Optional human readable description.

    Example:
        >>> field = SchemaFieldModel(name="pets", type="Pet[]")
        >>> field.raw_type
        'Pet[]'
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    raw_type: str = Field(default="mixed", alias="type")
    required: bool = False
    accessible: bool = True
    description: str | None = None


class RecordSchemaModel(RecordkitBaseModel):
    """The ordered set of field descriptors declared for a record type."""

    name: str
    description: str | None = None
    fields: tuple[SchemaFieldModel, ...] = ()

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> SchemaFieldModel | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def accessible_fields(self) -> list[SchemaFieldModel]:
        return [f for f in self.fields if f.accessible]


class SchemaDocumentModel(RecordkitBaseModel):
    """A schema document declaring one or more record types.

    Example document (YAML)::

        recordkit: 1
        records:
          - name: Pet
            fields:
              - name: name
                type: string
                required: true
          - name: Person
            fields:
              - name: name
                type: string
                required: true
              - name: pets
                type: Pet[]
    """

    recordkit: Literal[1] = 1
    records: list[RecordSchemaModel]
