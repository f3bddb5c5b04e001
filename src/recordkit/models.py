"""Base Pydantic models for recordkit.

This module provides the base model class that all recordkit Pydantic models
inherit from. It establishes consistent configuration across the package:

- Strict field validation (no extra fields allowed)
- Immutable instances, so cached schema metadata can be shared between threads

Example:
    >>> from recordkit.models import RecordkitBaseModel
    >>>
    >>> class MyModel(RecordkitBaseModel):
    ...     name: str
    ...     count: int = 0
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test', 'count': 0}
"""

from pydantic import BaseModel, ConfigDict


class RecordkitBaseModel(BaseModel):
    """Base model for all recordkit Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable for thread safety
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
