"""Schema and data document loading."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import ValidationError

from .record import Record, define_record
from .schema import SchemaDocumentModel, SchemaRegistry

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def load_schema(content: str, format: str = "yaml") -> dict[str, Any]:
    """Load a schema document from string content.

    Args:
        content: Schema content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        Schema dictionary

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            return cast(dict[str, Any], yaml.safe_load(content))
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            return cast(dict[str, Any], json.loads(content))
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")


def _format_for(path: Path) -> str:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return "yaml"
    elif path.suffix.lower() == ".json":
        return "json"
    raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")


def load_schema_from_file(path: str | Path) -> dict[str, Any]:
    """Load a schema document from a YAML or JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    content = path.read_text(encoding="utf-8")
    return load_schema(content, format=_format_for(path))


def load_data_file(path: str | Path) -> Any:
    """Load a data document (the input of a materialization) from YAML or JSON.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    content = path.read_text(encoding="utf-8")
    try:
        return load_schema(content, format=_format_for(path))
    except ValueError as e:
        raise ValueError(f"Invalid data file {path}: {e}") from e


def parse_schema_document(document: Mapping[str, Any]) -> SchemaDocumentModel:
    """Validate a schema document.

    Raises:
        ValueError: If the document does not have the expected structure
    """
    if not isinstance(document, Mapping):
        raise ValueError("Schema document must be a mapping")
    try:
        return SchemaDocumentModel.model_validate(document)
    except ValidationError as e:
        raise ValueError(f"Invalid schema document: {e}") from e


def load_records(
    source: str | Path | Mapping[str, Any],
    registry: SchemaRegistry | None = None,
) -> dict[str, type[Record]]:
    """Define record classes for every record declared in a schema document.

    Args:
        source: Path of a schema file, or an already parsed document
        registry: Registry to define the records in (default registry if omitted)

    Returns:
        Mapping of record name to the created record class, in document order

    Raises:
        ValueError: If the document is invalid or declares a record twice
        SchemaDefinitionError: If a field name clashes with a Record attribute
    """
    if isinstance(source, (str, Path)):
        logger.debug(f"Loading records from: {source}")
        document = load_schema_from_file(source)
    else:
        document = source

    parsed = parse_schema_document(document)

    names = [record.name for record in parsed.records]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate record definitions: {', '.join(duplicates)}")

    records: dict[str, type[Record]] = {}
    for record in parsed.records:
        records[record.name] = define_record(
            record.name,
            record.fields,
            registry=registry,
            description=record.description,
        )
    logger.debug(f"Defined records: {names}")
    return records
