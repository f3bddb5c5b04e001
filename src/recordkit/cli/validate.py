import logging
from collections.abc import Mapping
from pathlib import Path

import click

from recordkit.cli.utils import configure_logging, output_error, output_result
from recordkit.config import load_config
from recordkit.loaders import load_data_file, load_records
from recordkit.schema import SchemaRegistry

logger = logging.getLogger(__name__)


@click.command(name="validate")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--record", "record_name", required=True, help="Record type to materialize")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to a recordkit.yml config file",
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(
    schema_file: Path,
    data_file: Path,
    record_name: str,
    config_path: Path | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Validate a data document against a record type.

    The data document is materialized into the record type declared in the
    schema document, then serialized back and printed. Validation errors are
    reported with the record type and field they refer to.

    Examples:
        recordkit validate schema.yml person.json --record Person
        recordkit validate schema.yml person.yml --record Person --json-output
    """
    configure_logging(debug)

    try:
        registry = SchemaRegistry(config=load_config(config_path))
        records = load_records(schema_file, registry=registry)

        record_cls = records.get(record_name)
        if record_cls is None:
            raise click.BadParameter(
                f"Record '{record_name}' is not declared in {schema_file}",
                param_hint="--record",
            )

        data = load_data_file(data_file)
        if not isinstance(data, Mapping):
            raise ValueError(f"Data document {data_file} must contain a mapping")

        logger.debug(f"Materializing {record_name} from {data_file}")
        instance = record_cls.from_map(data)
        output_result(instance.to_map(), json_output, debug)

    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
