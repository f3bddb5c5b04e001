from pathlib import Path

import click

from recordkit.cli.utils import configure_logging, output_error, output_result
from recordkit.config import load_config
from recordkit.loaders import load_records
from recordkit.schema import RecordSchemaModel, SchemaRegistry


def format_schema(schema: RecordSchemaModel) -> str:
    """Format a record schema for human-readable output"""
    lines = [f"{schema.name}:"]
    if schema.description:
        lines.append(f"  {schema.description}")
    if not schema.fields:
        lines.append("  (no fields)")
    for field in schema.fields:
        flags = []
        if field.required:
            flags.append("required")
        if not field.accessible:
            flags.append("inaccessible")
        suffix = f" ({', '.join(flags)})" if flags else ""
        lines.append(f"  {field.name}: {field.raw_type}{suffix}")
    return "\n".join(lines)


@click.command(name="describe")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("record_name", required=False)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def describe(schema_file: Path, record_name: str | None, json_output: bool, debug: bool) -> None:
    """Show the fields of the records declared in a schema document.

    Fields are listed in declaration order. If RECORD_NAME is given only
    that record is shown.

    Examples:
        recordkit describe schema.yml
        recordkit describe schema.yml Person --json-output
    """
    configure_logging(debug)

    try:
        registry = SchemaRegistry(config=load_config())
        records = load_records(schema_file, registry=registry)

        if record_name is not None:
            if record_name not in records:
                raise click.BadParameter(
                    f"Record '{record_name}' is not declared in {schema_file}",
                    param_hint="RECORD_NAME",
                )
            records = {record_name: records[record_name]}

        schemas = [registry.schema_for(record_cls) for record_cls in records.values()]

        if json_output:
            output_result([s.model_dump(by_alias=True) for s in schemas], json_output, debug)
        else:
            click.echo("\n\n".join(format_schema(s) for s in schemas))

    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
