import click

from recordkit.cli.describe import describe
from recordkit.cli.validate import validate
from recordkit.version import PACKAGE_VERSION


@click.group(invoke_without_command=True)
@click.version_option(PACKAGE_VERSION, prog_name="recordkit")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """recordkit CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(validate)
cli.add_command(describe)


if __name__ == "__main__":
    cli()
