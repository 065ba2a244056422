"""Root CLI group for dynimport with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from dynimport import __version__
from dynimport.commands import register_commands
from dynimport.commands._context import AppContext
from dynimport.config.settings import DynImportSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dynimport")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the path or statement.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with stage timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """dynimport — relative import paths for generated code."""
    ctx.ensure_object(dict)
    try:
        settings = DynImportSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
