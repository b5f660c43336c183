"""Root CLI group for valuecast with global flags and command registration."""

from __future__ import annotations

import click

from valuecast import __version__
from valuecast.commands import register_commands
from valuecast.commands._context import AppContext
from valuecast.config.settings import ValueCastSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="valuecast")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
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
    """valuecast: view a typed value rendered as another type."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags must not mask VALUECAST_* env vars or valuecast.toml.
    settings = ValueCastSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
