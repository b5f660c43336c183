"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuecast.backends.base import BackendOptions
from valuecast.config.logging import configure_logging
from valuecast.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from valuecast.config.settings import ValueCastSettings
    from valuecast.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ValueCastSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def backend_options(self) -> BackendOptions:
        """Backend presentation options derived from settings.

        In ``--json`` mode the conversation moves to stderr so stdout
        carries only the serialized result.
        """
        return BackendOptions(
            err=self.settings.json_output,
            prompt_suffix=self.settings.console.prompt_suffix,
            dialog_title=self.settings.dialog.title,
            color=self.settings.display.color,
        )

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def finish(self, result: ServiceResult) -> None:
        """Close a conversion run whose writer already presented the outcome.

        Only ``--json`` mode prints the result; the exit code is 1 on failure.
        """
        if self.settings.json_output:
            click.echo(format_result(result, settings=self.output_settings))
        if not result.ok:
            raise SystemExit(1)
