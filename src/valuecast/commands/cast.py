"""Command: non-interactive conversion from arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuecast.commands._base import VcCommand

if TYPE_CHECKING:
    from valuecast.commands._context import AppContext


@click.command(
    cls=VcCommand,
    examples="""\
  valuecast cast integer 42 float64
  valuecast cast text TRUE boolean
  valuecast --json cast double 0.1 float
  valuecast cast integer -- -7 text""",
)
@click.argument("source")
@click.argument("value")
@click.argument("target")
@click.pass_obj
def cast(app: AppContext, source: str, value: str, target: str) -> None:
    """Render VALUE, declared as SOURCE, as TARGET.

    Runs the same flow as ``convert`` with the answers taken from the
    arguments and the result printed on the console.
    """
    from valuecast.backends.console import ConsoleOutput
    from valuecast.backends.scripted import ScriptedInput
    from valuecast.services.convert import ConvertService

    options = app.backend_options
    writer = ConsoleOutput(err=options.err, color=options.color)
    app.finish(ConvertService(ScriptedInput([source, value, target]), writer).run())
