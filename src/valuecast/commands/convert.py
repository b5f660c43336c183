"""Command: interactive conversion with a startup backend selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuecast.commands._base import VcCommand

if TYPE_CHECKING:
    from valuecast.commands._context import AppContext


@click.command(
    cls=VcCommand,
    examples="""\
  valuecast convert
  valuecast --json convert
  printf '1\\ninteger\\n42\\nfloat64\\n' | valuecast convert""",
)
@click.pass_obj
def convert(app: AppContext) -> None:
    """Pick an I/O mode, enter a typed value and view it as another type."""
    from valuecast.backends.base import UnknownBackendError, select_backend, selection_prompt
    from valuecast.services.convert import ConvertService

    choice = click.prompt(selection_prompt(), err=app.settings.json_output)
    try:
        backend = select_backend(choice)
    except UnknownBackendError as exc:
        raise click.ClickException(str(exc)) from exc

    reader, writer = backend.create(app.backend_options)
    app.finish(ConvertService(reader, writer).run())
