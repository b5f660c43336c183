"""Command: show the compatibility matrix."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuecast.commands._base import VcCommand

if TYPE_CHECKING:
    from valuecast.commands._context import AppContext


@click.command(
    cls=VcCommand,
    examples="""\
  valuecast matrix
  valuecast --json matrix""",
)
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Show which source types may be displayed as which targets."""
    from valuecast.services.compatibility import CompatibilityService

    app.emit(CompatibilityService().describe())
