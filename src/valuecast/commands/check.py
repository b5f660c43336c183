"""Command: check a single source/target pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuecast.commands._base import VcCommand

if TYPE_CHECKING:
    from valuecast.commands._context import AppContext


@click.command(
    cls=VcCommand,
    examples="""\
  valuecast check integer float64
  valuecast check boolean int
  valuecast --json check text boolean""",
)
@click.argument("source")
@click.argument("target")
@click.pass_obj
def check(app: AppContext, source: str, target: str) -> None:
    """Exit 0 if SOURCE values may be displayed as TARGET, else 1."""
    from valuecast.services.compatibility import CompatibilityService

    app.emit(CompatibilityService().check(source, target))
