"""Subcommand modules for valuecast.

Provides register_commands() which uses deferred imports to keep
``valuecast --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from valuecast.commands.cast import cast
    from valuecast.commands.check import check
    from valuecast.commands.convert import convert
    from valuecast.commands.matrix import matrix

    cli.add_command(convert)
    cli.add_command(cast)
    cli.add_command(matrix)
    cli.add_command(check)
