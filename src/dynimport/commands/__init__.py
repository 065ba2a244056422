"""Subcommand modules for dynimport.

Provides register_commands() which uses deferred imports to keep
``dynimport --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from dynimport.commands.layout import layout
    from dynimport.commands.resolve import resolve
    from dynimport.commands.statement import statement

    cli.add_command(layout)
    cli.add_command(resolve)
    cli.add_command(statement)
