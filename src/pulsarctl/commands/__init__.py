"""Subcommand modules for pulsarctl.

Provides register_commands() which uses deferred imports to keep
``pulsarctl --help`` fast as more resource groups are added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from pulsarctl.commands.namespaces import namespaces

    cli.add_command(namespaces)
