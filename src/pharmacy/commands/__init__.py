"""Subcommand modules for pharmacy.

Provides register_commands() which uses deferred imports to keep
``pharmacy --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pharmacy.commands.explain import explain
    from pharmacy.commands.rules import rules
    from pharmacy.commands.simulate import simulate

    cli.add_command(simulate)
    cli.add_command(rules)
    cli.add_command(explain)
