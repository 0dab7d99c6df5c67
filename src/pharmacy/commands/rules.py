"""Command: list the benefit update rule catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pharmacy.commands._base import PharmacyCommand

if TYPE_CHECKING:
    from pharmacy.commands._context import AppContext


@click.command(
    cls=PharmacyCommand,
    examples="""\
  pharmacy rules
  pharmacy --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """Show the benefit update rules of every drug category."""
    from pharmacy.services.rules import RuleService

    app.emit(RuleService().catalog_listing())
