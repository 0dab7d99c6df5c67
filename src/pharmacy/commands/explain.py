"""Command: explain one day of aging for a single drug."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pharmacy.commands._base import PharmacyCommand

if TYPE_CHECKING:
    from pharmacy.commands._context import AppContext


@click.command(
    cls=PharmacyCommand,
    examples="""\
  pharmacy explain Fervex --expires-in 7 --benefit 20
  pharmacy explain "Herbal Tea" --expires-in 0 --benefit 49
  pharmacy explain Doliprane --expires-in -3 --benefit 1""",
)
@click.argument("name")
@click.option("--expires-in", type=int, required=True, help="Remaining days before expiry.")
@click.option(
    "--benefit",
    type=click.IntRange(0, 50),
    required=True,
    help="Current benefit (0-50).",
)
@click.pass_obj
def explain(app: AppContext, name: str, expires_in: int, benefit: int) -> None:
    """Show which rule applies to NAME and its benefit after one day."""
    from pharmacy.services.rules import RuleService

    app.emit(RuleService().explain(name, expires_in=expires_in, benefit=benefit))
