"""Command: age the stock over a number of days."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pharmacy.commands._base import PharmacyCommand

if TYPE_CHECKING:
    from pharmacy.commands._context import AppContext


@click.command(
    cls=PharmacyCommand,
    examples="""\
  pharmacy simulate
  pharmacy simulate --days 10
  pharmacy simulate --inventory stock.json
  pharmacy --json simulate --days 30 > output.json""",
)
@click.option(
    "--days",
    type=int,
    default=None,
    help="Number of days to simulate (default: simulation.days).",
)
@click.option(
    "--inventory",
    "inventory_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON inventory file (default: built-in starter stock).",
)
@click.pass_obj
def simulate(app: AppContext, days: int | None, inventory_path: Path | None) -> None:
    """Simulate the daily benefit update of the stock."""
    from pharmacy.domain.errors import InventoryError
    from pharmacy.infrastructure.inventory import default_inventory, load_inventory
    from pharmacy.services.result import ServiceError, ServiceResult
    from pharmacy.services.simulation import SimulationService

    config = app.settings.simulation
    if inventory_path is None and config.inventory:
        inventory_path = app.settings.base_dir / config.inventory

    if inventory_path is None:
        drugs = default_inventory()
    else:
        try:
            drugs = load_inventory(inventory_path)
        except InventoryError as exc:
            app.emit(
                ServiceResult(
                    ok=False,
                    op="simulate",
                    error=ServiceError(
                        code=exc.code,
                        message=str(exc),
                        detail={"path": str(exc.path)},
                    ),
                )
            )
            return

    app.emit(SimulationService().simulate(drugs, days=days if days is not None else config.days))
