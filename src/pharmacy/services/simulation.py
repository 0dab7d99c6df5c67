"""SimulationService — run the pharmacy over a number of days.

Pipeline: VALIDATE → TICK (once per day) → RESPOND
"""

from __future__ import annotations

import logging

from pharmacy.domain.drugs import Drug
from pharmacy.domain.errors import PharmacyError
from pharmacy.domain.pharmacy import Pharmacy
from pharmacy.services.base import BaseService
from pharmacy.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SimulationService(BaseService):
    """Ages a stock of drugs day by day."""

    def simulate(self, drugs: list[Drug], *, days: int) -> ServiceResult:
        """Run *days* ticks over *drugs*, mutating them in place.

        ``data["history"]`` holds a snapshot of every drug after each
        day; ``data["items"]`` is the final state.
        """
        op = "simulate"
        warnings: list[str] = []

        # ── VALIDATE ─────────────────────────────────────────────
        if days < 1:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_DAYS",
                    message=f"Number of days must be at least 1, got {days}",
                ),
            )
        if not drugs:
            warnings.append("Inventory is empty; nothing to update")

        # ── TICK ─────────────────────────────────────────────────
        pharmacy = Pharmacy(drugs, catalog=self.catalog)
        history: list[list[dict[str, object]]] = []
        for day in range(1, days + 1):
            try:
                updated = pharmacy.update_benefit_value()
            except PharmacyError as exc:
                return self._error_result(
                    op,
                    exc,
                    day=day,
                    items=[d.to_dict() for d in pharmacy.drugs],
                )
            history.append([d.to_dict() for d in updated])
            logger.debug("Day %d updated %d drugs", day, len(updated))

        # ── RESPOND ──────────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "days": days,
                "count": len(pharmacy.drugs),
                "history": history,
                "items": [d.to_dict() for d in pharmacy.drugs],
            },
            warnings=warnings,
        )
