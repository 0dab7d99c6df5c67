"""BaseService — shared foundation for pharmacy services.

Every service receives a :class:`RuleCatalog` at construction time and
turns domain errors into failed :class:`ServiceResult` values.
"""

from __future__ import annotations

import logging
from typing import Any

from pharmacy.domain.catalog import RuleCatalog, build_default_catalog
from pharmacy.domain.errors import PharmacyError
from pharmacy.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class SimulationService(BaseService):
            def simulate(self, drugs, *, days) -> ServiceResult:
                ...
    """

    def __init__(self, catalog: RuleCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else build_default_catalog()

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    @staticmethod
    def _error_result(
        op: str,
        exc: PharmacyError,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result from a domain error."""
        logger.warning("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
