"""Pharmacy — routes every drug to its rule set once per tick."""

from __future__ import annotations

from pharmacy.domain.catalog import RuleCatalog, build_default_catalog
from pharmacy.domain.drugs import Drug


class Pharmacy:
    """Owns the drug list and the rule catalog.

    A tick is fail-fast: an error raised for one drug propagates and
    leaves the remaining drugs of that tick untouched.
    """

    def __init__(
        self,
        drugs: list[Drug] | None = None,
        catalog: RuleCatalog | None = None,
    ) -> None:
        self.drugs: list[Drug] = drugs if drugs is not None else []
        self.catalog = catalog if catalog is not None else build_default_catalog()

    def update_benefit_value(self) -> list[Drug]:
        """Age every drug by one day and return the drug list."""
        for index, drug in enumerate(self.drugs):
            updater = self.catalog.updater_for(drug.name)
            self.drugs[index] = updater.update_benefit(drug)
        return self.drugs
