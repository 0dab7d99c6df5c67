"""Domain layer — pure types and the benefit update rule engine.

No infrastructure dependencies. Everything here is synchronous and
operates on in-memory data only.
"""

from pharmacy.domain.catalog import DrugName, RuleCatalog, build_default_catalog
from pharmacy.domain.drugs import BENEFIT_MAX, BENEFIT_MIN, Drug
from pharmacy.domain.errors import (
    InventoryError,
    NoSuitableBenefitUpdateRuleError,
    OverlappingRulesError,
    PharmacyError,
)
from pharmacy.domain.pharmacy import Pharmacy
from pharmacy.domain.rules import BenefitUpdateRule, includes
from pharmacy.domain.updater import DrugBenefitUpdater, clamp_benefit

__all__ = [
    "BENEFIT_MAX",
    "BENEFIT_MIN",
    "BenefitUpdateRule",
    "Drug",
    "DrugBenefitUpdater",
    "DrugName",
    "InventoryError",
    "NoSuitableBenefitUpdateRuleError",
    "OverlappingRulesError",
    "Pharmacy",
    "PharmacyError",
    "RuleCatalog",
    "build_default_catalog",
    "clamp_benefit",
    "includes",
]
