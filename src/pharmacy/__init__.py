"""pharmacy — daily benefit simulation for pharmacy stock."""

from __future__ import annotations

from pharmacy.domain import (
    BenefitUpdateRule,
    Drug,
    DrugBenefitUpdater,
    NoSuitableBenefitUpdateRuleError,
    OverlappingRulesError,
    Pharmacy,
    PharmacyError,
    RuleCatalog,
    build_default_catalog,
    includes,
)

__version__ = "0.1.0"

__all__ = [
    "BenefitUpdateRule",
    "Drug",
    "DrugBenefitUpdater",
    "NoSuitableBenefitUpdateRuleError",
    "OverlappingRulesError",
    "Pharmacy",
    "PharmacyError",
    "RuleCatalog",
    "__version__",
    "build_default_catalog",
    "includes",
]
