"""Domain errors.

Raised synchronously at well-defined points and never recovered inside
the domain layer. The service layer turns them into failed results.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pharmacy.domain.rules import BenefitUpdateRule


class PharmacyError(Exception):
    """Base class for all pharmacy domain errors."""

    code = "PHARMACY_ERROR"


class OverlappingRulesError(PharmacyError):
    """Two rules of the same rule set share a boundary value."""

    code = "OVERLAPPING_RULES"

    def __init__(self, rule: BenefitUpdateRule, other: BenefitUpdateRule) -> None:
        self.rule = rule
        self.other = other
        super().__init__(
            f"Overlapping benefit update rules: {json.dumps(rule.to_dict())} "
            f"conflicts with {json.dumps(other.to_dict())}"
        )


class NoSuitableBenefitUpdateRuleError(PharmacyError):
    """No rule matches the queried value and the set has no default rule."""

    code = "NO_SUITABLE_RULE"

    def __init__(self, expires_in: int, rules: Sequence[BenefitUpdateRule]) -> None:
        self.expires_in = expires_in
        self.rules = tuple(rules)
        dump = json.dumps([r.to_dict() for r in self.rules])
        super().__init__(f"No suitable update rule for expiresIn {expires_in}: {dump}")


class InventoryError(PharmacyError):
    """An inventory file could not be read or validated."""

    code = "INVENTORY_ERROR"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid inventory {path}: {reason}")
