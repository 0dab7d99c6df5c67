"""DrugBenefitUpdater — validated rule set and per-drug update.

INVARIANT: a constructed updater never holds two rules that the overlap
check flags. Construction either succeeds or raises; no partially
validated updater is observable.

The overlap check is one-sided: a rule is only compared with the
rules after it, and only when its upper bound is set. Two rules that
are both unbounded above are never compared against each other, and a
missing lower bound is checked as 0.
"""

from __future__ import annotations

from collections.abc import Iterable

from pharmacy.domain.drugs import BENEFIT_MAX, BENEFIT_MIN, Drug
from pharmacy.domain.errors import NoSuitableBenefitUpdateRuleError, OverlappingRulesError
from pharmacy.domain.rules import BenefitUpdateRule, includes


def clamp_benefit(value: int) -> int:
    """Clamp *value* into [BENEFIT_MIN, BENEFIT_MAX]."""
    return max(min(value, BENEFIT_MAX), BENEFIT_MIN)


class DrugBenefitUpdater:
    """An ordered set of benefit update rules for one drug category."""

    def __init__(self, benefit_update_rules: Iterable[BenefitUpdateRule] = ()) -> None:
        self.benefit_update_rules: tuple[BenefitUpdateRule, ...] = tuple(benefit_update_rules)
        self.check_rules()

    def __repr__(self) -> str:
        return f"DrugBenefitUpdater({list(self.benefit_update_rules)!r})"

    def check_rules(self) -> None:
        """Raise :class:`OverlappingRulesError` if two rules share a boundary."""
        rules = self.benefit_update_rules
        for index, rule in enumerate(rules):
            if rule.valid_from is None:
                continue
            for other in rules[index + 1 :]:
                if includes(other, rule.valid_from, strict=True) or includes(
                    other, rule.valid_until, strict=True
                ):
                    raise OverlappingRulesError(rule, other)

    def get_current_rule(self, expires_in: int) -> BenefitUpdateRule | None:
        """Select the rule applying to *expires_in*.

        Returns None for an empty rule set. Falls back to the first
        default rule when no interval matches.
        """
        if not self.benefit_update_rules:
            return None
        for rule in self.benefit_update_rules:
            if includes(rule, expires_in):
                return rule
        for rule in self.benefit_update_rules:
            if rule.is_default:
                return rule
        raise NoSuitableBenefitUpdateRuleError(expires_in, self.benefit_update_rules)

    def update_benefit(self, drug: Drug) -> Drug:
        """Apply one day of aging to *drug* in place and return it."""
        rule = self.get_current_rule(drug.expires_in)
        if rule is None:
            return drug
        drug.benefit = clamp_benefit(rule.value_updater(drug.benefit))
        drug.expires_in -= 1
        return drug
