"""Tests for DrugBenefitUpdater: overlap validation, rule selection, update."""

import pytest

from pharmacy.domain.drugs import Drug
from pharmacy.domain.errors import (
    NoSuitableBenefitUpdateRuleError,
    OverlappingRulesError,
    PharmacyError,
)
from pharmacy.domain.rules import BenefitUpdateRule
from pharmacy.domain.updater import DrugBenefitUpdater, clamp_benefit


def _zero(valid_from: int | None = None, valid_until: int | None = None) -> BenefitUpdateRule:
    return BenefitUpdateRule(lambda _b: 0, valid_from, valid_until)


class TestCheckRules:
    def test_valid_rule_set(self) -> None:
        updater = DrugBenefitUpdater([_zero(300, 201), _zero(200, 101), _zero(100, 50)])
        assert isinstance(updater, DrugBenefitUpdater)
        assert len(updater.benefit_update_rules) == 3

    def test_empty_rule_set(self) -> None:
        assert DrugBenefitUpdater().benefit_update_rules == ()

    def test_duplicate_rule_fails(self) -> None:
        with pytest.raises(OverlappingRulesError):
            DrugBenefitUpdater([_zero(300, 201), _zero(300, 201)])

    def test_overlap_fails(self) -> None:
        with pytest.raises(OverlappingRulesError):
            DrugBenefitUpdater([_zero(300, 201), _zero(250, 151)])

    def test_shared_boundary_fails(self) -> None:
        with pytest.raises(OverlappingRulesError):
            DrugBenefitUpdater([_zero(10, 6), _zero(6, 1)])

    def test_error_carries_both_rules(self) -> None:
        first, second = _zero(300, 201), _zero(250, 151)
        with pytest.raises(OverlappingRulesError) as exc_info:
            DrugBenefitUpdater([first, second])
        assert exc_info.value.rule is first
        assert exc_info.value.other is second
        assert isinstance(exc_info.value, PharmacyError)

    def test_half_open_rules_pass(self) -> None:
        """Rules unbounded on one side are never flagged against each other."""
        DrugBenefitUpdater([_zero(None, 1), _zero(0, None)])
        DrugBenefitUpdater([_zero(None, 5), _zero(None, 1)])

    def test_bounded_rule_not_checked_against_half_open(self) -> None:
        DrugBenefitUpdater([_zero(10, 6), _zero(None, 1)])

    def test_unbounded_below_rule_checked_at_zero(self) -> None:
        """A rule unbounded below is checked against later rules at 0."""
        with pytest.raises(OverlappingRulesError):
            DrugBenefitUpdater([_zero(10, None), _zero(5, -5)])
        DrugBenefitUpdater([_zero(10, None), _zero(5, 1)])

    def test_check_is_order_dependent(self) -> None:
        """Only the earlier rule's bounds are checked against later rules."""
        DrugBenefitUpdater([_zero(300, 100), _zero(200, 150)])
        with pytest.raises(OverlappingRulesError):
            DrugBenefitUpdater([_zero(200, 150), _zero(300, 100)])


class TestGetCurrentRule:
    def test_empty_rule_set_returns_none(self) -> None:
        assert DrugBenefitUpdater().get_current_rule(1) is None

    @pytest.mark.parametrize("expires_in", [50, 75, 100])
    def test_matching_rule(self, expires_in: int) -> None:
        updater = DrugBenefitUpdater([_zero(100, 50)])
        assert updater.get_current_rule(expires_in) is updater.benefit_update_rules[0]

    def test_matching_rule_from_set(self) -> None:
        updater = DrugBenefitUpdater([_zero(300, 201), _zero(200, 101), _zero(100, 50)])
        assert updater.get_current_rule(75) is updater.benefit_update_rules[2]

    def test_default_rule_fallback(self) -> None:
        updater = DrugBenefitUpdater([_zero(100, 50), _zero(49, 0), _zero()])
        assert updater.get_current_rule(-2) is updater.benefit_update_rules[2]

    def test_bounded_rule_preferred_over_earlier_default(self) -> None:
        updater = DrugBenefitUpdater([_zero(), _zero(10, 6)])
        assert updater.get_current_rule(7) is updater.benefit_update_rules[1]
        assert updater.get_current_rule(11) is updater.benefit_update_rules[0]

    def test_first_matching_rule_wins(self) -> None:
        updater = DrugBenefitUpdater([_zero(None, 1), _zero(None, 5)])
        assert updater.get_current_rule(7) is updater.benefit_update_rules[0]

    def test_no_suitable_rule(self) -> None:
        updater = DrugBenefitUpdater([_zero(100, 50)])
        with pytest.raises(NoSuitableBenefitUpdateRuleError) as exc_info:
            updater.get_current_rule(0)
        err = exc_info.value
        assert err.expires_in == 0
        assert err.rules == updater.benefit_update_rules
        assert "expiresIn 0" in str(err)
        assert '"validFrom": 100' in str(err)

    def test_selection_is_deterministic(self) -> None:
        updater = DrugBenefitUpdater([_zero(None, 1), _zero(0, None)])
        for value in (-3, 0, 1, 12):
            assert updater.get_current_rule(value) is updater.get_current_rule(value)


class TestUpdateBenefit:
    def test_applies_rule_and_decrements(self) -> None:
        updater = DrugBenefitUpdater([BenefitUpdateRule(lambda b: b - 1, None, 1)])
        drug = Drug("test", 2, 3)
        result = updater.update_benefit(drug)
        assert result is drug
        assert drug == Drug("test", 1, 2)

    def test_empty_rule_set_leaves_drug_unchanged(self) -> None:
        drug = Drug("Magic Pill", 15, 40)
        result = DrugBenefitUpdater().update_benefit(drug)
        assert result is drug
        assert drug == Drug("Magic Pill", 15, 40)

    def test_clamps_upper_bound(self) -> None:
        updater = DrugBenefitUpdater([BenefitUpdateRule(lambda b: b + 100)])
        drug = updater.update_benefit(Drug("x", 3, 45))
        assert drug.benefit == 50
        assert drug.expires_in == 2

    def test_clamps_lower_bound(self) -> None:
        updater = DrugBenefitUpdater([BenefitUpdateRule(lambda b: b - 100)])
        assert updater.update_benefit(Drug("x", -3, 5)).benefit == 0

    def test_no_suitable_rule_leaves_drug_unchanged(self) -> None:
        updater = DrugBenefitUpdater([_zero(100, 50)])
        drug = Drug("x", 0, 10)
        with pytest.raises(NoSuitableBenefitUpdateRuleError):
            updater.update_benefit(drug)
        assert drug == Drug("x", 0, 10)


class TestClampBenefit:
    @pytest.mark.parametrize(
        "value,expected",
        [(-5, 0), (0, 0), (25, 25), (50, 50), (51, 50), (1000, 50)],
    )
    def test_clamp(self, value: int, expected: int) -> None:
        assert clamp_benefit(value) == expected
