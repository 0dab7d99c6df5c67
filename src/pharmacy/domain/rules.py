"""Benefit update rules and the interval membership check.

A rule is valid over ``[valid_until, valid_from]`` of remaining-life
values, both bounds inclusive. ``valid_from`` is the upper bound. A
``None`` bound means unbounded on that side; a rule with both bounds
``None`` is the default rule of its set.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

BenefitFn = Callable[[int], int]


@dataclass(frozen=True)
class BenefitUpdateRule:
    """A (transform, validFrom, validUntil) triple."""

    value_updater: BenefitFn
    valid_from: int | None = None
    valid_until: int | None = None
    description: str | None = field(default=None, compare=False)

    @property
    def is_default(self) -> bool:
        """True when both bounds are unbounded."""
        return self.valid_from is None and self.valid_until is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "validFrom": self.valid_from,
            "validUntil": self.valid_until,
            "description": self.description,
        }


def includes(rule: BenefitUpdateRule, value: int | None, strict: bool = False) -> bool:
    """Check whether *value* lies within the validity interval of *rule*.

    Non-strict mode is used for rule selection: a missing bound places no
    constraint on its side, but the default rule never matches.

    Strict mode is used for overlap validation only: both bounds must be
    set, so a half-open or default rule never matches. A ``None`` value
    is compared as 0, so a rule unbounded below is checked at 0.
    """
    valid_from = rule.valid_from
    valid_until = rule.valid_until

    if strict:
        if valid_from is None or valid_until is None:
            return False
        point = 0 if value is None else value
        return valid_until <= point <= valid_from

    if rule.is_default or value is None:
        return False
    from_ok = valid_from is None or value <= valid_from
    until_ok = valid_until is None or value >= valid_until
    return from_ok and until_ok
