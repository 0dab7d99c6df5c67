"""Rule catalog — drug name to rule set, plus a mandatory default.

The built-in catalog is a construction-time constant; it is not
loaded from configuration.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from pharmacy.domain.rules import BenefitUpdateRule
from pharmacy.domain.updater import DrugBenefitUpdater

DEFAULT_CATEGORY = "default"


class DrugName(StrEnum):
    """Drug names with their own rule set."""

    HERBAL_TEA = "Herbal Tea"
    FERVEX = "Fervex"
    MAGIC_PILL = "Magic Pill"
    DAFALGAN = "Dafalgan"


@dataclass(frozen=True)
class RuleCatalog:
    """Exact-name lookup of rule sets with a fallback for unlisted names."""

    default: DrugBenefitUpdater
    updaters: Mapping[str, DrugBenefitUpdater] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "updaters", MappingProxyType(dict(self.updaters)))

    def category_for(self, name: str) -> str:
        """Return the catalog key used for *name*."""
        return name if name in self.updaters else DEFAULT_CATEGORY

    def updater_for(self, name: str) -> DrugBenefitUpdater:
        """Return the rule set for *name*, or the default one."""
        return self.updaters.get(name, self.default)

    def categories(self) -> Iterator[tuple[str, DrugBenefitUpdater]]:
        """Yield ``(category, updater)`` pairs, default last."""
        yield from self.updaters.items()
        yield DEFAULT_CATEGORY, self.default


def build_default_catalog() -> RuleCatalog:
    """Build the built-in rule catalog.

    Until expiry (``expires_in >= 1``) the first rule applies; from
    ``expires_in <= 0`` the second one changes benefit at double rate.
    Fervex gains faster as expiry nears, then drops to zero.
    """
    return RuleCatalog(
        default=DrugBenefitUpdater(
            [
                BenefitUpdateRule(lambda b: b - 1, None, 1, "benefit - 1"),
                BenefitUpdateRule(lambda b: b - 2, 0, None, "benefit - 2"),
            ]
        ),
        updaters={
            DrugName.HERBAL_TEA: DrugBenefitUpdater(
                [
                    BenefitUpdateRule(lambda b: b + 1, None, 1, "benefit + 1"),
                    BenefitUpdateRule(lambda b: b + 2, 0, None, "benefit + 2"),
                ]
            ),
            DrugName.FERVEX: DrugBenefitUpdater(
                [
                    BenefitUpdateRule(lambda b: b + 1, None, None, "benefit + 1"),
                    BenefitUpdateRule(lambda b: b + 2, 10, 6, "benefit + 2"),
                    BenefitUpdateRule(lambda b: b + 3, 5, 1, "benefit + 3"),
                    BenefitUpdateRule(lambda _b: 0, 0, None, "0"),
                ]
            ),
            DrugName.MAGIC_PILL: DrugBenefitUpdater(),
            DrugName.DAFALGAN: DrugBenefitUpdater(
                [
                    BenefitUpdateRule(lambda b: b - 2, None, 1, "benefit - 2"),
                    BenefitUpdateRule(lambda b: b - 4, 0, None, "benefit - 4"),
                ]
            ),
        },
    )
