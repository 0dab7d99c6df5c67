"""RuleService — inspect the rule catalog."""

from __future__ import annotations

from pharmacy.domain.drugs import Drug
from pharmacy.domain.errors import PharmacyError
from pharmacy.services.base import BaseService
from pharmacy.services.result import ServiceResult


class RuleService(BaseService):
    """Read-only views over the rule catalog."""

    def catalog_listing(self) -> ServiceResult:
        """List every category with its rules, default category last."""
        items = [
            {
                "category": str(category),
                "rules": [rule.to_dict() for rule in updater.benefit_update_rules],
            }
            for category, updater in self.catalog.categories()
        ]
        return ServiceResult(
            ok=True,
            op="rules",
            data={"count": len(items), "items": items},
        )

    def explain(self, name: str, *, expires_in: int, benefit: int) -> ServiceResult:
        """Show which rule applies to a drug and the result of one update."""
        op = "explain"
        category = self.catalog.category_for(name)
        updater = self.catalog.updater_for(name)
        drug = Drug(name=name, expires_in=expires_in, benefit=benefit)
        before = drug.to_dict()
        try:
            rule = updater.get_current_rule(expires_in)
            after = updater.update_benefit(drug).to_dict()
        except PharmacyError as exc:
            return self._error_result(op, exc, category=category, before=before)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "category": category,
                "rule": rule.to_dict() if rule is not None else None,
                "before": before,
                "after": after,
            },
        )
