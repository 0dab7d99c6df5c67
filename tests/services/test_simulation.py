"""Tests for SimulationService."""

from pharmacy.domain.drugs import Drug
from pharmacy.infrastructure.inventory import default_inventory
from pharmacy.services.simulation import SimulationService
from tests.conftest import narrow_catalog


class TestSimulate:
    def test_single_day(self) -> None:
        result = SimulationService().simulate(default_inventory(), days=1)
        assert result.ok, result.error
        assert result.op == "simulate"
        assert result.data["days"] == 1
        assert result.data["count"] == 4
        assert result.data["items"] == [
            {"name": "Doliprane", "expiresIn": 19, "benefit": 29},
            {"name": "Herbal Tea", "expiresIn": 9, "benefit": 6},
            {"name": "Fervex", "expiresIn": 11, "benefit": 36},
            {"name": "Magic Pill", "expiresIn": 15, "benefit": 40},
        ]
        assert result.data["history"] == [result.data["items"]]

    def test_history_has_one_snapshot_per_day(self) -> None:
        result = SimulationService().simulate([Drug("test", 2, 3)], days=3)
        assert result.ok
        assert result.data["history"] == [
            [{"name": "test", "expiresIn": 1, "benefit": 2}],
            [{"name": "test", "expiresIn": 0, "benefit": 1}],
            [{"name": "test", "expiresIn": -1, "benefit": 0}],
        ]

    def test_mutates_drugs_in_place(self) -> None:
        drugs = [Drug("Herbal Tea", 1, 10)]
        SimulationService().simulate(drugs, days=2)
        assert drugs == [Drug("Herbal Tea", -1, 13)]

    def test_empty_inventory_warns(self) -> None:
        result = SimulationService().simulate([], days=5)
        assert result.ok
        assert result.data["count"] == 0
        assert result.data["history"] == [[], [], [], [], []]
        assert len(result.warnings) == 1

    def test_invalid_days(self) -> None:
        result = SimulationService().simulate(default_inventory(), days=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DAYS"

    def test_no_suitable_rule_reports_day(self) -> None:
        result = SimulationService(narrow_catalog()).simulate([Drug("x", 51, 10)], days=5)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_SUITABLE_RULE"
        assert result.error.detail["day"] == 3
        assert result.error.detail["items"] == [{"name": "x", "expiresIn": 49, "benefit": 8}]
