"""Inventory loading — JSON stock files and the built-in starter stock.

File format: a JSON array of ``{"name", "expiresIn", "benefit"}`` objects.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from pharmacy.domain.drugs import BENEFIT_MAX, BENEFIT_MIN, Drug
from pharmacy.domain.errors import InventoryError


class DrugRecord(BaseModel):
    """One inventory entry as stored on disk."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    name: str = Field(min_length=1)
    expires_in: int = Field(alias="expiresIn")
    benefit: int = Field(ge=BENEFIT_MIN, le=BENEFIT_MAX)

    def to_drug(self) -> Drug:
        return Drug(name=self.name, expires_in=self.expires_in, benefit=self.benefit)


_RECORDS = TypeAdapter(list[DrugRecord])


def default_inventory() -> list[Drug]:
    """Return a fresh copy of the starter stock."""
    return [
        Drug("Doliprane", 20, 30),
        Drug("Herbal Tea", 10, 5),
        Drug("Fervex", 12, 35),
        Drug("Magic Pill", 15, 40),
    ]


def load_inventory(path: Path) -> list[Drug]:
    """Load drugs from the JSON file at *path*.

    Raises:
        InventoryError: If the file is missing or unreadable, is not
            valid JSON, or holds a record that fails validation.
    """
    if not path.is_file():
        raise InventoryError(path, "file not found")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InventoryError(path, f"unreadable file: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InventoryError(path, f"invalid JSON: {exc}") from exc
    try:
        records = _RECORDS.validate_python(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise InventoryError(path, errors) from exc
    return [record.to_drug() for record in records]
