"""Drug — the mutable stock item updated once per simulated day."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --- Benefit bounds (inclusive) ---

BENEFIT_MIN = 0
BENEFIT_MAX = 50


@dataclass
class Drug:
    """A drug in stock.

    ``expires_in`` counts remaining days and goes negative once the drug
    is past expiry. ``benefit`` stays within
    [``BENEFIT_MIN``, ``BENEFIT_MAX``] after every update.
    """

    name: str
    expires_in: int
    benefit: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the external ``expiresIn`` key spelling."""
        return {
            "name": self.name,
            "expiresIn": self.expires_in,
            "benefit": self.benefit,
        }
