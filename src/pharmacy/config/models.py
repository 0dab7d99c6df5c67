"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pharmacy.toml only contains
overrides. The rule catalog is not configurable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- pharmacy.toml sections ---


class SimulationConfig(BaseModel):
    """[simulation] section."""

    model_config = {"frozen": True}

    days: int = Field(default=30, ge=1)
    inventory: str | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)

