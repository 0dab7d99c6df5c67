"""Shared pytest fixtures and test helpers for pharmacy tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pharmacy.domain.catalog import RuleCatalog
from pharmacy.domain.rules import BenefitUpdateRule
from pharmacy.domain.updater import DrugBenefitUpdater


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    CLI invocations reconfigure logging against CliRunner's streams.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("pharmacy")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config resolution."""
    monkeypatch.delenv("PHARMACY_CONFIG", raising=False)
    monkeypatch.delenv("PHARMACY_SIMULATION__DAYS", raising=False)
    monkeypatch.delenv("PHARMACY_SIMULATION__INVENTORY", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no pharmacy.toml is discovered."""
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def narrow_catalog() -> RuleCatalog:
    """Catalog whose default rule set only covers expiresIn 50..100."""
    return RuleCatalog(
        default=DrugBenefitUpdater([BenefitUpdateRule(lambda b: b - 1, 100, 50, "benefit - 1")]),
    )
