"""
Pytest configuration and shared fixtures.
"""

import os
from collections.abc import Generator

import pytest

from asset_ledger.catalog import AssetService
from asset_ledger.config import get_settings
from asset_ledger.logging import clear_tx_id
from tests.fixtures.fake_ledger import FakeLedger

# Settings are read lazily, so this applies to every test
os.environ.setdefault("ASSET_LEDGER_ENV", "development")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no local .env overrides leak into tests."""
    for var in ("ASSET_LEDGER_LOG_LEVEL", "ASSET_LEDGER_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset cached settings and log context between tests."""
    yield

    get_settings.cache_clear()
    clear_tx_id()


@pytest.fixture
def ledger() -> FakeLedger:
    """Empty in-memory ledger."""
    return FakeLedger()


@pytest.fixture
def service() -> AssetService:
    """Asset service under test."""
    return AssetService()


@pytest.fixture
def seeded_ledger(ledger: FakeLedger, service: AssetService) -> FakeLedger:
    """Ledger populated by init_catalog, with the call log cleared."""
    service.init_catalog(ledger)
    ledger.calls.clear()
    return ledger
