"""Shared pytest fixtures for Luna tests.

This module provides:
- A clean Helius environment (API key set, settings cache cleared)
- A sample transaction signature
"""

from collections.abc import Generator

import pytest

from luna.config.settings import get_settings
from tests.support.payloads import TEST_API_KEY, TEST_SIGNATURE


@pytest.fixture(autouse=True)
def helius_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point settings at a test API key on mainnet for every test."""
    monkeypatch.setenv("HELIUS_API_KEY", TEST_API_KEY)
    for name in (
        "HELIUS_CLUSTER",
        "RPC_MAX_RETRIES",
        "CONFIRMATION_TIMEOUT_MS",
        "CONFIRMATION_INTERVAL_MS",
        "JITO_TIP_FLOOR_URL",
        "DEBUG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def signature() -> str:
    """A mainnet transaction signature."""
    return TEST_SIGNATURE
