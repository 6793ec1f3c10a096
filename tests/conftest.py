"""Shared test fixtures for the credhash test suite."""

from __future__ import annotations

import pytest

from credhash import CredentialHasher
from credhash.config import HasherConfig

# Cheapest cost bcrypt accepts; keeps the suite fast.
FAST_COST = 4


@pytest.fixture
def hmac_key() -> bytes:
    return b"my_key"


@pytest.fixture
def cost() -> int:
    return FAST_COST


@pytest.fixture
def hasher(hmac_key: bytes, cost: int) -> CredentialHasher:
    return CredentialHasher(hmac_key, cost)


@pytest.fixture
def hasher_config(monkeypatch) -> HasherConfig:
    for name in ("CREDHASH_HMAC_KEY", "CREDHASH_BCRYPT_COST", "CREDHASH_MIN_KEY_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    return HasherConfig(hmac_key="config-key", bcrypt_cost=FAST_COST)
