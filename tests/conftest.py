"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["WALLETCORE_ENVIRONMENT"] = "test"
os.environ["WALLETCORE_DEBUG"] = "true"

from walletcore.config import get_settings
from walletcore.wallet import WalletBuilder

# BIP39 test vector - never use for real funds
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mnemonic() -> str:
    return TEST_MNEMONIC


@pytest.fixture
def fake_seed_generator():
    """Seed generator that accepts any mnemonic."""

    def generate(mnemonic: str, passphrase: str = "") -> bytes:
        return bytes([len(mnemonic) % 256]) * 64

    return generate


@pytest.fixture
def wallet(mnemonic):
    """Mainnet wallet on the full BIP44 path."""
    return WalletBuilder().set_mnemonic(mnemonic).set_test_network(False).build()
