"""Wallet builders.

``WalletBuilder`` collects construction parameters fluently;
``build_wallet_from_mnemonic`` takes an options list instead. Both validate
the mnemonic and derive the seed the same way.

Usage:
    wallet = (
        WalletBuilder()
        .set_mnemonic(mnemonic)
        .set_test_network(False)
        .set_use_shortest_path(True)
        .build()
    )
"""

import dataclasses
import logging
from typing import Iterable, Optional

from walletcore import bip39, bip44
from walletcore.bip39 import SeedGenerator
from walletcore.config import Settings, get_settings
from walletcore.errors import NotImplementedFeatureError, ValidationError
from walletcore.wallet.options import WalletOption, apply_options
from walletcore.wallet.wallet import Wallet

logger = logging.getLogger(__name__)


def _new_wallet_from_mnemonic(
    mnemonic: str, test_network: bool, seed_generator: SeedGenerator
) -> Wallet:
    if not mnemonic:
        raise ValidationError("empty mnemonic")
    seed = seed_generator(mnemonic, "")
    if not seed:
        raise ValidationError("empty seed")
    return Wallet(
        seed=seed,
        mnemonic=mnemonic,
        test_network=test_network,
        seed_generator=seed_generator,
    )


class WalletBuilder:
    """Fluent wallet builder. Every setter returns the builder."""

    def __init__(self, seed_generator: SeedGenerator = bip39.mnemonic_to_seed):
        self._seed_generator = seed_generator
        self._mnemonic = ""
        self._test_network = False
        self._password = ""
        self._path_format = bip44.FULL_PATH_FORMAT
        self._share_account_with_parent_chain = False
        self._flags: list[str] = []

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        seed_generator: SeedGenerator = bip39.mnemonic_to_seed,
    ) -> "WalletBuilder":
        """Create a builder preloaded with configured defaults."""
        settings = settings or get_settings()
        builder = (
            cls(seed_generator=seed_generator)
            .set_test_network(settings.test_network)
            .set_use_shortest_path(settings.use_shortest_path)
            .set_share_account_with_parent_chain(settings.share_account_with_parent_chain)
        )
        for flag in settings.flags:
            builder.add_flag(flag)
        return builder

    def set_mnemonic(self, mnemonic: str) -> "WalletBuilder":
        self._mnemonic = mnemonic
        return self

    def set_test_network(self, test_network: bool) -> "WalletBuilder":
        self._test_network = test_network
        return self

    def set_password(self, password: str) -> "WalletBuilder":
        self._password = password
        return self

    def set_share_account_with_parent_chain(self, share: bool) -> "WalletBuilder":
        self._share_account_with_parent_chain = share
        return self

    def set_use_shortest_path(self, use_shortest_path: bool) -> "WalletBuilder":
        """Choose between ``bip44.PATH_FORMAT`` and ``bip44.FULL_PATH_FORMAT``."""
        if use_shortest_path:
            self._path_format = bip44.PATH_FORMAT
        else:
            self._path_format = bip44.FULL_PATH_FORMAT
        return self

    def set_path_format(self, path_format: str) -> "WalletBuilder":
        self._path_format = path_format
        return self

    def add_flag(self, flag: str) -> "WalletBuilder":
        if flag not in self._flags:
            self._flags.append(flag)
        return self

    def build(self) -> Wallet:
        """Build the wallet.

        Raises:
            ValidationError: If no mnemonic was set, it is invalid, or the
                path format is empty
        """
        if not self._path_format:
            raise ValidationError("path format should not be empty")

        wallet = _new_wallet_from_mnemonic(
            self._mnemonic, self._test_network, self._seed_generator
        )
        wallet = dataclasses.replace(
            wallet,
            password=self._password,
            path_format=self._path_format,
            flags=frozenset(self._flags),
            share_account_with_parent_chain=self._share_account_with_parent_chain,
        )
        logger.debug(f"Built wallet: {wallet.get_safe_dict()}")
        return wallet


def build_wallet_from_mnemonic(
    mnemonic: str,
    test_network: bool = False,
    options: Optional[Iterable[WalletOption]] = None,
    seed_generator: SeedGenerator = bip39.mnemonic_to_seed,
) -> Wallet:
    """Create a wallet from fixed args (mnemonic, network) and other options.

    Raises:
        ValidationError: If the mnemonic is empty or invalid
        Whatever a failing option raises
    """
    wallet = _new_wallet_from_mnemonic(mnemonic, test_network, seed_generator)
    wallet = apply_options(wallet, options)
    logger.debug(f"Built wallet: {wallet.get_safe_dict()}")
    return wallet


def build_wallet_from_private_key(
    private_key: str,
    test_network: bool = False,
    options: Optional[Iterable[WalletOption]] = None,
) -> Wallet:
    """Create a wallet from a raw private key.

    Raises:
        NotImplementedFeatureError: Always; private-key wallets are deferred
    """
    raise NotImplementedFeatureError("building a wallet from a private key")
