"""HD wallet configuration.

A ``Wallet`` holds the seed and the settings every derived coin shares. It is
a frozen value: options and clones always produce a new instance, so one
wallet can be shared freely between callers and threads.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from walletcore import bip39, bip44
from walletcore.bip39 import SeedGenerator
from walletcore.coins.base import Coin
from walletcore.errors import ValidationError
from walletcore.wallet import factory
from walletcore.wallet.metadata import CoinMetadata, lookup_metadata
from walletcore.wallet.options import WalletOption, apply_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wallet:
    """Multi-currency HD wallet configuration.

    Attributes:
        seed: BIP39 seed (derived without passphrase when built from a mnemonic)
        mnemonic: Source mnemonic, if the wallet was built from one
        test_network: Select test network parameters for every coin
        password: Passphrase for passphrase-hardened derivation
        path_format: BIP44 path template, see ``walletcore.bip44``
        flags: Feature flags (see ``walletcore.wallet.resolver``)
        share_account_with_parent_chain: Asset-overlay coins reuse the parent account
        seed_generator: Derives the passphrase-hardened seed from the mnemonic
    """

    seed: bytes = field(repr=False)
    mnemonic: Optional[str] = field(default=None, repr=False)
    test_network: bool = False
    password: str = field(default="", repr=False)
    path_format: str = bip44.FULL_PATH_FORMAT
    flags: frozenset[str] = frozenset()
    share_account_with_parent_chain: bool = False
    seed_generator: SeedGenerator = field(
        default=bip39.mnemonic_to_seed, repr=False, compare=False
    )

    def __post_init__(self):
        # Accept any iterable of flags but always store an immutable set
        if not isinstance(self.flags, frozenset):
            object.__setattr__(self, "flags", frozenset(self.flags))
        if not isinstance(self.seed, bytes):
            object.__setattr__(self, "seed", bytes(self.seed))

    @classmethod
    def from_mnemonic(cls, mnemonic: str, test_network: bool = False) -> "Wallet":
        """Create a wallet from a BIP39 mnemonic.

        Raises:
            ValidationError: If the mnemonic is empty or invalid
        """
        if not mnemonic:
            raise ValidationError("empty mnemonic")
        seed = bip39.mnemonic_to_seed(mnemonic)
        return cls(seed=seed, mnemonic=mnemonic, test_network=test_network)

    @classmethod
    def from_seed(cls, seed: bytes, test_network: bool = False) -> "Wallet":
        """Create a wallet from raw seed bytes.

        An empty seed is accepted here; every coin init on it fails.
        """
        return cls(seed=seed, test_network=test_network)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def bip39_seed(self) -> bytes:
        """Get the seed used for key derivation.

        With both a mnemonic and a password, the seed is re-derived using the
        password as BIP39 passphrase, through the same seed generator that
        produced ``seed``. Otherwise the stored seed is used.
        """
        if self.mnemonic and self.password:
            return self.seed_generator(self.mnemonic, self.password)
        return self.seed

    def metadata(self, symbol: str) -> CoinMetadata:
        """Get chain metadata for a symbol on this wallet's network."""
        return lookup_metadata(symbol, self.test_network, self.path_format)

    def clone(self, options: Optional[Iterable[WalletOption]] = None) -> "Wallet":
        """Copy this wallet, with attributes overridden by the given options."""
        return apply_options(self, options)

    def get_coin(self, symbol: str) -> Coin:
        """Create the coin for a symbol (see ``factory.init_coin``)."""
        return factory.init_coin(self, symbol)

    def get_address(self, symbol: str) -> str:
        return self.get_coin(symbol).get_address()

    def get_public_key(self, symbol: str) -> str:
        return self.get_coin(symbol).get_public_key()

    def get_private_key(self, symbol: str) -> str:
        return self.get_coin(symbol).get_private_key()

    def get_safe_dict(self) -> dict:
        """Return wallet attributes with secrets redacted."""
        return {
            "has_mnemonic": bool(self.mnemonic),
            "has_seed": bool(self.seed),
            "has_password": bool(self.password),
            "test_network": self.test_network,
            "path_format": self.path_format,
            "flags": sorted(self.flags),
            "share_account_with_parent_chain": self.share_account_with_parent_chain,
        }
