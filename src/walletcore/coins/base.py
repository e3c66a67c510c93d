"""Coin base interface.

A Coin is the per-currency addressing context handed out by the wallet
dispatcher. Each implementation derives one key pair from a BIP39 seed at a
fixed derivation path and encodes it for its chain.

Security: Coins hold private key material in memory. Never log them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from bip_utils import Bip32Secp256k1

if TYPE_CHECKING:
    from walletcore.wallet.metadata import CoinMetadata

logger = logging.getLogger(__name__)

# Options bag key under which the dispatcher passes the coin's chain metadata
OPTION_METADATA = "metadata"


@dataclass
class KeyInfo:
    """Key material derived for a coin."""

    address: str
    public_key: str
    private_key: str = field(repr=False)
    derivation_path: str = ""


class Coin(ABC):
    """Abstract base class for coin implementations.

    The key pair is derived in the constructor so that a bad seed or path
    fails at construction time, never on first use.

    Usage:
        coin = BTCCoin("BTC", seed, "m/44'/0'/0'/0/0")
        coin.get_address()
    """

    def __init__(
        self,
        symbol: str,
        seed: bytes,
        derivation_path: str,
        test_network: bool = False,
        options: Optional[dict[str, Any]] = None,
    ):
        """Initialize and derive the coin key.

        Args:
            symbol: Currency symbol (BTC, ETH, ...)
            seed: BIP39 seed bytes
            derivation_path: Full BIP32 path, e.g. m/44'/60'/0'/0/0
            test_network: Use test network parameters if True
            options: Family specific options
        """
        if not seed:
            raise ValueError("seed should not be empty")
        if not derivation_path:
            raise ValueError("derivation path should not be empty")

        self._symbol = symbol
        self._derivation_path = derivation_path
        self._test_network = test_network
        self._options = dict(options or {})

        private_key, public_key = self._derive_key_pair(seed, derivation_path)
        self._key = KeyInfo(
            address=self.encode_address(public_key),
            public_key=public_key.hex(),
            private_key=private_key.hex(),
            derivation_path=derivation_path,
        )
        logger.debug(f"Derived {symbol} key at {derivation_path}")

    @abstractmethod
    def _derive_key_pair(self, seed: bytes, derivation_path: str) -> tuple[bytes, bytes]:
        """Derive (private key, public key) raw bytes."""
        pass

    @abstractmethod
    def encode_address(self, public_key: bytes) -> str:
        """Encode a public key as an address for this chain."""
        pass

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def derivation_path(self) -> str:
        return self._derivation_path

    @property
    def test_network(self) -> bool:
        return self._test_network

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    @property
    def metadata(self) -> Optional["CoinMetadata"]:
        """Chain metadata (name, decimals, ...) when created by the dispatcher."""
        return self._options.get(OPTION_METADATA)

    def derive_key(self) -> KeyInfo:
        """Get the derived key info."""
        return self._key

    def get_address(self) -> str:
        return self._key.address

    def get_public_key(self) -> str:
        return self._key.public_key

    def get_private_key(self) -> str:
        return self._key.private_key

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(symbol={self._symbol!r}, "
            f"path={self._derivation_path!r}, test_network={self._test_network})"
        )


class Secp256k1Coin(Coin):
    """Coin whose keys come from plain BIP32 secp256k1 derivation."""

    def _derive_key_pair(self, seed: bytes, derivation_path: str) -> tuple[bytes, bytes]:
        child = Bip32Secp256k1.FromSeed(seed).DerivePath(derivation_path)
        return (
            child.PrivateKey().Raw().ToBytes(),
            child.PublicKey().RawCompressed().ToBytes(),
        )
