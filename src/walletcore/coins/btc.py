"""BTC coin using BIP44 legacy (P2PKH) addresses.

Derivation path: m/44'/0'/... (format chosen by the wallet)
Address format: base58 P2PKH (1... mainnet, m/n... testnet)
"""

from typing import Any, Optional

from bip_utils import P2PKHAddrEncoder

from walletcore import bip44
from walletcore.coins.base import Secp256k1Coin

MAINNET_VERSION = b"\x00"
TESTNET_VERSION = b"\x6f"


class BTCCoin(Secp256k1Coin):
    """Bitcoin coin.

    Example:
        coin = BTCCoin("BTC", seed, "m/44'/0'/0'/0/0")
        coin.get_address()  # "1..."
    """

    def encode_address(self, public_key: bytes) -> str:
        net_ver = TESTNET_VERSION if self.test_network else MAINNET_VERSION
        return P2PKHAddrEncoder.EncodeKey(public_key, net_ver=net_ver)


def new_coin(
    symbol: str,
    seed: bytes,
    path_format: str,
    bip44_key: str,
    test_network: bool,
    options: Optional[dict[str, Any]] = None,
) -> BTCCoin:
    """Create a BTC coin from wallet derivation context."""
    path = bip44.get_derivation_path(path_format, bip44_key)
    return BTCCoin(symbol, seed, path, test_network=test_network, options=options)
