"""TRX (Tron) coin.

Derivation path: m/44'/195'/...
Address format: base58check T... (same on mainnet and Shasta/Nile testnets)
"""

from typing import Any, Optional

from bip_utils import TrxAddrEncoder

from walletcore import bip44
from walletcore.coins.base import Secp256k1Coin


class TRXCoin(Secp256k1Coin):
    """Tron coin."""

    def encode_address(self, public_key: bytes) -> str:
        return TrxAddrEncoder.EncodeKey(public_key)


def new_coin(
    symbol: str,
    seed: bytes,
    path_format: str,
    bip44_key: str,
    test_network: bool,
    options: Optional[dict[str, Any]] = None,
) -> TRXCoin:
    path = bip44.get_derivation_path(path_format, bip44_key)
    return TRXCoin(symbol, seed, path, test_network=test_network, options=options)
