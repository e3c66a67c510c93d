"""ETH coin using BIP44.

Derivation path: m/44'/60'/... (format chosen by the wallet)
Address format: 0x... (EIP-55 checksum encoded)

Test networks share mainnet address encoding on EVM chains.
"""

from typing import Any, Optional

from bip_utils import EthAddrEncoder

from walletcore import bip44
from walletcore.coins.base import Secp256k1Coin


class ETHCoin(Secp256k1Coin):
    """Ethereum coin."""

    def encode_address(self, public_key: bytes) -> str:
        return EthAddrEncoder.EncodeKey(public_key)


def new_coin(
    symbol: str,
    seed: bytes,
    path_format: str,
    bip44_key: str,
    test_network: bool,
    options: Optional[dict[str, Any]] = None,
) -> ETHCoin:
    path = bip44.get_derivation_path(path_format, bip44_key)
    return ETHCoin(symbol, seed, path, test_network=test_network, options=options)
