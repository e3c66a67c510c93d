"""BigBang Core family coins (BBC, MKF).

Keys are ed25519 derived with SLIP-10, which only supports hardened
children, so every path level is hardened before derivation.

Address format: "1" + base32(pubkey || crc24q(pubkey)), 57 characters.
"""

from typing import Any, Optional

from bip_utils import Base32Encoder, Bip32Slip10Ed25519

from walletcore import bip44
from walletcore.coins.base import Coin

SYMBOL_BBC = "BBC"
SYMBOL_MKF = "MKF"

PUBKEY_ADDRESS_PREFIX = "1"
BASE32_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"

_CRC24Q_POLY = 0x1864CFB


def crc24q(data: bytes) -> int:
    """CRC-24Q checksum."""
    crc = 0
    for byte in data:
        crc ^= byte << 16
        for _ in range(8):
            crc <<= 1
            if crc & 0x1000000:
                crc ^= _CRC24Q_POLY
    return crc & 0xFFFFFF


def harden_path(path: str) -> str:
    """Mark every level of a BIP32 path as hardened.

    Example:
        harden_path("m/44'/223'/0'/0/0")  # "m/44'/223'/0'/0'/0'"
    """
    levels = path.split("/")
    hardened = [levels[0]]
    for level in levels[1:]:
        hardened.append(level if level.endswith("'") else f"{level}'")
    return "/".join(hardened)


class BBCCoin(Coin):
    """BigBang Core (or sibling symbol) ed25519 coin."""

    def _derive_key_pair(self, seed: bytes, derivation_path: str) -> tuple[bytes, bytes]:
        child = Bip32Slip10Ed25519.FromSeed(seed).DerivePath(harden_path(derivation_path))
        # ed25519 "compressed" keys carry a 0x00 prefix byte
        public_key = child.PublicKey().RawCompressed().ToBytes()[1:]
        return child.PrivateKey().Raw().ToBytes(), public_key

    def encode_address(self, public_key: bytes) -> str:
        checksum = crc24q(public_key).to_bytes(3, "big")
        return PUBKEY_ADDRESS_PREFIX + Base32Encoder.EncodeNoPadding(
            public_key + checksum, BASE32_ALPHABET
        )


def new_coin(
    symbol: str,
    seed: bytes,
    path_format: str,
    bip44_key: str,
    test_network: bool,
    options: Optional[dict[str, Any]] = None,
) -> BBCCoin:
    """Create a BBC-family coin.

    The derivation key may differ from ``symbol`` (e.g. MKF derived under
    BBC's id); the coin still reports its own symbol.
    """
    path = bip44.get_derivation_path(path_format, bip44_key)
    return BBCCoin(symbol, seed, path, test_network=test_network, options=options)
