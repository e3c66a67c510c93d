"""Derivation key resolution.

Maps a currency symbol and a wallet's feature flags to the key used to pick a
BIP44 coin type. Related currencies can be told to share an identifier:

1. a secondary currency may borrow its primary's key;
2. a primary key may then be swapped for its standardized identifier.

Step 2 runs on the output of step 1, so a secondary with both flags set ends
up on the primary's *standard* id.
"""

from dataclasses import dataclass
from typing import AbstractSet

# MKF derives under BBC's bip44 id
FLAG_MKF_USE_BBC_BIP44_ID = "mkf_use_bbc_bip44_id"
# BBC derives under its registered SLIP-44 id instead of the legacy one
FLAG_BBC_USE_STANDARD_BIP44_ID = "bbc_use_standard_bip44_id"


@dataclass(frozen=True)
class SharedDerivationPair:
    """Two currencies that may share a derivation identifier."""

    primary: str
    secondary: str
    secondary_flag: str  # secondary uses primary's key
    primary_flag: str  # primary uses its standard id


SHARED_DERIVATION_PAIRS: tuple[SharedDerivationPair, ...] = (
    SharedDerivationPair(
        primary="BBC",
        secondary="MKF",
        secondary_flag=FLAG_MKF_USE_BBC_BIP44_ID,
        primary_flag=FLAG_BBC_USE_STANDARD_BIP44_ID,
    ),
)

STANDARD_BIP44_IDS: dict[str, str] = {
    "BBC": "BigBangCore",
}


def resolve_bip44_key(symbol: str, flags: AbstractSet[str]) -> str:
    """Get the derivation key for a symbol.

    Args:
        symbol: Currency symbol
        flags: Wallet feature flags (read only)

    Returns:
        Derivation key; ``symbol`` itself unless a sharing rule applies.
        Unknown symbols pass through unchanged.
    """
    key = symbol

    for pair in SHARED_DERIVATION_PAIRS:
        if symbol == pair.secondary and pair.secondary_flag in flags:
            key = pair.primary
            break

    for pair in SHARED_DERIVATION_PAIRS:
        if key == pair.primary and pair.primary_flag in flags:
            key = STANDARD_BIP44_IDS.get(key, key)
            break

    return key
