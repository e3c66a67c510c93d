"""Per-chain coin implementations used by the wallet dispatcher."""

from walletcore.coins.base import Coin, KeyInfo

__all__ = [
    "Coin",
    "KeyInfo",
]
