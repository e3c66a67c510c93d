"""Omni Layer coins (OMNI, USDT(Omni)).

Omni assets ride on Bitcoin transactions, so keys and addresses are plain
BTC ones. By default each asset derives under its own coin type; with
``OPTION_SHARE_ACCOUNT_WITH_PARENT_CHAIN`` it reuses the BTC account so the
asset and its parent chain share one address.
"""

import logging
from typing import Any, Optional

from walletcore import bip44
from walletcore.coins.btc import BTCCoin

logger = logging.getLogger(__name__)

OPTION_SHARE_ACCOUNT_WITH_PARENT_CHAIN = "shareAccountWithParentChain"

PARENT_CHAIN = "BTC"


class OmniCoin(BTCCoin):
    """Omni Layer asset on top of Bitcoin."""

    @property
    def parent_chain(self) -> str:
        return PARENT_CHAIN

    @property
    def shares_parent_account(self) -> bool:
        return bool(self.options.get(OPTION_SHARE_ACCOUNT_WITH_PARENT_CHAIN))


def new_coin(
    symbol: str,
    seed: bytes,
    path_format: str,
    bip44_key: str,
    test_network: bool,
    options: Optional[dict[str, Any]] = None,
) -> OmniCoin:
    """Create an Omni coin, optionally on the parent chain's account."""
    options = options or {}
    if options.get(OPTION_SHARE_ACCOUNT_WITH_PARENT_CHAIN):
        logger.debug(f"{symbol} shares account with {PARENT_CHAIN}")
        bip44_key = PARENT_CHAIN
    path = bip44.get_derivation_path(path_format, bip44_key)
    return OmniCoin(symbol, seed, path, test_network=test_network, options=options)
