"""Coin factory for creating coin instances from a wallet.

This module maps currency symbols to chain family constructors and turns a
wallet configuration into a ready coin. The registry is filled at import
time; adding a currency is one ``register_coin`` call.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from walletcore import bip44
from walletcore.coins import bbc, btc, eth, omni, trx
from walletcore.coins.base import OPTION_METADATA, Coin
from walletcore.errors import ConfigurationError, DerivationError, UnsupportedCurrencyError
from walletcore.wallet.metadata import CHAIN_METADATA, ChainInfo, CoinFamily, CoinMetadata
from walletcore.wallet.resolver import resolve_bip44_key

if TYPE_CHECKING:
    from walletcore.wallet.wallet import Wallet

logger = logging.getLogger(__name__)

# (symbol, seed, path_format, bip44_key, test_network, options) -> Coin
CoinConstructor = Callable[[str, bytes, str, str, bool, Optional[dict[str, Any]]], Coin]

FAMILY_CONSTRUCTORS: dict[CoinFamily, CoinConstructor] = {
    CoinFamily.BTC: btc.new_coin,
    CoinFamily.OMNI: omni.new_coin,
    CoinFamily.BBC: bbc.new_coin,
    CoinFamily.ETH: eth.new_coin,
    CoinFamily.TRX: trx.new_coin,
}


@dataclass(frozen=True)
class CoinRegistration:
    """Registry entry for a supported currency.

    ``chain_info`` and ``coin_type`` are set only when the registration added
    them to the metadata and coin-type tables; unregistering removes them.
    """

    symbol: str
    family: CoinFamily
    constructor: CoinConstructor
    chain_info: Optional[ChainInfo] = None
    coin_type: Optional[int] = None


# Symbol to registration mapping (case sensitive, insertion ordered)
COIN_REGISTRY: dict[str, CoinRegistration] = {}


def register_coin(
    symbol: str,
    family: CoinFamily,
    constructor: Optional[CoinConstructor] = None,
    chain_info: Optional[ChainInfo] = None,
    coin_type: Optional[int] = None,
) -> CoinRegistration:
    """Register a currency.

    Built-in currencies already have chain metadata and a BIP44 coin type;
    a new currency passes both so it can be initialized right away.

    Args:
        symbol: Currency symbol
        family: Chain family
        constructor: Coin constructor; defaults to the family's
        chain_info: Chain metadata to record for the symbol
        coin_type: BIP44 coin type to record for the symbol

    Returns:
        The registration entry

    Raises:
        ValueError: If ``chain_info`` names a different family
    """
    if chain_info is not None and chain_info.family != family:
        raise ValueError(
            f"{symbol}: chain info family {chain_info.family.value} "
            f"does not match {family.value}"
        )

    registration = CoinRegistration(
        symbol=symbol,
        family=family,
        constructor=constructor or FAMILY_CONSTRUCTORS[family],
        chain_info=chain_info,
        coin_type=coin_type,
    )
    if chain_info is not None:
        CHAIN_METADATA[symbol] = chain_info
    if coin_type is not None:
        bip44.COIN_TYPES[symbol] = coin_type
    COIN_REGISTRY[symbol] = registration
    return registration


def unregister_coin(symbol: str) -> None:
    """Remove a currency and whatever tables its registration filled."""
    registration = COIN_REGISTRY.pop(symbol, None)
    if registration is None:
        return
    if registration.chain_info is not None:
        CHAIN_METADATA.pop(symbol, None)
    if registration.coin_type is not None:
        bip44.COIN_TYPES.pop(symbol, None)


# BTC series
register_coin("BTC", CoinFamily.BTC)

# OMNI series
register_coin("USDT(Omni)", CoinFamily.OMNI)
register_coin("OMNI", CoinFamily.OMNI)

# BBC series
register_coin(bbc.SYMBOL_BBC, CoinFamily.BBC)
register_coin(bbc.SYMBOL_MKF, CoinFamily.BBC)

# ETH series
register_coin("ETH", CoinFamily.ETH)

# Tron
register_coin("TRX", CoinFamily.TRX)


def get_supported_coins() -> list[str]:
    """Get list of supported currency symbols."""
    return list(COIN_REGISTRY.keys())


def get_available_coin_list() -> str:
    """Get supported currency symbols joined by spaces.

    Example:
        "BTC USDT(Omni) OMNI BBC MKF ETH TRX"
    """
    return " ".join(COIN_REGISTRY.keys())


def _build_options(
    wallet: "Wallet", registration: CoinRegistration, metadata: CoinMetadata
) -> dict[str, Any]:
    """Fold chain metadata and wallet-level toggles into a family options bag."""
    options: dict[str, Any] = {OPTION_METADATA: metadata}
    if registration.family == CoinFamily.OMNI and wallet.share_account_with_parent_chain:
        options[omni.OPTION_SHARE_ACCOUNT_WITH_PARENT_CHAIN] = True
    return options


def init_coin(wallet: "Wallet", symbol: str) -> Coin:
    """Create a coin for a symbol from a wallet.

    Args:
        wallet: Wallet configuration (read only)
        symbol: Currency symbol, case sensitive

    Returns:
        Coin instance for the symbol

    Raises:
        ConfigurationError: If the wallet has no seed
        UnsupportedCurrencyError: If the symbol is not registered
        MetadataError: If the symbol has no chain metadata
        DerivationError: If the coin constructor fails
    """
    if not wallet.seed:
        raise ConfigurationError("missing seed")

    registration = COIN_REGISTRY.get(symbol)
    if registration is None:
        raise UnsupportedCurrencyError(symbol)

    metadata = wallet.metadata(symbol)
    bip44_key = resolve_bip44_key(symbol, wallet.flags)
    options = _build_options(wallet, registration, metadata)
    seed = wallet.bip39_seed()

    try:
        coin = registration.constructor(
            symbol,
            seed,
            wallet.path_format,
            bip44_key,
            wallet.test_network,
            options,
        )
    except Exception as e:
        raise DerivationError(symbol, e) from e

    logger.debug(f"Initialized {symbol} coin (bip44 key {bip44_key}, {registration.family.value})")
    return coin
