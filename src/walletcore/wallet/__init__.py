"""Wallet configuration, options, builder and coin dispatch."""

from walletcore.wallet.builder import (
    WalletBuilder,
    build_wallet_from_mnemonic,
    build_wallet_from_private_key,
)
from walletcore.wallet.factory import (
    get_available_coin_list,
    get_supported_coins,
    init_coin,
    register_coin,
    unregister_coin,
)
from walletcore.wallet.metadata import ChainInfo, CoinFamily, CoinMetadata
from walletcore.wallet.options import (
    WalletOption,
    WalletOptions,
    with_flag,
    with_password,
    with_path_format,
    with_share_account_with_parent_chain,
)
from walletcore.wallet.resolver import (
    FLAG_BBC_USE_STANDARD_BIP44_ID,
    FLAG_MKF_USE_BBC_BIP44_ID,
    resolve_bip44_key,
)
from walletcore.wallet.wallet import Wallet

__all__ = [
    "Wallet",
    "WalletBuilder",
    "WalletOption",
    "WalletOptions",
    "ChainInfo",
    "CoinFamily",
    "CoinMetadata",
    "FLAG_BBC_USE_STANDARD_BIP44_ID",
    "FLAG_MKF_USE_BBC_BIP44_ID",
    "build_wallet_from_mnemonic",
    "build_wallet_from_private_key",
    "get_available_coin_list",
    "get_supported_coins",
    "init_coin",
    "register_coin",
    "unregister_coin",
    "resolve_bip44_key",
    "with_flag",
    "with_password",
    "with_path_format",
    "with_share_account_with_parent_chain",
]
