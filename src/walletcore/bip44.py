"""BIP44 path formats and coin type table.

Path formats are ``str.format`` templates with a ``{coin_type}`` placeholder.
Coin types are keyed by derivation key, which is usually the currency symbol
but may be a standardized identifier (see ``walletcore.wallet.resolver``).
"""

# m/44'/coin_type' - shortest path, key derived at the coin level
PATH_FORMAT = "m/44'/{coin_type}'"

# m/44'/coin_type'/account'/change/index
FULL_PATH_FORMAT = "m/44'/{coin_type}'/0'/0/0"

COIN_TYPES: dict[str, int] = {
    "BTC": 0,
    "ETH": 60,
    "TRX": 195,
    "OMNI": 200,
    "USDT(Omni)": 200,
    # BigBang Core family. The legacy ids predate SLIP-44 registration.
    "BBC": 10001,
    "MKF": 10002,
    "BigBangCore": 223,
}


def get_coin_type(key: str) -> int:
    """Get the BIP44 coin type for a derivation key.

    Raises:
        ValueError: If the key has no coin type
    """
    try:
        return COIN_TYPES[key]
    except KeyError:
        raise ValueError(f"no bip44 coin type for {key!r}") from None


def get_derivation_path(path_format: str, key: str) -> str:
    """Render a path format for a derivation key.

    Example:
        get_derivation_path(FULL_PATH_FORMAT, "ETH")  # "m/44'/60'/0'/0/0"
    """
    if not path_format:
        raise ValueError("empty path format")
    return path_format.format(coin_type=get_coin_type(key))
