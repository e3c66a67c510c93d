"""Chain metadata for supported currencies."""

from dataclasses import dataclass
from enum import Enum

from walletcore.errors import MetadataError


class CoinFamily(str, Enum):
    """Chain family a currency is constructed by."""
    BTC = "btc"      # base UTXO chain
    OMNI = "omni"    # asset overlay on BTC
    ETH = "eth"      # EVM
    TRX = "trx"
    BBC = "bbc"


@dataclass(frozen=True)
class ChainInfo:
    """Static description of a currency."""

    name: str
    family: CoinFamily
    decimals: int
    parent_chain: str = ""  # asset-overlay currencies only


@dataclass(frozen=True)
class CoinMetadata:
    """Metadata resolved for one currency on one wallet."""

    symbol: str
    name: str
    family: CoinFamily
    decimals: int
    test_network: bool
    path_format: str
    parent_chain: str = ""

    @property
    def is_asset_overlay(self) -> bool:
        return bool(self.parent_chain)


CHAIN_METADATA: dict[str, ChainInfo] = {
    "BTC": ChainInfo(name="Bitcoin", family=CoinFamily.BTC, decimals=8),
    "USDT(Omni)": ChainInfo(
        name="Tether (Omni)", family=CoinFamily.OMNI, decimals=8, parent_chain="BTC"
    ),
    "OMNI": ChainInfo(name="Omni", family=CoinFamily.OMNI, decimals=8, parent_chain="BTC"),
    "BBC": ChainInfo(name="BigBang Core", family=CoinFamily.BBC, decimals=6),
    "MKF": ChainInfo(name="MarketFinance", family=CoinFamily.BBC, decimals=6),
    "ETH": ChainInfo(name="Ethereum", family=CoinFamily.ETH, decimals=18),
    "TRX": ChainInfo(name="Tron", family=CoinFamily.TRX, decimals=6),
}


def lookup_metadata(symbol: str, test_network: bool, path_format: str) -> CoinMetadata:
    """Resolve metadata for a symbol.

    Raises:
        MetadataError: If the symbol has no chain metadata
    """
    info = CHAIN_METADATA.get(symbol)
    if info is None:
        raise MetadataError(symbol)

    return CoinMetadata(
        symbol=symbol,
        name=info.name,
        family=info.family,
        decimals=info.decimals,
        test_network=test_network,
        path_format=path_format,
        parent_chain=info.parent_chain,
    )
