"""Wallet options.

An option is a named, immutable mutation of a wallet. ``visit`` never touches
the wallet it is given; it returns a new one. A ``WalletOptions`` list is
applied strictly in order and the first failure aborts the rest.

Usage:
    options = WalletOptions()
    options.add(with_flag(FLAG_MKF_USE_BBC_BIP44_ID))
    options.add(with_password("secret"))
    wallet2 = wallet.clone(options)
"""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from walletcore.errors import ValidationError

if TYPE_CHECKING:
    from walletcore.wallet.wallet import Wallet


class WalletOption(ABC):
    """Abstract base class for wallet options."""

    @abstractmethod
    def visit(self, wallet: "Wallet") -> "Wallet":
        """Return a copy of ``wallet`` with this option applied."""
        pass


@dataclass(frozen=True)
class PathFormatOption(WalletOption):
    """Set the derivation path format."""

    path_format: str

    def visit(self, wallet: "Wallet") -> "Wallet":
        if not self.path_format:
            raise ValidationError("path format should not be empty")
        return dataclasses.replace(wallet, path_format=self.path_format)


@dataclass(frozen=True)
class FlagOption(WalletOption):
    """Add a feature flag (refer to the FLAG_* constants)."""

    flag: str

    def visit(self, wallet: "Wallet") -> "Wallet":
        if not self.flag:
            raise ValidationError("flag should not be empty")
        return dataclasses.replace(wallet, flags=wallet.flags | {self.flag})


@dataclass(frozen=True)
class PasswordOption(WalletOption):
    """Set the password used for passphrase-hardened derivation."""

    password: str = dataclasses.field(repr=False)

    def visit(self, wallet: "Wallet") -> "Wallet":
        return dataclasses.replace(wallet, password=self.password)


@dataclass(frozen=True)
class ShareAccountWithParentChainOption(WalletOption):
    """Let asset-overlay coins reuse the parent chain account."""

    share_account_with_parent_chain: bool

    def visit(self, wallet: "Wallet") -> "Wallet":
        return dataclasses.replace(
            wallet, share_account_with_parent_chain=self.share_account_with_parent_chain
        )


def with_path_format(path_format: str) -> WalletOption:
    return PathFormatOption(path_format)


def with_flag(flag: str) -> WalletOption:
    return FlagOption(flag)


def with_password(password: str) -> WalletOption:
    return PasswordOption(password)


def with_share_account_with_parent_chain(share_account_with_parent_chain: bool) -> WalletOption:
    return ShareAccountWithParentChainOption(share_account_with_parent_chain)


class WalletOptions:
    """Ordered list of wallet options."""

    def __init__(self, options: Optional[Iterable[WalletOption]] = None):
        self._options: list[WalletOption] = list(options or [])

    def add(self, option: WalletOption) -> "WalletOptions":
        self._options.append(option)
        return self

    def __iter__(self) -> Iterator[WalletOption]:
        return iter(tuple(self._options))

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"WalletOptions({self._options!r})"


def apply_options(
    wallet: "Wallet", options: Optional[Iterable[WalletOption]] = None
) -> "Wallet":
    """Apply options in order, feeding each result into the next.

    Raises:
        Whatever the first failing option raises; later options are not applied.
    """
    for option in options or ():
        wallet = option.visit(wallet)
    return wallet
