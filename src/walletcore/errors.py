"""Exceptions raised by the wallet core.

Every error is raised to the immediate caller. Nothing here is retried:
derivation is deterministic, so the same inputs always fail the same way.
"""

from typing import Optional


class WalletCoreError(Exception):
    """Base class for all wallet core errors."""
    pass


class ValidationError(WalletCoreError):
    """Required construction input is missing or malformed."""
    pass


class ConfigurationError(ValidationError):
    """Wallet configuration cannot be used for derivation (e.g. missing seed)."""
    pass


class UnsupportedCurrencyError(WalletCoreError):
    """Symbol has no entry in the coin registry."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"no entry for coin ({symbol}) was found")


class MetadataError(WalletCoreError):
    """Symbol is registered but its chain metadata cannot be resolved."""

    def __init__(self, symbol: str, reason: str = "metadata not configured"):
        self.symbol = symbol
        self.reason = reason
        super().__init__(f"{symbol}: {reason}")


class DerivationError(WalletCoreError):
    """A coin constructor failed; carries the symbol it was building."""

    def __init__(self, symbol: str, cause: Optional[BaseException] = None):
        self.symbol = symbol
        self.cause = cause
        message = f"failed to init coin {symbol}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NotImplementedFeatureError(WalletCoreError, NotImplementedError):
    """Feature is deliberately deferred and must not return a partial object."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} is not implemented")
