"""Wallet core configuration using pydantic-settings.

Settings only provide defaults for new wallets. A built ``Wallet`` never reads
the environment again.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Settings loaded from ``WALLETCORE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: Optional[str] = Field(
        default=None, description="Explicit log level (overrides debug)"
    )

    # ======================
    # Wallet defaults
    # ======================
    test_network: bool = Field(default=False, description="Use test network parameters")
    use_shortest_path: bool = Field(
        default=False, description="Derive keys at m/44'/coin' instead of the full path"
    )
    share_account_with_parent_chain: bool = Field(
        default=False, description="Asset-overlay coins reuse the parent chain account"
    )
    default_flags: str = Field(
        default="", description="Comma-separated feature flags applied to new wallets"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the log level name and reject unknown ones."""
        if v is None or v == "":
            return None
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"Invalid log level {v!r}, expected one of {expected}")
        return level

    @property
    def flags(self) -> list[str]:
        """Parse default flags into a list, dropping blanks and duplicates."""
        seen: list[str] = []
        for flag in self.default_flags.split(","):
            flag = flag.strip()
            if flag and flag not in seen:
                seen.append(flag)
        return seen

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_log_level(self) -> int:
        """Resolve the numeric log level."""
        if self.log_level:
            return getattr(logging, self.log_level)
        return logging.DEBUG if self.debug else logging.INFO

    def get_safe_dict(self) -> dict:
        """Return settings as a plain dict (no secrets are held here)."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "test_network": self.test_network,
            "use_shortest_path": self.use_shortest_path,
            "share_account_with_parent_chain": self.share_account_with_parent_chain,
            "flags": self.flags,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for applications embedding the wallet core."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
