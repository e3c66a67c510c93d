"""Tests for wallet builders."""

import pytest

from walletcore import bip44
from walletcore.config import Settings
from walletcore.errors import NotImplementedFeatureError, UnsupportedCurrencyError, ValidationError
from walletcore.wallet import (
    FLAG_MKF_USE_BBC_BIP44_ID,
    Wallet,
    WalletBuilder,
    WalletOptions,
    build_wallet_from_mnemonic,
    build_wallet_from_private_key,
    with_flag,
    with_password,
)

SEED_HEX_PREFIX = "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"


class TestWalletBuilder:
    """Tests for WalletBuilder."""

    def test_build_without_mnemonic_fails(self):
        """Test that building with no mnemonic raises ValidationError."""
        with pytest.raises(ValidationError, match="empty mnemonic"):
            WalletBuilder().build()

    def test_build_with_invalid_mnemonic_fails(self):
        """Test that a malformed mnemonic is rejected by seed derivation."""
        with pytest.raises(ValidationError, match="invalid mnemonic"):
            WalletBuilder().set_mnemonic("not a real mnemonic at all").build()

    def test_build_derives_seed(self, mnemonic):
        """Test that build derives the BIP39 seed."""
        wallet = WalletBuilder().set_mnemonic(mnemonic).build()

        assert wallet.seed.hex().startswith(SEED_HEX_PREFIX)
        assert wallet.mnemonic == mnemonic
        assert wallet.test_network is False

    def test_setters_chain(self, mnemonic):
        """Test that every setter returns the builder."""
        builder = WalletBuilder()
        assert builder.set_mnemonic(mnemonic) is builder
        assert builder.set_test_network(True) is builder
        assert builder.set_password("pw") is builder
        assert builder.set_share_account_with_parent_chain(True) is builder
        assert builder.set_use_shortest_path(True) is builder
        assert builder.set_path_format(bip44.PATH_FORMAT) is builder
        assert builder.add_flag("x") is builder

    def test_fields_copied_to_wallet(self, mnemonic):
        """Test that accumulated fields land on the wallet."""
        wallet = (
            WalletBuilder()
            .set_mnemonic(mnemonic)
            .set_test_network(True)
            .set_password("pw")
            .set_share_account_with_parent_chain(True)
            .add_flag(FLAG_MKF_USE_BBC_BIP44_ID)
            .build()
        )

        assert wallet.test_network is True
        assert wallet.password == "pw"
        assert wallet.share_account_with_parent_chain is True
        assert wallet.flags == frozenset({FLAG_MKF_USE_BBC_BIP44_ID})

    def test_last_path_call_wins(self, mnemonic):
        """Test that path format follows the last path setter call."""
        builder = WalletBuilder().set_mnemonic(mnemonic)

        assert builder.set_use_shortest_path(True).build().path_format == bip44.PATH_FORMAT
        assert builder.set_use_shortest_path(False).build().path_format == bip44.FULL_PATH_FORMAT
        assert builder.set_path_format("m/44'/{coin_type}'/1'").build().path_format == (
            "m/44'/{coin_type}'/1'"
        )

    def test_default_path_format_is_full(self, mnemonic):
        """Test that the full BIP44 path is used when none is chosen."""
        assert WalletBuilder().set_mnemonic(mnemonic).build().path_format == bip44.FULL_PATH_FORMAT

    def test_builder_reuse_does_not_share_state(self, mnemonic):
        """Test that wallets built from one builder are independent."""
        builder = WalletBuilder().set_mnemonic(mnemonic)
        first = builder.build()
        second = builder.add_flag("later").build()

        assert first.flags == frozenset()
        assert second.flags == frozenset({"later"})

    def test_from_settings(self, mnemonic):
        """Test that configured defaults seed the builder."""
        settings = Settings(
            test_network=True,
            use_shortest_path=True,
            share_account_with_parent_chain=True,
            default_flags=f"{FLAG_MKF_USE_BBC_BIP44_ID}, ,{FLAG_MKF_USE_BBC_BIP44_ID}",
        )

        wallet = WalletBuilder.from_settings(settings).set_mnemonic(mnemonic).build()

        assert wallet.test_network is True
        assert wallet.path_format == bip44.PATH_FORMAT
        assert wallet.share_account_with_parent_chain is True
        assert wallet.flags == frozenset({FLAG_MKF_USE_BBC_BIP44_ID})

    def test_placeholder_mnemonic_with_unknown_currency(self, fake_seed_generator):
        """Test building from "M" then asking for an unknown currency."""
        wallet = (
            WalletBuilder(seed_generator=fake_seed_generator)
            .set_mnemonic("M")
            .set_test_network(False)
            .build()
        )

        with pytest.raises(UnsupportedCurrencyError) as exc_info:
            wallet.get_coin("ZZZ")

        assert exc_info.value.symbol == "ZZZ"
        assert "ZZZ" in str(exc_info.value)

    def test_empty_path_format_rejected_at_build(self, mnemonic):
        """Test that an empty path format fails before any derivation work."""
        calls = []

        def generate(mnemonic: str, passphrase: str = "") -> bytes:
            calls.append(mnemonic)
            return b"\x01" * 64

        builder = WalletBuilder(seed_generator=generate).set_mnemonic(mnemonic)

        with pytest.raises(ValidationError, match="path format should not be empty"):
            builder.set_path_format("").build()
        assert calls == []

    def test_password_uses_injected_seed_generator(self, fake_seed_generator):
        """Test that a password re-derives the seed with the builder's generator."""
        calls = []

        def generate(mnemonic: str, passphrase: str = "") -> bytes:
            calls.append((mnemonic, passphrase))
            return fake_seed_generator(mnemonic, passphrase)

        plain = WalletBuilder(seed_generator=generate).set_mnemonic("M").build()
        hardened = (
            WalletBuilder(seed_generator=generate)
            .set_mnemonic("M")
            .set_password("pw")
            .build()
        )

        coin = hardened.get_coin("BTC")

        assert ("M", "pw") in calls
        assert hardened.bip39_seed() == fake_seed_generator("M", "pw")
        assert coin.get_address() == plain.get_address("BTC")

    def test_password_option_uses_injected_seed_generator(self, fake_seed_generator):
        """Test that cloning with a password keeps the wallet's generator."""
        wallet = WalletBuilder(seed_generator=fake_seed_generator).set_mnemonic("M").build()

        hardened = wallet.clone([with_password("pw")])

        assert hardened.seed_generator is fake_seed_generator
        assert hardened.get_address("ETH") == wallet.get_address("ETH")


class TestBuildWalletFromMnemonic:
    """Tests for the options-based constructor."""

    def test_applies_options(self, mnemonic):
        """Test that options are applied to the fresh wallet."""
        options = WalletOptions([with_flag("a"), with_password("pw")])

        wallet = build_wallet_from_mnemonic(mnemonic, True, options)

        assert wallet.flags == frozenset({"a"})
        assert wallet.password == "pw"
        assert wallet.test_network is True

    def test_empty_mnemonic_fails(self):
        """Test the same validation as the builder."""
        with pytest.raises(ValidationError, match="empty mnemonic"):
            build_wallet_from_mnemonic("", False)

    def test_matches_builder_seed(self, mnemonic):
        """Test that both paths derive the same seed."""
        built = WalletBuilder().set_mnemonic(mnemonic).build()
        assert build_wallet_from_mnemonic(mnemonic).seed == built.seed

    def test_empty_seed_from_generator_fails(self, mnemonic):
        """Test that a collaborator returning no seed is rejected."""
        with pytest.raises(ValidationError, match="empty seed"):
            build_wallet_from_mnemonic(mnemonic, seed_generator=lambda m, p: b"")


class TestDirectConstructors:
    """Tests for Wallet classmethods."""

    def test_from_mnemonic(self, mnemonic):
        """Test constructing a wallet directly from a mnemonic."""
        wallet = Wallet.from_mnemonic(mnemonic, test_network=True)

        assert wallet.seed.hex().startswith(SEED_HEX_PREFIX)
        assert wallet.test_network is True

    def test_from_mnemonic_empty(self):
        """Test that empty mnemonics never produce a wallet."""
        with pytest.raises(ValidationError):
            Wallet.from_mnemonic("")

    def test_from_seed(self):
        """Test constructing a wallet from a raw seed."""
        wallet = Wallet.from_seed(b"\x02" * 64)

        assert wallet.mnemonic is None
        assert wallet.seed == b"\x02" * 64

    def test_secrets_not_in_repr(self, mnemonic):
        """Test that repr hides mnemonic, seed and password."""
        wallet = Wallet.from_mnemonic(mnemonic).clone([with_password("hunter2")])
        text = repr(wallet)

        assert "abandon" not in text
        assert "hunter2" not in text
        assert SEED_HEX_PREFIX not in text

    def test_safe_dict(self, wallet):
        """Test the redacted wallet view."""
        safe = wallet.get_safe_dict()

        assert safe["has_mnemonic"] is True
        assert safe["has_seed"] is True
        assert safe["has_password"] is False
        assert safe["flags"] == []


class TestBuildFromPrivateKey:
    """Tests for the deferred private-key constructor."""

    def test_not_implemented(self):
        """Test that building from a private key fails loudly."""
        with pytest.raises(NotImplementedFeatureError):
            build_wallet_from_private_key("00" * 32, False)

    def test_is_not_implemented_error(self):
        """Test that callers can catch the builtin NotImplementedError."""
        with pytest.raises(NotImplementedError):
            build_wallet_from_private_key("00" * 32)
