"""BIP39 seed derivation.

Thin wrapper over bip_utils so the rest of the package sees a single
``(mnemonic, passphrase) -> bytes`` collaborator.
"""

from typing import Callable

from bip_utils import Bip39SeedGenerator, MnemonicChecksumError

from walletcore.errors import ValidationError

# (mnemonic, passphrase) -> seed
SeedGenerator = Callable[[str, str], bytes]


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """Derive the 64-byte BIP39 seed for a mnemonic.

    Args:
        mnemonic: Space separated mnemonic words
        passphrase: Optional BIP39 passphrase

    Returns:
        Seed bytes

    Raises:
        ValidationError: If the mnemonic is empty or fails BIP39 validation
    """
    if not mnemonic or not mnemonic.strip():
        raise ValidationError("empty mnemonic")

    try:
        return bytes(Bip39SeedGenerator(mnemonic.strip()).Generate(passphrase))
    except (MnemonicChecksumError, ValueError) as e:
        raise ValidationError(f"invalid mnemonic: {e}") from e
