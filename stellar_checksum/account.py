"""
Stellar account ID validation.

Accounts are identified by a public account ID: the Base32 encoding of a
version byte, the raw public key and a CRC16-XModem checksum of the two,
stored little-endian in the final 2 bytes.

Validation is a predicate. is_valid() and create_account() never raise;
any decoding or checksum failure yields False or None.
"""

from dataclasses import dataclass
from typing import Optional

from .base32 import AccountIdError, DecodeError, decode
from .crc16 import checksum_bytes

CHECKSUM_SIZE = 2

# Version byte + checksum
MIN_DECODED_SIZE = CHECKSUM_SIZE + 1


class ChecksumMismatch(AccountIdError):
    """Raised when a decoded account ID does not carry a matching checksum."""


def verify_checksum(account_id: Optional[str]) -> bytes:
    """
    Decode an account ID and verify its embedded checksum.

    The checksum covers the version byte and key payload together; only
    the trailing checksum bytes are excluded.

    Args:
        account_id: Base32 encoded account ID.

    Returns:
        The decoded bytes (version byte, key payload and checksum).

    Raises:
        DecodeError: If the account ID is empty or not valid Base32.
        ChecksumMismatch: If the decoded data is too short to carry a
                          checksum, or the checksum does not match.
    """
    decoded = decode(account_id)

    if len(decoded) < MIN_DECODED_SIZE:
        raise ChecksumMismatch(
            f"Decoded account ID is {len(decoded)} byte(s), "
            f"expected at least {MIN_DECODED_SIZE}"
        )

    payload = decoded[:-CHECKSUM_SIZE]
    checksum = decoded[-CHECKSUM_SIZE:]
    expected = checksum_bytes(payload)

    if expected != checksum:
        raise ChecksumMismatch(
            f"Checksum {checksum.hex()} does not match expected {expected.hex()}"
        )

    return decoded


def is_valid(account_id: Optional[str]) -> bool:
    """
    Check whether a string is an account ID with a valid checksum.

    Args:
        account_id: Candidate account ID. None and non-string values are
                    accepted and reported invalid.

    Returns:
        True if the string decodes and its CRC16-XModem checksum matches.
    """
    if not isinstance(account_id, str):
        return False

    try:
        verify_checksum(account_id)
    except (DecodeError, ChecksumMismatch):
        return False

    return True


@dataclass(frozen=True, order=True)
class StellarAccount:
    """
    A Stellar account with a validated public account ID.

    Instances should be obtained from StellarAccount.create() or
    create_account(), which only return accounts whose ID passed checksum
    validation.

    Attributes:
        account_id: The public account ID (immutable).
    """

    account_id: str

    @classmethod
    def create(cls, account_id: Optional[str]) -> Optional["StellarAccount"]:
        """
        Create an account if the account ID is valid.

        Args:
            account_id: The public account ID.

        Returns:
            The new StellarAccount, or None if the ID has an invalid checksum.
        """
        if is_valid(account_id):
            return cls(account_id)
        return None

    def __str__(self) -> str:
        return self.account_id


def create_account(account_id: Optional[str]) -> Optional[StellarAccount]:
    """Module-level shortcut for StellarAccount.create()."""
    return StellarAccount.create(account_id)
