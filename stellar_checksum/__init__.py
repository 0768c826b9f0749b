"""
stellar-checksum – Stellar account ID validation

Decodes Stellar public account IDs from Base32 and verifies their
embedded CRC16-XModem checksum.
"""

__version__ = "0.1.0"
__author__ = "Kava.World"

from .account import (
    AccountIdError,
    ChecksumMismatch,
    DecodeError,
    StellarAccount,
    create_account,
    is_valid,
)

__all__ = [
    "AccountIdError",
    "ChecksumMismatch",
    "DecodeError",
    "StellarAccount",
    "create_account",
    "is_valid",
]
