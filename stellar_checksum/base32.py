"""
Base32 codec for Stellar account IDs.

Uses the RFC4648 alphabet (A-Z, 2-7) without padding. Symbols are packed
most-significant-bit first into 8-bit bytes. Decoding is case-insensitive
and tolerates trailing "=" padding characters.
"""

from typing import Optional

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PADDING_CHAR = "="


class AccountIdError(ValueError):
    """Base class for account ID decoding and checksum failures."""


class DecodeError(AccountIdError):
    """Raised when a string is not decodable as Base32."""


def char_to_value(char: str) -> int:
    """
    Map a single Base32 character to its 5-bit symbol value.

    Args:
        char: One character of the encoded string.

    Returns:
        Symbol value in the range 0-31.

    Raises:
        DecodeError: If the character is not in the Base32 alphabet.
    """
    code = ord(char)

    # A-Z
    if 64 < code < 91:
        return code - 65
    # 2-7
    if 49 < code < 56:
        return code - 24
    # a-z
    if 96 < code < 123:
        return code - 97

    raise DecodeError(f"Character {char!r} is not a Base32 character")


def decode(text: Optional[str]) -> bytes:
    """
    Decode a Base32 string into bytes.

    Trailing padding is stripped first. The output length is
    len(text) * 5 // 8; trailing bits that do not fill a whole byte are
    dropped.

    Args:
        text: Base32 encoded string.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If text is None or empty, or contains a character
                     outside the Base32 alphabet.
    """
    if not text:
        raise DecodeError("Input is empty")

    text = text.rstrip(PADDING_CHAR)
    byte_count = len(text) * 5 // 8  # must truncate
    result = bytearray()

    cur_byte = 0
    bits_remaining = 8

    for char in text:
        value = char_to_value(char)

        if bits_remaining > 5:
            cur_byte |= value << (bits_remaining - 5)
            bits_remaining -= 5
        else:
            cur_byte |= value >> (5 - bits_remaining)
            result.append(cur_byte)
            cur_byte = (value << (3 + bits_remaining)) & 0xFF
            bits_remaining += 3

    # Last byte was not completed
    if len(result) < byte_count:
        result.append(cur_byte)

    return bytes(result)


def encode(data: bytes) -> str:
    """
    Encode bytes as an unpadded Base32 string.

    The final symbol is zero-filled when the input bit count is not a
    multiple of five, so decode(encode(data)) == data.
    """
    result = []
    acc = 0
    acc_bits = 0

    for byte in data:
        acc = (acc << 8) | byte
        acc_bits += 8

        while acc_bits >= 5:
            acc_bits -= 5
            result.append(ALPHABET[acc >> acc_bits])
            acc &= (1 << acc_bits) - 1

    if acc_bits:
        result.append(ALPHABET[acc << (5 - acc_bits)])

    return "".join(result)
