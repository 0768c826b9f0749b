"""
CRC16-XModem checksum used by Stellar account IDs.

Polynomial 0x1021, initial value 0x0000, no final XOR. Computed bytewise
with bit manipulation, without a lookup table.
"""


def crc16_xmodem(data: bytes) -> int:
    """
    Compute the CRC16-XModem of a byte string.

    Args:
        data: Bytes to checksum.

    Returns:
        16-bit checksum value.
    """
    crc = 0x0000

    for byte in data:
        code = (crc >> 8) & 0xFF
        code ^= byte & 0xFF
        code ^= code >> 4
        crc = (crc << 8) & 0xFFFF
        crc ^= code
        code = (code << 5) & 0xFFFF
        crc ^= code
        code = (code << 7) & 0xFFFF
        crc ^= code

    return crc


def checksum_bytes(data: bytes) -> bytes:
    """Return the CRC16-XModem of data as 2 little-endian bytes."""
    crc = crc16_xmodem(data)
    return bytes([crc & 0xFF, (crc >> 8) & 0xFF])
