"""
Shared test helpers for stellar-checksum unit tests.

Provides known account ID vectors and a factory that builds account IDs
from raw key bytes.
"""

from __future__ import annotations

from stellar_checksum.base32 import encode
from stellar_checksum.crc16 import checksum_bytes

# Version byte of an ed25519 public key account ID ("G..." prefix)
ACCOUNT_ID_VERSION = 6 << 3


VALID_ACCOUNT_IDS = [
    "GD4T35DMXYDE7BJWYPUWK43VFJO5IBUQYG2YGMICPTWP4JTNWQELKAVA",
    "GDMMOKAEIMPIZF3XI2VC75CYBIVNKEKW6WVPWGPMNQUNEVCVSOAHPWFD",
    "GBX6DXELQKLHMKVX2G24E3TPQV6APUAQECIC3XUJJ77Y2NYDM66TDTVY",
    "GBVEQCPQS7G4GGXSIMM2T4FFEKCR2II4HF3HEXMFJESC2TKB5IC4UX5C",
    "GANYOWWYZQMXGJHELUG2NJBPB3BEL2OMAQPCQQHKLVWRRPZEYSP6VT3A",
    "GBH75U7JSLPWYAVYEUUMFDX6L5FMKZZP6NXZ3PXBCFQXMM3XGRZTHI72",
    "GDRQMBUFMZ5KVMG22RFWMCZFT4CCX7UHNQQVV4ISEB4E5HXREYRY4KEY",
    "GA336RBL6RNDUNNIDHDDXPB4ASY2X7WB24XRPB7LGRBP4GDX7P35JIR6",
    "GASVF25626CSXZFWCFTS2SPIKMNAXNXXJEBQXT4OKZU5T5VRJV64TFTW",
    "GAEX2ZVP4KDTACV5NSPQYUTCRDC3GTLA6IXWAYW2HBPPK3F5CWVHO3U5",
]

INVALID_ACCOUNT_IDS = [
    "0x6f46cf5569aefa1acc1009290c8e043747172d89",
    "0x90e63c3d53e0ea496845b7a03ec7548b70014a91",
    "null",
    "not valid",
    "",
]


def make_account_id(key: bytes, version: int = ACCOUNT_ID_VERSION) -> str:
    """Build an account ID with a correct checksum for the given key bytes."""
    payload = bytes([version]) + key
    return encode(payload + checksum_bytes(payload))


def mutate(account_id: str, index: int) -> str:
    """Replace the character at index with a different Base32 symbol."""
    replacement = "B" if account_id[index].upper() == "A" else "A"
    return account_id[:index] + replacement + account_id[index + 1:]
