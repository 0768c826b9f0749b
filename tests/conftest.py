"""
Shared pytest fixtures for stellar-checksum tests.
"""

import pytest

from stellar_checksum.config import CheckerConfig
from tests.helpers import VALID_ACCOUNT_IDS, make_account_id


@pytest.fixture
def sample_config() -> CheckerConfig:
    """Default checker configuration."""
    return CheckerConfig()


@pytest.fixture
def valid_account_id() -> str:
    """A known-good account ID."""
    return VALID_ACCOUNT_IDS[0]


@pytest.fixture
def zero_key_account_id() -> str:
    """Account ID built from an all-zero 32-byte key."""
    return make_account_id(bytes(32))


@pytest.fixture
def ids_file(tmp_path):
    """
    Text file mixing valid, invalid, comment and blank lines.

        2 valid IDs, 1 invalid ID, 1 comment, 1 blank line
    """
    path = tmp_path / "accounts.txt"
    path.write_text(
        "# exchange hot wallets\n"
        f"{VALID_ACCOUNT_IDS[0]}\n"
        "\n"
        f"  {VALID_ACCOUNT_IDS[2]}  \n"
        "0x6f46cf5569aefa1acc1009290c8e043747172d89\n",
        encoding="utf-8",
    )
    return path
