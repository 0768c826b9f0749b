"""
Batch checking of Stellar account IDs.

Runs the checksum predicate over a collection of candidate account IDs,
for example the lines of a text file, and collects the outcomes in a
CheckReport that can be logged or serialized.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .account import StellarAccount, is_valid
from .config import CheckerConfig

logger = logging.getLogger(__name__)


@dataclass
class AccountCheck:
    """
    Outcome of checking a single account ID.

    Attributes:
        account_id: The candidate account ID as checked.
        valid: True if the checksum matched.
    """

    account_id: str
    valid: bool

    @property
    def status(self) -> str:
        """Either "valid" or "invalid"."""
        return "valid" if self.valid else "invalid"

    def __str__(self) -> str:
        """Format check for display."""
        return f"[{self.status.upper()}] {self.account_id}"


@dataclass
class CheckReport:
    """
    Results from checking a batch of account IDs.

    Attributes:
        checks: One AccountCheck per account ID, in input order.
    """

    checks: list[AccountCheck] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        """Count of valid account IDs."""
        return sum(1 for c in self.checks if c.valid)

    @property
    def invalid_count(self) -> int:
        """Count of invalid account IDs."""
        return sum(1 for c in self.checks if not c.valid)

    @property
    def has_invalid(self) -> bool:
        """
        Check if any account ID failed validation.

        Returns:
            True if at least one check is invalid.
        """
        return any(not c.valid for c in self.checks)

    def add(self, account_id: str, valid: bool) -> None:
        """
        Record the outcome for one account ID.

        Args:
            account_id: The account ID that was checked.
            valid: Whether it passed validation.
        """
        self.checks.append(AccountCheck(account_id, valid))

    def valid_accounts(self) -> list[StellarAccount]:
        """Return a StellarAccount for every valid account ID."""
        return [StellarAccount(c.account_id) for c in self.checks if c.valid]

    def to_dict(self) -> dict:
        """Convert the report to a JSON-serializable dictionary."""
        return {
            "valid": self.valid_count,
            "invalid": self.invalid_count,
            "results": [
                {"account_id": c.account_id, "valid": c.valid}
                for c in self.checks
            ],
        }

    def log_summary(self) -> None:
        """
        Log a summary of the check results.

        Logs every invalid account ID and provides counts.
        """
        if not self.checks:
            logger.warning("No account IDs were checked")
            return

        for check in self.checks:
            if not check.valid:
                logger.error(str(check))

        if self.has_invalid:
            logger.error(
                f"✗ {self.invalid_count} of {len(self.checks)} account ID(s) are invalid"
            )
        else:
            logger.info(f"✓ All {len(self.checks)} account ID(s) are valid")


def check_accounts(
    account_ids: Iterable[str],
    config: Optional[CheckerConfig] = None
) -> CheckReport:
    """
    Check a batch of candidate account IDs.

    Surrounding whitespace is stripped from each candidate. Comment lines,
    and blank lines if configured, are skipped.

    Args:
        account_ids: Candidate account IDs, e.g. lines of a file.
        config: Optional configuration; uses default if not provided.

    Returns:
        CheckReport with one entry per checked account ID.
    """
    if config is None:
        from .config import default_config
        config = default_config

    logger.info("Checking account IDs")

    report = CheckReport()
    skipped = 0

    for raw in account_ids:
        candidate = raw.strip()

        if config.is_ignorable(candidate):
            skipped += 1
            continue

        valid = is_valid(candidate)
        logger.debug(f"{candidate}: {'valid' if valid else 'invalid'}")
        report.add(candidate, valid)

    logger.info(f"Checked {len(report.checks)} account ID(s), skipped {skipped} line(s)")

    return report


def read_account_ids(path: Path) -> list[str]:
    """
    Read candidate account IDs from a text file, one per line.

    Lines are returned unfiltered; check_accounts() applies the
    comment and blank-line rules.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        List of lines without line terminators.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    logger.info(f"Reading account IDs from {path}")

    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
