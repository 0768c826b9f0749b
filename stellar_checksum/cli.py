"""
Command-line interface for stellar-checksum.

Provides CLI commands for checking Stellar account IDs.
"""

import json
import logging
import sys
from pathlib import Path

import click

from . import __version__
from .checker import check_accounts, read_account_ids
from .config import CheckerConfig, setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="stellar-checksum")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (DEBUG level) logging."
)
@click.pass_context
def main(ctx, verbose):
    """
    stellar-checksum - Stellar account ID validation.

    Decodes Stellar public account IDs and verifies their embedded
    CRC16-XModem checksum.
    """
    # Set up logging
    setup_logging(verbose)

    # Store verbose flag in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    logger.debug(f"stellar-checksum version {__version__}")


@main.command()
@click.argument("account_ids", nargs=-1)
@click.option(
    "--file",
    "-f",
    "ids_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Text file with one account ID per line. Lines starting with '#' are ignored."
)
@click.option(
    "--format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)."
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress log messages, show only formatted output."
)
def check(account_ids, ids_file, format, quiet):
    """
    Check Stellar account IDs for a valid checksum.

    Account IDs are taken from the arguments and from --file, if given.
    Each one is decoded from Base32 and its CRC16-XModem checksum is
    compared with the checksum embedded in the ID.

    Returns exit code 0 if every account ID is valid,
    non-zero if any is invalid or no account ID was checked.
    """
    if not account_ids and ids_file is None:
        raise click.UsageError("Provide at least one ACCOUNT_ID or --file.")

    if quiet:
        logging.getLogger().setLevel(logging.CRITICAL)
        logging.getLogger("stellar_checksum").setLevel(logging.CRITICAL)
    else:
        logger.info("=== Stellar Account ID Check ===")

    try:
        candidates = list(account_ids)
        if ids_file is not None:
            candidates.extend(read_account_ids(ids_file))

        report = check_accounts(candidates, CheckerConfig())

        if format.lower() == "json":
            click.echo(json.dumps(report.to_dict(), indent=2))
        else:
            for account_check in report.checks:
                click.echo(str(account_check))
            click.echo(
                f"\n{report.valid_count} valid, {report.invalid_count} invalid"
            )

        if not quiet:
            report.log_summary()

        sys.exit(1 if report.has_invalid or not report.checks else 0)

    except OSError as e:
        if not quiet:
            logger.error(f"Cannot read account IDs: {e}")
        click.echo(f"ERROR: Cannot read account IDs: {e}")
        sys.exit(1)
    except Exception as e:
        if not quiet:
            logger.error(f"Error during account check: {e}", exc_info=True)
        click.echo(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
