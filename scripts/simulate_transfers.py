#!/usr/bin/env python3
"""Simulate random transfers inside a generated bank.

Generates a bank with synthetic accounts, performs random transfers between
them and prints a JSON snapshot of the final state. Transfers the source
account cannot cover are rejected and counted, not fatal.

Usage::

    python scripts/simulate_transfers.py --accounts 5 --transfers 20 --seed 42
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import LOG_FORMATS, LedgerConfig
from bank_ledger.exceptions import ConfigurationError, InsufficientFundsError
from bank_ledger.generators import BankGenerator
from bank_ledger.logging import setup_logging_from_config
from bank_ledger.models import Bank
from bank_ledger.serialization import bank_to_dict

logger = logging.getLogger(__name__)


def run_transfers(bank: Bank, num_transfers: int, generator: BankGenerator) -> dict[str, int]:
    """Perform random transfers between distinct registered accounts.

    Parameters
    ----------
    bank : Bank
        Bank whose accounts take part.
    num_transfers : int
        Number of transfers to attempt.
    generator : BankGenerator
        Source of randomness, so a seeded run is reproducible.

    Returns
    -------
    dict[str, int]
        Counts of ``completed`` and ``rejected`` transfers.
    """
    counts = {"completed": 0, "rejected": 0}
    if len(bank.accounts) < 2:
        logger.warning("Need at least two accounts to transfer, have %d", len(bank.accounts))
        return counts

    amounts = generator.accounts
    for _ in range(num_transfers):
        source, target = generator.rng.sample(bank.accounts, 2)
        amount = amounts.generate_amount(maximum=5000, scale=2)
        try:
            bank.transfer(source, target, amount)
        except InsufficientFundsError:
            counts["rejected"] += 1
        else:
            counts["completed"] += 1
    return counts


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Simulate transfers between bank accounts")
    parser.add_argument("--accounts", type=int, default=5, help="Number of accounts (default: 5)")
    parser.add_argument("--transfers", type=int, default=10, help="Number of transfers (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: SEED env)")
    parser.add_argument("--bank-name", default=None, help="Bank name (default: LEDGER_BANK_NAME env)")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL env)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=None, help="Log format")
    args = parser.parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.seed is not None:
        config.seed = args.seed
    if args.bank_name:
        config.default_bank_name = args.bank_name
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    setup_logging_from_config(config)

    generator = BankGenerator(seed=config.seed, locale=config.locale)
    bank = generator.generate(args.accounts, name=config.default_bank_name)
    counts = run_transfers(bank, args.transfers, generator)

    logger.info("Completed %d transfers, rejected %d", counts["completed"], counts["rejected"])
    print(json.dumps({**bank_to_dict(bank), "transfers": counts}, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
