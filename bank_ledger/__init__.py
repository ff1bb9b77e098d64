"""Exact-decimal account ledger: accounts, banks and transfers."""

from bank_ledger.exceptions import InsufficientFundsError, LedgerError
from bank_ledger.models import Account, Bank

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Bank",
    "InsufficientFundsError",
    "LedgerError",
    "__version__",
]
