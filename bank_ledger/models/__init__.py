"""Domain models for the ledger core."""

from bank_ledger.models.account import Account
from bank_ledger.models.bank import Bank

__all__ = ["Account", "Bank"]
