"""JSON-ready snapshots of accounts and banks."""

from decimal import Decimal
from typing import Any

from bank_ledger import money
from bank_ledger.models import Account, Bank


def to_dict(obj: Any) -> dict:
    """Convert a ledger object to a dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, Bank):
        return bank_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def account_to_dict(account: Account) -> dict:
    """Snapshot an account; the bank is referenced by name only."""
    bank = account.bank
    return {
        "owner": account.owner,
        "balance": serialize_value(account.balance),
        "bank": bank.name if bank is not None else None,
    }


def bank_to_dict(bank: Bank) -> dict:
    """Snapshot a bank with its accounts in registration order."""
    return {
        "name": bank.name,
        "accounts": [account_to_dict(a) for a in bank.accounts],
        "total_balance": serialize_value(bank.total_balance()),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Decimals become plain strings so that no precision is lost and no
    exponent notation leaks into the output.
    """
    if isinstance(value, Decimal):
        return money.to_plain_string(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
