"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class InsufficientFundsError(LedgerError):
    """Raised when a debit exceeds the account balance."""

    MESSAGE = "Insufficient Funds"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
