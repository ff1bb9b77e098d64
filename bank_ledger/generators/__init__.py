"""Synthetic data generators."""

from bank_ledger.generators.account import AccountGenerator, BankGenerator
from bank_ledger.generators.base import BaseGenerator

__all__ = ["AccountGenerator", "BankGenerator", "BaseGenerator"]
