"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from bank_ledger.models import Account, Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account() -> Account:
    """Fresh account for each test, so mutations never leak between tests."""
    return Account("Leonel", Decimal("1000.12345"))


@pytest.fixture
def leonel() -> Account:
    """Receiving side of the transfer scenarios."""
    return Account("Leonel", Decimal("2500"))


@pytest.fixture
def kevin() -> Account:
    """Sending side of the transfer scenarios."""
    return Account("Kevin", Decimal("1500.8989"))


@pytest.fixture
def bank() -> Bank:
    """Empty bank."""
    return Bank(name="Banco del Estado")
