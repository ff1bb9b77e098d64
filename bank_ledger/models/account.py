"""Account model for the ledger core."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from bank_ledger import money
from bank_ledger.exceptions import InsufficientFundsError

if TYPE_CHECKING:
    from bank_ledger.models.bank import Bank

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """Bank account holding an exact decimal balance.

    Two accounts are equal when their owners and balances are equal; the
    bank an account is registered with plays no part in equality. Accounts
    are mutable, so they are not hashable.

    ``balance`` accepts a ``Decimal``, an ``int`` or a decimal string and is
    stored as a ``Decimal`` with the scale it was given.
    """

    owner: str
    balance: Decimal
    _bank_ref: weakref.ReferenceType[Bank] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.balance = money.to_decimal(self.balance)

    @property
    def bank(self) -> Bank | None:
        """Bank this account is registered with, if it is still alive."""
        if self._bank_ref is None:
            return None
        return self._bank_ref()

    def attach(self, bank: Bank) -> None:
        """Point the back-reference at ``bank`` without taking ownership."""
        self._bank_ref = weakref.ref(bank)

    def debit(self, amount: Decimal | int | str) -> None:
        """Withdraw ``amount`` from the balance.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` is greater than the current balance. The balance
            is left untouched.
        ValueError
            If ``amount`` is negative.
        """
        amount = money.to_amount(amount)
        if self.balance < amount:
            logger.warning(
                "Debit of %s rejected for %s: balance %s",
                money.to_plain_string(amount),
                self.owner,
                money.to_plain_string(self.balance),
                extra={
                    "extra": {
                        "owner": self.owner,
                        "amount": money.to_plain_string(amount),
                        "balance": money.to_plain_string(self.balance),
                    }
                },
            )
            raise InsufficientFundsError()
        self.balance = money.subtract(self.balance, amount)
        logger.debug("Debited %s from %s", money.to_plain_string(amount), self.owner)

    def credit(self, amount: Decimal | int | str) -> None:
        """Deposit ``amount`` into the balance. Negative amounts raise ``ValueError``."""
        amount = money.to_amount(amount)
        self.balance = money.add(self.balance, amount)
        logger.debug("Credited %s to %s", money.to_plain_string(amount), self.owner)

    # Seeding helpers for data-driven scenarios
    def set_owner(self, owner: str) -> None:
        self.owner = owner

    def set_balance(self, value: Decimal | int | str) -> None:
        self.balance = money.to_decimal(value)
