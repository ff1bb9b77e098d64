"""Bank model: an ordered registry of accounts that performs transfers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from bank_ledger import money
from bank_ledger.models.account import Account

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Bank:
    """Bank associating a name with the accounts registered to it.

    A bank starts with no accounts; ``accounts`` is the live, insertion-ordered
    list filled by :meth:`add_account`. Registering the same
    account twice yields two entries. Banks compare by identity.
    """

    name: str = ""
    accounts: list[Account] = field(default_factory=list, init=False)

    def add_account(self, account: Account) -> None:
        """Register ``account`` and point its back-reference at this bank."""
        self.accounts.append(account)
        account.attach(self)
        logger.debug("Registered account of %s with %s", account.owner, self.name or "<unnamed bank>")

    def transfer(
        self,
        source: Account,
        target: Account,
        amount: Decimal | int | str,
    ) -> None:
        """Move ``amount`` from ``source`` to ``target``.

        The debit runs first. When it raises ``InsufficientFundsError`` the
        credit never runs and neither balance changes.

        Parameters
        ----------
        source : Account
            Account to debit.
        target : Account
            Account to credit.
        amount : Decimal | int | str
            Amount to move.

        Raises
        ------
        InsufficientFundsError
            If ``source`` cannot cover ``amount``.
        ValueError
            If ``amount`` is negative.
        """
        amount = money.to_amount(amount)
        source.debit(amount)
        target.credit(amount)
        logger.info(
            "Transferred %s from %s to %s",
            money.to_plain_string(amount),
            source.owner,
            target.owner,
            extra={
                "extra": {
                    "source": source.owner,
                    "target": target.owner,
                    "amount": money.to_plain_string(amount),
                }
            },
        )

    # Query methods
    def find_account(self, owner: str) -> Account | None:
        """Return the first registered account held by ``owner``."""
        return next((a for a in self.accounts if a.owner == owner), None)

    def total_balance(self) -> Decimal:
        """Exact sum of all registered balances."""
        total = money.ZERO
        for account in self.accounts:
            total = money.add(total, account.balance)
        return total
