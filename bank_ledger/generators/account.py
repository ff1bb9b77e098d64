"""Account and bank generators for data-driven scenarios."""

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Iterator

from bank_ledger import money
from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Account, Bank

logger = logging.getLogger(__name__)


class AccountGenerator(BaseGenerator):
    """Generate accounts with Faker owner names and exact random balances."""

    def generate(
        self,
        owner: str | None = None,
        min_balance: Decimal | int | str = 0,
        max_balance: Decimal | int | str = 10000,
        scale: int = 4,
    ) -> Account:
        """Generate a single account.

        Parameters
        ----------
        owner : str | None
            Owner name; a Faker person name when omitted.
        min_balance, max_balance : Decimal | int | str
            Inclusive balance range.
        scale : int
            Number of decimal places in the generated balance.

        Returns
        -------
        Account
            Generated account, not registered with any bank.
        """
        balance = self.generate_amount(min_balance, max_balance, scale)
        return Account(owner=owner or self.fake.name(), balance=balance)

    def generate_amount(
        self,
        minimum: Decimal | int | str = 0,
        maximum: Decimal | int | str = 10000,
        scale: int = 2,
    ) -> Decimal:
        """Draw an exact amount in ``[minimum, maximum]`` with ``scale`` places."""
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        low = money.to_decimal(minimum)
        high = money.to_decimal(maximum)
        if low > high:
            raise ValueError(f"minimum {low} exceeds maximum {high}")

        # Draw an integer number of the smallest units, then scale it back.
        # Shifting the exponent in the exact context keeps wide bounds unrounded.
        low_units = int(low.scaleb(scale, context=money.EXACT_CONTEXT).to_integral_value(rounding=ROUND_CEILING))
        high_units = int(high.scaleb(scale, context=money.EXACT_CONTEXT).to_integral_value(rounding=ROUND_FLOOR))
        if low_units > high_units:
            raise ValueError(f"No amount with {scale} decimal places lies in [{low}, {high}]")
        units = Decimal(self.rng.randint(low_units, high_units))
        return units.scaleb(-scale, context=money.EXACT_CONTEXT)

    def generate_batch(self, n: int, **kwargs) -> Iterator[Account]:
        """Generate ``n`` accounts, forwarding ``kwargs`` to :meth:`generate`."""
        for _ in range(n):
            yield self.generate(**kwargs)


class BankGenerator(BaseGenerator):
    """Generate a bank populated with registered accounts."""

    def __init__(self, seed: int | None = None, locale: str = "es_MX") -> None:
        super().__init__(seed, locale)
        self.accounts = AccountGenerator(seed, locale)

    def generate(self, num_accounts: int, name: str | None = None, **kwargs) -> Bank:
        """Generate a bank with ``num_accounts`` registered accounts."""
        bank = Bank(name=name or self.fake.company())
        for account in self.accounts.generate_batch(num_accounts, **kwargs):
            bank.add_account(account)
        logger.info("Generated bank %s with %d accounts", bank.name, num_accounts)
        return bank
