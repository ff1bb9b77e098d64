"""Tests for the Bank model: registration, lookup and transfers."""

import gc
import logging
from decimal import Decimal

import pytest

from bank_ledger.exceptions import InsufficientFundsError
from bank_ledger.models import Account, Bank

pytestmark = pytest.mark.bank


class TestBankConstruction:
    """Tests for creating banks."""

    def test_defaults(self) -> None:
        bank = Bank()
        assert bank.name == ""
        assert bank.accounts == []

    def test_name_is_mutable(self) -> None:
        bank = Bank()
        bank.name = "Banco del Estado"
        assert bank.name == "Banco del Estado"

    def test_accounts_not_shared_between_banks(self) -> None:
        first = Bank()
        second = Bank()
        first.add_account(Account("Leonel", "1"))

        assert len(second.accounts) == 0

    def test_identity_equality(self) -> None:
        assert Bank(name="A") != Bank(name="A")

    def test_accounts_not_a_constructor_argument(self, leonel: Account) -> None:
        """Test accounts can only join through add_account, which sets the back-reference."""
        with pytest.raises(TypeError):
            Bank(name="Banco del Estado", accounts=[leonel])
        assert leonel.bank is None


class TestAddAccount:
    """Tests for Bank.add_account."""

    def test_add_account_sets_back_reference(self, bank: Bank, leonel: Account) -> None:
        bank.add_account(leonel)

        assert leonel.bank is bank
        assert leonel.bank.name == "Banco del Estado"

    def test_preserves_insertion_order(self, bank: Bank, leonel: Account, kevin: Account) -> None:
        bank.add_account(leonel)
        bank.add_account(kevin)

        assert [a.owner for a in bank.accounts] == ["Leonel", "Kevin"]

    def test_duplicate_registration_not_deduplicated(self, bank: Bank, leonel: Account) -> None:
        bank.add_account(leonel)
        bank.add_account(leonel)

        assert len(bank.accounts) == 2
        assert bank.accounts[0] is bank.accounts[1]

    def test_equal_accounts_both_kept(self, bank: Bank) -> None:
        bank.add_account(Account("Leonel", "10"))
        bank.add_account(Account("Leonel", "10"))

        assert len(bank.accounts) == 2

    def test_reregistration_moves_back_reference(self, bank: Bank, leonel: Account) -> None:
        other = Bank(name="Banco Azteca")
        bank.add_account(leonel)
        other.add_account(leonel)

        assert leonel.bank is other

    def test_back_reference_does_not_keep_bank_alive(self, leonel: Account) -> None:
        """Test the account does not own its bank."""
        bank = Bank(name="Temporal")
        bank.add_account(leonel)
        del bank
        gc.collect()

        assert leonel.bank is None


class TestFindAccount:
    """Tests for owner lookup."""

    def test_find_existing(self, bank: Bank, leonel: Account, kevin: Account) -> None:
        bank.add_account(leonel)
        bank.add_account(kevin)

        assert bank.find_account("Kevin") is kevin

    def test_find_missing(self, bank: Bank, leonel: Account) -> None:
        bank.add_account(leonel)
        assert bank.find_account("Eduardo") is None

    def test_find_returns_first_match(self, bank: Bank) -> None:
        first = Account("Leonel", "1")
        second = Account("Leonel", "2")
        bank.add_account(first)
        bank.add_account(second)

        assert bank.find_account("Leonel") is first


class TestTransfer:
    """Tests for Bank.transfer."""

    def test_transfer(self, bank: Bank, leonel: Account, kevin: Account) -> None:
        """Test a transfer between accounts not registered with the bank."""
        bank.transfer(kevin, leonel, Decimal(500))

        assert format(kevin.balance, "f") == "1000.8989"
        assert format(leonel.balance, "f") == "3000"

    def test_transfer_accepts_string_amount(self, bank: Bank, leonel: Account, kevin: Account) -> None:
        bank.transfer(kevin, leonel, "0.8989")

        assert format(kevin.balance, "f") == "1500.0000"
        assert format(leonel.balance, "f") == "2500.8989"

    def test_transfer_whole_balance(self, bank: Bank, leonel: Account, kevin: Account) -> None:
        bank.transfer(kevin, leonel, kevin.balance)

        assert kevin.balance == 0
        assert leonel.balance == Decimal("4000.8989")

    def test_insufficient_funds_leaves_both_balances(
        self, bank: Bank, leonel: Account, kevin: Account
    ) -> None:
        """Test a failed debit never reaches the credit."""
        with pytest.raises(InsufficientFundsError) as exc_info:
            bank.transfer(kevin, leonel, Decimal("1500.8990"))

        assert str(exc_info.value) == "Insufficient Funds"
        assert kevin.balance == Decimal("1500.8989")
        assert leonel.balance == Decimal("2500")

    def test_debit_runs_before_credit(self, bank: Bank) -> None:
        """Test the debit is attempted first, so the credit is skipped on failure."""
        calls: list[str] = []

        class RecordingAccount(Account):
            def debit(self, amount) -> None:
                calls.append("debit")
                super().debit(amount)

            def credit(self, amount) -> None:
                calls.append("credit")
                super().credit(amount)

        source = RecordingAccount("Kevin", "10")
        target = RecordingAccount("Leonel", "0")

        bank.transfer(source, target, 5)
        assert calls == ["debit", "credit"]

        calls.clear()
        with pytest.raises(InsufficientFundsError):
            bank.transfer(source, target, 50)
        assert calls == ["debit"]

    def test_transfer_to_same_account(self, bank: Bank, leonel: Account) -> None:
        bank.transfer(leonel, leonel, 100)
        assert leonel.balance == Decimal("2500")

    def test_transfer_is_logged(
        self, bank: Bank, leonel: Account, kevin: Account, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="bank_ledger"):
            bank.transfer(kevin, leonel, 500)

        assert "Transferred 500 from Kevin to Leonel" in caplog.text
        record = next(r for r in caplog.records if r.getMessage().startswith("Transferred"))
        assert record.extra == {"source": "Kevin", "target": "Leonel", "amount": "500"}

    def test_negative_amount_leaves_both_balances(
        self, bank: Bank, leonel: Account, kevin: Account
    ) -> None:
        with pytest.raises(ValueError):
            bank.transfer(kevin, leonel, "-500")

        assert kevin.balance == Decimal("1500.8989")
        assert leonel.balance == Decimal("2500")


class TestBankAccountRelationship:
    """Grouped assertions over a bank with two registered accounts."""

    @pytest.fixture
    def populated(self, bank: Bank, leonel: Account, kevin: Account) -> Bank:
        bank.add_account(leonel)
        bank.add_account(kevin)
        bank.transfer(kevin, leonel, Decimal(500))
        return bank

    def test_balances_after_transfer(self, populated: Bank, leonel: Account, kevin: Account) -> None:
        assert format(kevin.balance, "f") == "1000.8989", "Unexpected balance for Kevin"
        assert format(leonel.balance, "f") == "3000", "Unexpected balance for Leonel"

    def test_account_count(self, populated: Bank) -> None:
        assert len(populated.accounts) == 2, "The bank does not hold the expected accounts"

    def test_back_reference_name(self, populated: Bank, leonel: Account) -> None:
        assert leonel.bank.name == "Banco del Estado"

    def test_lookup_by_owner(self, populated: Bank) -> None:
        match = next(a for a in populated.accounts if a.owner == "Kevin")
        assert match.owner == "Kevin"

    def test_predicate_search(self, populated: Bank) -> None:
        assert any(a.owner == "Leonel" for a in populated.accounts)

    def test_total_balance_is_conserved(self, populated: Bank) -> None:
        assert populated.total_balance() == Decimal("4000.8989")


class TestTotalBalance:
    """Tests for Bank.total_balance."""

    def test_empty_bank(self, bank: Bank) -> None:
        assert bank.total_balance() == Decimal("0")

    def test_sum_is_exact(self, bank: Bank) -> None:
        bank.add_account(Account("a", "0.1"))
        bank.add_account(Account("b", "0.2"))

        assert format(bank.total_balance(), "f") == "0.3"
