"""Tests for the account balance and its minimum-balance guard."""

from decimal import Decimal

import pytest

from personal_finance.account import Account, MinimumBalanceError
from personal_finance.orchestrator import MAX_AMOUNT


class TestAccount:
    """Tests for deposits and withdrawals."""

    def test_deposit_increases_balance(self):
        account = Account(Decimal("5000"))
        assert account.deposit(Decimal("250.75")) == Decimal("5250.75")
        assert account.balance == Decimal("5250.75")

    def test_deposit_has_no_upper_or_lower_check(self):
        account = Account(Decimal("1000"))
        account.deposit(Decimal("0"))
        assert account.balance == Decimal("1000")

    def test_withdraw_down_to_exactly_the_minimum(self):
        account = Account(Decimal("5000"))
        account.withdraw(Decimal("4000"))
        assert account.balance == Decimal("1000")

    def test_withdraw_below_minimum_is_refused(self):
        account = Account(Decimal("2000"))
        with pytest.raises(MinimumBalanceError) as exc_info:
            account.withdraw(Decimal("1500"))

        assert account.balance == Decimal("2000")
        assert exc_info.value.amount == Decimal("1500")
        assert exc_info.value.minimum_balance == Decimal("1000")

    def test_can_withdraw(self):
        account = Account(Decimal("5000"))
        assert account.can_withdraw(Decimal("4000")) is True
        assert account.can_withdraw(Decimal("4000.01")) is False

    def test_custom_minimum_balance(self):
        account = Account(Decimal("500"), minimum_balance=Decimal("0"))
        account.withdraw(Decimal("500"))
        assert account.balance == Decimal("0")

    def test_ensure_can_withdraw_does_not_mutate(self):
        account = Account(Decimal("5000"))
        account.ensure_can_withdraw(Decimal("100"))
        assert account.balance == Decimal("5000")

    def test_largest_accepted_amounts_stay_exact(self):
        largest = MAX_AMOUNT - Decimal("0.01")
        account = Account(Decimal("5000"))

        for _ in range(1000):
            account.deposit(largest)
        account.withdraw(largest)

        assert account.balance == Decimal("5000") + 999 * largest
