"""
Account Balance and the Minimum-Balance Guard

CRITICAL: After any expenditure or investment the balance must stay at or
above the minimum balance. Income is never limited.

The guard is checked BEFORE anything changes. A refused withdrawal leaves
the balance exactly as it was.

Balances use the default 28-digit Decimal context. The console only accepts
amounts up to orchestrator.MAX_AMOUNT with at most two decimal places, so
every sum a session can reach is held exactly.
"""

from decimal import Decimal


MINIMUM_BALANCE = Decimal("1000")


class MinimumBalanceError(Exception):
    """A withdrawal would take the balance below the minimum."""

    def __init__(self, balance: Decimal, amount: Decimal, minimum_balance: Decimal):
        self.balance = balance
        self.amount = amount
        self.minimum_balance = minimum_balance
        super().__init__(
            f"Withdrawing {amount} from {balance} would leave the balance "
            f"below {minimum_balance}"
        )


class Account:
    """The running balance of the single user."""

    def __init__(
        self,
        balance: Decimal,
        minimum_balance: Decimal = MINIMUM_BALANCE,
        currency: str = "INR",
    ):
        self._balance = Decimal(balance)
        self.minimum_balance = Decimal(minimum_balance)
        self.currency = currency

    @property
    def balance(self) -> Decimal:
        return self._balance

    def can_withdraw(self, amount: Decimal) -> bool:
        return self._balance - amount >= self.minimum_balance

    def ensure_can_withdraw(self, amount: Decimal) -> None:
        """
        Raises:
            MinimumBalanceError: If withdrawing `amount` would breach the floor
        """
        if not self.can_withdraw(amount):
            raise MinimumBalanceError(self._balance, amount, self.minimum_balance)

    def deposit(self, amount: Decimal) -> Decimal:
        self._balance += amount
        return self._balance

    def withdraw(self, amount: Decimal) -> Decimal:
        self.ensure_can_withdraw(amount)
        self._balance -= amount
        return self._balance
