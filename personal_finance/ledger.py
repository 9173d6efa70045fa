"""
Ledger

The ledger owns every transaction and investment recorded in a session.

GUARANTEES:
- Append-only: records are never edited or removed
- Insertion order is preserved within each collection
- Callers only ever get read-only views
"""

from collections.abc import Sequence
from typing import Generic, Optional, TypeVar, Union, overload

from personal_finance import reporting
from personal_finance.models.investment import (
    FixedDeposit,
    InterestRates,
    RecurringContribution,
)
from personal_finance.models.transaction import Transaction


T = TypeVar("T")

InvestmentRecord = Union[RecurringContribution, FixedDeposit]


class RecordView(Sequence, Generic[T]):
    """
    Read-only window onto one of the ledger's collections.

    The view is live: records appended after it was taken show up in it.
    It can be iterated any number of times.
    """

    def __init__(self, records: list[T]):
        self._records = records

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordView({self._records!r})"


class Ledger:
    """Append-only store of transactions and investments."""

    def __init__(self):
        self._transactions: list[Transaction] = []
        self._investments: list[InvestmentRecord] = []

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def add_investment(self, investment: InvestmentRecord) -> None:
        self._investments.append(investment)

    def list_transactions(self) -> RecordView[Transaction]:
        return RecordView(self._transactions)

    def list_investments(self) -> RecordView[InvestmentRecord]:
        return RecordView(self._investments)

    def render_transaction_history(self) -> str:
        return reporting.render_transaction_history(self._transactions)

    def render_investment_portfolio(self) -> str:
        return reporting.render_investment_portfolio(self._investments)

    def render_investment_projections(
        self,
        rates: Optional[InterestRates] = None,
        currency: str = "INR",
    ) -> str:
        return reporting.render_investment_projections(
            self._investments,
            rates=rates,
            currency=currency,
        )
