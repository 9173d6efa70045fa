"""
Transaction Models

A transaction is a single movement of money into or out of the account.
There is one model for both directions, tagged by `kind`.

DESIGN DECISION: Transactions are frozen once created.
The ledger is append-only, so nothing downstream may edit a record.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TransactionKind(str, Enum):
    """Direction of a money movement."""
    INCOME = "income"
    EXPENDITURE = "expenditure"


# Display label for each kind. Add a kind here and in the row renderers
# to introduce a new transaction category.
TRANSACTION_LABELS: dict[TransactionKind, str] = {
    TransactionKind.INCOME: "Income",
    TransactionKind.EXPENDITURE: "Expenditure",
}


class Transaction(BaseModel):
    """An income or expenditure entry in the ledger."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    # Identity
    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction ID"
    )
    recorded_at: datetime = Field(
        default_factory=utc_now,
        description="When the transaction was recorded (UTC)"
    )

    kind: TransactionKind = Field(
        ...,
        description="Income or expenditure"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount moved, in account currency"
    )
    description: str = Field(
        default="",
        description="Free-text note, e.g. 'Salary' or 'Groceries'"
    )

    @property
    def label(self) -> str:
        return TRANSACTION_LABELS[self.kind]

    @classmethod
    def income(cls, amount: Decimal, description: str = "") -> "Transaction":
        return cls(kind=TransactionKind.INCOME, amount=amount, description=description)

    @classmethod
    def expenditure(cls, amount: Decimal, description: str = "") -> "Transaction":
        return cls(kind=TransactionKind.EXPENDITURE, amount=amount, description=description)
