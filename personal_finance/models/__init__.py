"""
Data Models Package

This package contains all Pydantic models used in the Personal Finance tool.
Ledger records are frozen: once built they never change.
"""

from personal_finance.models.transaction import (
    TRANSACTION_LABELS,
    Transaction,
    TransactionKind,
)
from personal_finance.models.investment import (
    DEFAULT_RATES,
    INVESTMENT_LABELS,
    MATURITY_FORMULAS,
    FixedDeposit,
    InterestRates,
    Investment,
    InvestmentKind,
    RecurringContribution,
    maturity_value,
)
from personal_finance.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "TRANSACTION_LABELS",
    "Transaction",
    "TransactionKind",
    # Investment models
    "DEFAULT_RATES",
    "INVESTMENT_LABELS",
    "MATURITY_FORMULAS",
    "FixedDeposit",
    "InterestRates",
    "Investment",
    "InvestmentKind",
    "RecurringContribution",
    "maturity_value",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
