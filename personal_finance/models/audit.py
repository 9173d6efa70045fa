"""
Audit Models for Personal Finance

Every user action in a session is recorded as an audit event.
This provides:
1. Traceability of every balance change
2. A record of declined and cancelled operations
3. Debugging information when numbers look wrong

DESIGN DECISION: Audit trails are append-only. We never delete or modify events.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from personal_finance.models.investment import RecurringContribution, FixedDeposit
from personal_finance.models.transaction import Transaction, TransactionKind, utc_now


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Transactions
    INCOME_RECORDED = "income_recorded"
    EXPENDITURE_RECORDED = "expenditure_recorded"
    EXPENDITURE_DECLINED = "expenditure_declined"

    # Investments
    INVESTMENT_MADE = "investment_made"
    INVESTMENT_DECLINED = "investment_declined"
    INVESTMENT_CANCELLED = "investment_cancelled"

    # Menu
    INVALID_SELECTION = "invalid_selection"
    REPORT_VIEWED = "report_viewed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'investment')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - all events of one session share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID of the session the event belongs to"
    )

    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_recorded(transaction, balance, session_id)
        event = AuditEventBuilder.withdrawal_declined("expenditure", amount, balance, floor, session_id)
    """

    @staticmethod
    def session_started(
        balance: Decimal,
        currency: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description=f"Session started with balance {balance} {currency}",
            details={
                "balance": str(balance),
                "currency": currency,
            },
        )

    @staticmethod
    def session_ended(
        balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description=f"Session ended with balance {balance}",
            details={
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_recorded(
        transaction: Transaction,
        balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        event_type = (
            AuditEventType.INCOME_RECORDED
            if transaction.kind == TransactionKind.INCOME
            else AuditEventType.EXPENDITURE_RECORDED
        )
        return AuditEvent(
            event_type=event_type,
            entity_type="transaction",
            entity_id=transaction.id,
            correlation_id=correlation_id,
            description=f"{transaction.label} recorded: {transaction.amount}",
            details={
                "amount": str(transaction.amount),
                "description": transaction.description,
                "balance_after": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def withdrawal_declined(
        operation: str,
        amount: Decimal,
        balance: Decimal,
        minimum_balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        event_type = (
            AuditEventType.INVESTMENT_DECLINED
            if operation == "investment"
            else AuditEventType.EXPENDITURE_DECLINED
        )
        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=(
                f"{operation.capitalize()} of {amount} declined: "
                f"balance would fall below {minimum_balance}"
            ),
            details={
                "operation": operation,
                "amount": str(amount),
                "balance": str(balance),
                "minimum_balance": str(minimum_balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def investment_made(
        investment: Union[RecurringContribution, FixedDeposit],
        balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        details = {
            "kind": investment.kind.value,
            "principal": str(investment.principal),
            "duration_years": investment.duration_years,
            "balance_after": str(balance),
        }
        if isinstance(investment, RecurringContribution):
            details["monthly_contribution"] = str(investment.monthly_contribution)
        return AuditEvent(
            event_type=AuditEventType.INVESTMENT_MADE,
            entity_type="investment",
            entity_id=investment.id,
            correlation_id=correlation_id,
            description=f"{investment.label} investment made: {investment.principal}",
            details=details,
            is_user_action=True,
        )

    @staticmethod
    def investment_cancelled(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVESTMENT_CANCELLED,
            correlation_id=correlation_id,
            description="User went back from the investment menu",
            is_user_action=True,
        )

    @staticmethod
    def invalid_selection(
        menu: str,
        choice: int,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_SELECTION,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Invalid {menu} selection: {choice}",
            details={
                "menu": menu,
                "choice": choice,
            },
            is_user_action=True,
        )

    @staticmethod
    def report_viewed(
        report: str,
        record_count: int,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_VIEWED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Report viewed: {report} ({record_count} records)",
            details={
                "report": report,
                "record_count": record_count,
            },
            is_user_action=True,
        )
