"""
Audit Logger

DESIGN DECISION: Every user action in a session is logged.
This provides:
1. Traceability of every balance change
2. A record of what was declined and why
3. Debugging capability

The audit logger:
- Writes every event to the structured log
- Optionally keeps an in-memory, append-only trail for the session
- Never lets a trail failure break the session
- Tags every event with the session's correlation ID
"""

import logging
from decimal import Decimal
from typing import Any, Callable, Optional, Union
from uuid import UUID, uuid4

import structlog

from personal_finance.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from personal_finance.models.investment import FixedDeposit, RecurringContribution
from personal_finance.models.transaction import Transaction


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "ERROR", log_file: Optional[str] = None) -> None:
    """
    Route stdlib logging (which structlog renders through) to stderr or a file.

    The console belongs to the menu, so by default only errors reach
    stderr. Routine audit events need LOG_LEVEL or LOG_FILE.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.ERROR),
        filename=log_file,
        format="%(message)s",
        force=True,
    )


class AuditTrail:
    """
    Append-only, in-memory record of a session's audit events.

    Nothing is persisted: the trail lives as long as the session.
    """

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append(self, event: AuditEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> tuple[AuditEvent, ...]:
        return tuple(self._events)

    def events_of_type(self, event_type: AuditEventType) -> list[AuditEvent]:
        return [e for e in self._events if e.event_type == event_type]

    def __len__(self) -> int:
        return len(self._events)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for the session's own history), if given
    """

    def __init__(
        self,
        trail: Optional[AuditTrail] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize audit logger.

        Args:
            trail: Trail to append events to.
                   If None, only logs locally.
            correlation_id: Session ID stamped on every event.
                            A fresh one is created if omitted.
        """
        self._trail = trail
        self._correlation_id = correlation_id or create_correlation_id()
        self._logger = structlog.get_logger()

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    @property
    def trail(self) -> Optional[AuditTrail]:
        return self._trail

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Appends to the trail if available.

        Returns True if the trail append succeeded (or no trail configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._trail is not None:
            try:
                self._trail.append(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_trail_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def _emit(self, build: Callable[..., AuditEvent], **fields: Any) -> bool:
        """
        Build an event for this session and log it.

        A failure to build the event is logged and reported as False.
        It never reaches the caller: by then the action has already happened.
        """
        try:
            event = build(correlation_id=self._correlation_id, **fields)
        except Exception as e:
            self._logger.error(
                "audit_event_failed",
                builder=build.__name__,
                error=str(e),
                correlation_id=str(self._correlation_id),
            )
            return False
        return self.log(event)

    def log_session_started(self, balance: Decimal, currency: str) -> None:
        self._emit(
            AuditEventBuilder.session_started,
            balance=balance,
            currency=currency,
        )

    def log_session_ended(self, balance: Decimal) -> None:
        self._emit(
            AuditEventBuilder.session_ended,
            balance=balance,
        )

    def log_transaction_recorded(self, transaction: Transaction, balance: Decimal) -> None:
        """Log a committed income or expenditure."""
        self._emit(
            AuditEventBuilder.transaction_recorded,
            transaction=transaction,
            balance=balance,
        )

    def log_withdrawal_declined(
        self,
        operation: str,
        amount: Decimal,
        balance: Decimal,
        minimum_balance: Decimal,
    ) -> None:
        """Log an expenditure or investment refused by the balance guard."""
        self._emit(
            AuditEventBuilder.withdrawal_declined,
            operation=operation,
            amount=amount,
            balance=balance,
            minimum_balance=minimum_balance,
        )

    def log_investment_made(
        self,
        investment: Union[RecurringContribution, FixedDeposit],
        balance: Decimal,
    ) -> None:
        self._emit(
            AuditEventBuilder.investment_made,
            investment=investment,
            balance=balance,
        )

    def log_investment_cancelled(self) -> None:
        self._emit(AuditEventBuilder.investment_cancelled)

    def log_invalid_selection(self, menu: str, choice: int) -> None:
        self._emit(
            AuditEventBuilder.invalid_selection,
            menu=menu,
            choice=choice,
        )

    def log_report_viewed(self, report: str, record_count: int) -> None:
        self._emit(
            AuditEventBuilder.report_viewed,
            report=report,
            record_count=record_count,
        )


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One is created per session; every event of that session carries it.
    """
    return uuid4()
