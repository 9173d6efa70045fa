"""Audit logging package."""

from personal_finance.audit.logger import (
    AuditLogger,
    AuditTrail,
    configure_logging,
    create_correlation_id,
)

__all__ = ["AuditLogger", "AuditTrail", "configure_logging", "create_correlation_id"]
