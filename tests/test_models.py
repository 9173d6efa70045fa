"""
Tests for Personal Finance models

Test strategy:
1. Unit tests for the records and their constraints
2. Maturity formulas checked against the closed-form expressions
3. Audit events and their builders
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import TypeAdapter, ValidationError

from personal_finance.models import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    FixedDeposit,
    InterestRates,
    Investment,
    InvestmentKind,
    MATURITY_FORMULAS,
    RecurringContribution,
    Transaction,
    TransactionKind,
    maturity_value,
)


class TestTransactionModel:
    """Tests for the Transaction record."""

    def test_income_creation(self):
        """Test Transaction.income builds an income record."""
        t = Transaction.income(Decimal("2500.50"), "Salary")
        assert t.kind == TransactionKind.INCOME
        assert t.amount == Decimal("2500.50")
        assert t.description == "Salary"
        assert t.label == "Income"

    def test_expenditure_label(self):
        """Test expenditure records carry their own label."""
        t = Transaction.expenditure(Decimal("300"), "Groceries")
        assert t.kind == TransactionKind.EXPENDITURE
        assert t.label == "Expenditure"

    def test_description_may_be_empty(self):
        """Test that an empty description is accepted."""
        t = Transaction.income(Decimal("10"))
        assert t.description == ""

    def test_description_strips_whitespace(self):
        """Test that whitespace is stripped from the description."""
        t = Transaction.income(Decimal("10"), "  Bonus  ")
        assert t.description == "Bonus"

    def test_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction.expenditure(Decimal("-1"), "Refund?")

    def test_is_immutable(self):
        """Test that a recorded transaction cannot be edited."""
        t = Transaction.income(Decimal("100"), "Gift")
        with pytest.raises(ValidationError):
            t.amount = Decimal("1000")

    def test_each_record_has_unique_id(self):
        """Test that identical entries are still distinct records."""
        a = Transaction.income(Decimal("100"), "Gift")
        b = Transaction.income(Decimal("100"), "Gift")
        assert a.id != b.id


class TestInvestmentModels:
    """Tests for the investment variants."""

    def test_fixed_deposit_creation(self):
        fd = FixedDeposit(principal=Decimal("3000"), duration_years=2)
        assert fd.kind == InvestmentKind.FIXED_DEPOSIT
        assert fd.label == "Fixed Deposit"

    def test_recurring_contribution_creation(self):
        sip = RecurringContribution(
            principal=Decimal("1000"),
            duration_years=3,
            monthly_contribution=Decimal("500"),
        )
        assert sip.kind == InvestmentKind.RECURRING_CONTRIBUTION
        assert sip.label == "SIP"
        assert sip.monthly_contribution == Decimal("500")

    def test_rejects_negative_principal(self):
        with pytest.raises(ValidationError):
            FixedDeposit(principal=Decimal("-5"), duration_years=1)

    def test_rejects_negative_duration(self):
        with pytest.raises(ValidationError):
            FixedDeposit(principal=Decimal("5"), duration_years=-1)

    def test_rejects_negative_monthly_contribution(self):
        with pytest.raises(ValidationError):
            RecurringContribution(
                principal=Decimal("5"),
                duration_years=1,
                monthly_contribution=Decimal("-1"),
            )

    def test_discriminated_union_picks_variant(self):
        """Test that the kind tag selects the right model."""
        adapter = TypeAdapter(Investment)
        parsed = adapter.validate_python({
            "kind": InvestmentKind.RECURRING_CONTRIBUTION,
            "principal": "100",
            "duration_years": 1,
            "monthly_contribution": "10",
        })
        assert isinstance(parsed, RecurringContribution)

    def test_every_kind_has_a_formula(self):
        assert set(MATURITY_FORMULAS) == set(InvestmentKind)


class TestMaturityValue:
    """Tests for the maturity projections."""

    def test_fixed_deposit_compounds_annually(self):
        fd = FixedDeposit(principal=Decimal("1000"), duration_years=5)
        expected = Decimal("1000") * Decimal("1.071") ** 5
        assert maturity_value(fd) == expected
        assert round(maturity_value(fd), 2) == Decimal("1409.12")

    def test_fixed_deposit_two_years(self):
        fd = FixedDeposit(principal=Decimal("3000"), duration_years=2)
        assert maturity_value(fd) == Decimal("3441.123")

    def test_pure_annuity_when_principal_is_zero(self):
        sip = RecurringContribution(
            principal=Decimal("0"),
            duration_years=1,
            monthly_contribution=Decimal("1000"),
        )
        expected = Decimal("1000") * ((Decimal("1.008") ** 12 - 1) / Decimal("0.008"))
        assert maturity_value(sip) == expected

    def test_recurring_contribution_principal_growth(self):
        sip = RecurringContribution(
            principal=Decimal("1000"),
            duration_years=2,
            monthly_contribution=Decimal("0"),
        )
        assert maturity_value(sip) == Decimal("1000") * Decimal("1.008") ** 24

    def test_zero_duration_returns_principal(self):
        sip = RecurringContribution(
            principal=Decimal("1500"),
            duration_years=0,
            monthly_contribution=Decimal("100"),
        )
        fd = FixedDeposit(principal=Decimal("1500"), duration_years=0)
        assert maturity_value(sip) == Decimal("1500")
        assert maturity_value(fd) == Decimal("1500")

    def test_zero_rate_does_not_divide_by_zero(self):
        """Test that a 0% SIP just sums its contributions."""
        rates = InterestRates(recurring_contribution=Decimal("0"))
        sip = RecurringContribution(
            principal=Decimal("1000"),
            duration_years=2,
            monthly_contribution=Decimal("100"),
        )
        assert maturity_value(sip, rates) == Decimal("3400")

    def test_custom_fixed_deposit_rate(self):
        rates = InterestRates(fixed_deposit=Decimal("0.1"))
        fd = FixedDeposit(principal=Decimal("1000"), duration_years=2)
        assert maturity_value(fd, rates) == Decimal("1210")

    def test_rates_reject_negative_values(self):
        with pytest.raises(ValidationError):
            InterestRates(fixed_deposit=Decimal("-0.01"))


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_defaults(self):
        event = AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            description="Session started",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.is_user_action is False

    def test_audit_event_to_log_dict(self):
        event = AuditEvent(
            event_type=AuditEventType.INCOME_RECORDED,
            description="Income recorded",
            details={"amount": "100"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "income_recorded"
        assert log_dict["details"]["amount"] == "100"
        assert log_dict["entity_id"] is None

    def test_builder_transaction_recorded(self):
        correlation_id = uuid4()
        t = Transaction.expenditure(Decimal("250"), "Fuel")

        event = AuditEventBuilder.transaction_recorded(t, Decimal("4750"), correlation_id)

        assert event.event_type == AuditEventType.EXPENDITURE_RECORDED
        assert event.entity_id == t.id
        assert event.correlation_id == correlation_id
        assert event.details["balance_after"] == "4750"

    def test_builder_withdrawal_declined(self):
        event = AuditEventBuilder.withdrawal_declined(
            operation="investment",
            amount=Decimal("4500"),
            balance=Decimal("5000"),
            minimum_balance=Decimal("1000"),
            correlation_id=uuid4(),
        )
        assert event.event_type == AuditEventType.INVESTMENT_DECLINED
        assert event.severity == AuditSeverity.WARNING

    def test_builder_investment_made_includes_monthly(self):
        sip = RecurringContribution(
            principal=Decimal("100"),
            duration_years=1,
            monthly_contribution=Decimal("10"),
        )
        event = AuditEventBuilder.investment_made(sip, Decimal("4900"), uuid4())
        assert event.details["monthly_contribution"] == "10"
        assert event.details["kind"] == "recurring_contribution"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
