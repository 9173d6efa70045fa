"""
Investment Models

Two kinds of investment are supported:
- RecurringContribution (an SIP): principal plus a fixed monthly top-up,
  compounded monthly.
- FixedDeposit: a lump sum compounded annually.

The kinds form a pydantic discriminated union on `kind`. Behaviour that
differs per kind (label, maturity formula) lives in dispatch tables keyed
by InvestmentKind, not in methods on the models.

DESIGN DECISION: Fixed deposits compound annually while SIPs compound
monthly. This asymmetry is kept deliberately so projections match what
users have been shown before.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Callable, Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from personal_finance.models.transaction import utc_now


MONTHS_PER_YEAR = 12


class InvestmentKind(str, Enum):
    """Supported investment instruments."""
    RECURRING_CONTRIBUTION = "recurring_contribution"
    FIXED_DEPOSIT = "fixed_deposit"


INVESTMENT_LABELS: dict[InvestmentKind, str] = {
    InvestmentKind.RECURRING_CONTRIBUTION: "SIP",
    InvestmentKind.FIXED_DEPOSIT: "Fixed Deposit",
}


class InterestRates(BaseModel):
    """Nominal annual rates per investment kind."""

    model_config = ConfigDict(frozen=True)

    fixed_deposit: Decimal = Field(
        default=Decimal("0.071"),
        ge=0,
        description="Annual rate, compounded annually"
    )
    recurring_contribution: Decimal = Field(
        default=Decimal("0.096"),
        ge=0,
        description="Annual rate, compounded monthly"
    )


DEFAULT_RATES = InterestRates()


class _InvestmentFields(BaseModel):
    """Fields shared by every investment kind."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique investment ID"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        description="When the investment was made (UTC)"
    )
    principal: Decimal = Field(
        ...,
        ge=0,
        description="Initial amount committed"
    )
    duration_years: int = Field(
        ...,
        ge=0,
        description="Term in whole years"
    )

    @property
    def label(self) -> str:
        return INVESTMENT_LABELS[self.kind]


class RecurringContribution(_InvestmentFields):
    """Systematic Investment Plan: principal plus monthly contributions."""

    kind: Literal[InvestmentKind.RECURRING_CONTRIBUTION] = InvestmentKind.RECURRING_CONTRIBUTION
    monthly_contribution: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Amount added every month"
    )


class FixedDeposit(_InvestmentFields):
    """Lump-sum deposit for a fixed term."""

    kind: Literal[InvestmentKind.FIXED_DEPOSIT] = InvestmentKind.FIXED_DEPOSIT


Investment = Annotated[
    Union[RecurringContribution, FixedDeposit],
    Field(discriminator="kind"),
]


# =============================================================================
# MATURITY FORMULAS
# =============================================================================

def _fixed_deposit_maturity(investment: FixedDeposit, rates: InterestRates) -> Decimal:
    return investment.principal * (1 + rates.fixed_deposit) ** investment.duration_years


def _recurring_contribution_maturity(
    investment: RecurringContribution,
    rates: InterestRates,
) -> Decimal:
    months = investment.duration_years * MONTHS_PER_YEAR
    monthly_rate = rates.recurring_contribution / MONTHS_PER_YEAR
    growth = (1 + monthly_rate) ** months

    principal_value = investment.principal * growth

    # Future value of an ordinary annuity; degenerates to a plain sum at 0%
    if monthly_rate == 0:
        contributions_value = investment.monthly_contribution * months
    else:
        contributions_value = investment.monthly_contribution * ((growth - 1) / monthly_rate)

    return principal_value + contributions_value


MATURITY_FORMULAS: dict[InvestmentKind, Callable[..., Decimal]] = {
    InvestmentKind.RECURRING_CONTRIBUTION: _recurring_contribution_maturity,
    InvestmentKind.FIXED_DEPOSIT: _fixed_deposit_maturity,
}


def maturity_value(
    investment: Union[RecurringContribution, FixedDeposit],
    rates: Optional[InterestRates] = None,
) -> Decimal:
    """
    Project what an investment will be worth at the end of its term.

    Args:
        investment: Any investment record
        rates: Rates to project with. Defaults to DEFAULT_RATES.

    Returns:
        Unrounded maturity value. Round only for display.
    """
    formula = MATURITY_FORMULAS[investment.kind]
    return formula(investment, rates or DEFAULT_RATES)
