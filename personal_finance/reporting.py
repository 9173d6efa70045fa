"""
Console Reports

Formats ledger contents as fixed-width text tables.

Row layout differs by record kind, so each kind has a row renderer
registered in a dispatch table. A new transaction or investment kind needs
an entry here and a label in its model module, nothing else.
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException
from typing import Callable, Iterable, Optional

from personal_finance.models.investment import (
    FixedDeposit,
    InterestRates,
    InvestmentKind,
    RecurringContribution,
    maturity_value,
)
from personal_finance.models.transaction import Transaction, TransactionKind


TYPE_WIDTH = 15
AMOUNT_WIDTH = 10
DURATION_WIDTH = 15
TRANSACTION_RULE_WIDTH = 50
PORTFOLIO_RULE_WIDTH = 70

CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Two decimal places, half-up, the way a bank statement rounds."""
    return str(Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))


# =============================================================================
# ROW RENDERERS
# =============================================================================

def _transaction_row(transaction: Transaction) -> str:
    return (
        f"{transaction.label:<{TYPE_WIDTH}}"
        f"{format_amount(transaction.amount):>{AMOUNT_WIDTH}}"
        f"    {transaction.description}"
    )


TRANSACTION_ROW_RENDERERS: dict[TransactionKind, Callable[[Transaction], str]] = {
    TransactionKind.INCOME: _transaction_row,
    TransactionKind.EXPENDITURE: _transaction_row,
}


def _investment_columns(investment) -> str:
    return (
        f"{investment.label:<{TYPE_WIDTH}}"
        f"{format_amount(investment.principal):>{AMOUNT_WIDTH}}"
        f"{investment.duration_years:>{DURATION_WIDTH}} yrs"
    )


def _recurring_contribution_row(investment: RecurringContribution) -> str:
    return (
        f"{_investment_columns(investment)}"
        f"  (Monthly: {format_amount(investment.monthly_contribution)})"
    )


def _fixed_deposit_row(investment: FixedDeposit) -> str:
    return _investment_columns(investment)


INVESTMENT_ROW_RENDERERS: dict[InvestmentKind, Callable[..., str]] = {
    InvestmentKind.RECURRING_CONTRIBUTION: _recurring_contribution_row,
    InvestmentKind.FIXED_DEPOSIT: _fixed_deposit_row,
}


# =============================================================================
# REPORTS
# =============================================================================

def render_transaction_history(transactions: Iterable[Transaction]) -> str:
    lines = [
        "",
        "--- Transaction History ---",
        f"{'Type':<{TYPE_WIDTH}}{'Amount':>{AMOUNT_WIDTH}}    Description",
        "-" * TRANSACTION_RULE_WIDTH,
    ]
    rows = [TRANSACTION_ROW_RENDERERS[t.kind](t) for t in transactions]
    lines.extend(rows or ["No transactions recorded yet."])
    return "\n".join(lines)


def render_investment_portfolio(investments: Iterable) -> str:
    lines = [
        "",
        "--- Investment Portfolio ---",
        (
            f"{'Type':<{TYPE_WIDTH}}{'Principal':>{AMOUNT_WIDTH}}"
            f"{'Duration':>{DURATION_WIDTH}}  Details"
        ),
        "-" * PORTFOLIO_RULE_WIDTH,
    ]
    rows = [INVESTMENT_ROW_RENDERERS[i.kind](i) for i in investments]
    lines.extend(rows or ["No investments made yet."])
    return "\n".join(lines)


def _projected_amount(investment, rates: Optional[InterestRates], currency: str) -> str:
    # Decimal traps overflow, and cents cannot be shown past context precision
    try:
        return f"{format_amount(maturity_value(investment, rates))} {currency}"
    except DecimalException:
        return "too large to project"


def render_investment_projections(
    investments: Iterable,
    rates: Optional[InterestRates] = None,
    currency: str = "INR",
) -> str:
    lines = ["", "--- Investment Maturity Projections ---"]
    count = 0
    for index, investment in enumerate(investments, start=1):
        lines.append(f"Portfolio Item {index} ({investment.label}):")
        lines.append(f"  Matures to: {_projected_amount(investment, rates, currency)}")
        count = index
    if count == 0:
        lines.append("No investments made yet.")
    return "\n".join(lines)
