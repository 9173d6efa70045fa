"""
Main Orchestrator for Personal Finance

This module ties the account, ledger, audit log and terminal together and
runs the numbered console menu:

    1. Record Income
    2. Record Expenditure
    3. Make Investment
    4. View Transaction History
    5. View Investment Portfolio
    6. View Investment Projections
    0. Exit

DESIGN DECISION: The orchestrator enforces the boundaries:
- Every balance check happens before anything is mutated
- A refused or cancelled operation changes nothing
- Every outcome is shown to the user AND audited
- No rejection is fatal; control always returns to the menu
"""

from decimal import Decimal
from enum import IntEnum
from typing import Callable, Optional, Union

from personal_finance.account import Account, MinimumBalanceError
from personal_finance.audit import AuditLogger, AuditTrail
from personal_finance.config import Settings, get_settings
from personal_finance.ledger import Ledger
from personal_finance.models.investment import (
    DEFAULT_RATES,
    FixedDeposit,
    InterestRates,
    RecurringContribution,
)
from personal_finance.models.transaction import Transaction
from personal_finance.reporting import format_amount
from personal_finance.terminal import ConsoleTerminal, TerminalIO


ZERO = Decimal("0")

# Entered amounts are capped so balance arithmetic stays exact
MAX_AMOUNT = Decimal("1000000000000")
AMOUNT_PLACES = 2
MAX_DURATION_YEARS = 100


class MenuOption(IntEnum):
    EXIT = 0
    RECORD_INCOME = 1
    RECORD_EXPENDITURE = 2
    MAKE_INVESTMENT = 3
    VIEW_TRANSACTION_HISTORY = 4
    VIEW_INVESTMENT_PORTFOLIO = 5
    VIEW_INVESTMENT_PROJECTIONS = 6


MENU_TITLES: dict[MenuOption, str] = {
    MenuOption.RECORD_INCOME: "Record Income",
    MenuOption.RECORD_EXPENDITURE: "Record Expenditure",
    MenuOption.MAKE_INVESTMENT: "Make Investment",
    MenuOption.VIEW_TRANSACTION_HISTORY: "View Transaction History",
    MenuOption.VIEW_INVESTMENT_PORTFOLIO: "View Investment Portfolio",
    MenuOption.VIEW_INVESTMENT_PROJECTIONS: "View Investment Projections",
    MenuOption.EXIT: "Exit",
}


class InvestmentOption(IntEnum):
    BACK = 0
    RECURRING_CONTRIBUTION = 1
    FIXED_DEPOSIT = 2


INVESTMENT_OPTION_TITLES: dict[InvestmentOption, str] = {
    InvestmentOption.RECURRING_CONTRIBUTION: "Systematic Investment Plan (SIP)",
    InvestmentOption.FIXED_DEPOSIT: "Fixed Deposit (FD)",
    InvestmentOption.BACK: "Back to Main Menu",
}


class AccountController:
    """
    Runs the menu loop and performs every balance-changing operation.

    Recording operations return the record they created, or None when the
    operation was refused or cancelled, so they can be driven directly.
    """

    def __init__(
        self,
        terminal: TerminalIO,
        account: Account,
        ledger: Optional[Ledger] = None,
        audit_logger: Optional[AuditLogger] = None,
        rates: Optional[InterestRates] = None,
    ):
        self._terminal = terminal
        self._account = account
        self._ledger = ledger or Ledger()
        self._audit_logger = audit_logger or AuditLogger()
        self._rates = rates or DEFAULT_RATES

        self._actions: dict[MenuOption, Callable[[], object]] = {
            MenuOption.RECORD_INCOME: self.record_income,
            MenuOption.RECORD_EXPENDITURE: self.record_expenditure,
            MenuOption.MAKE_INVESTMENT: self.make_investment,
            MenuOption.VIEW_TRANSACTION_HISTORY: self.show_transaction_history,
            MenuOption.VIEW_INVESTMENT_PORTFOLIO: self.show_investment_portfolio,
            MenuOption.VIEW_INVESTMENT_PROJECTIONS: self.show_investment_projections,
        }
        self._investment_builders: dict[
            InvestmentOption,
            Callable[[Decimal, int], Union[RecurringContribution, FixedDeposit]],
        ] = {
            InvestmentOption.RECURRING_CONTRIBUTION: self._build_recurring_contribution,
            InvestmentOption.FIXED_DEPOSIT: self._build_fixed_deposit,
        }

    @property
    def account(self) -> Account:
        return self._account

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    # =========================================================================
    # MENU LOOP
    # =========================================================================

    def run(self) -> None:
        """
        Run the menu until the user exits.

        End of input (or Ctrl-C) ends the session the same way as choosing 0.
        """
        self._terminal.write_line("--- Welcome to your Personal Finance Management System! ---")
        self._audit_logger.log_session_started(self._account.balance, self._account.currency)

        try:
            while self.handle_choice(self._prompt_menu()):
                pass
        except (EOFError, KeyboardInterrupt):
            self._terminal.write_line()

        self._terminal.write_line("Exiting. Goodbye!")
        self._audit_logger.log_session_ended(self._account.balance)

    def handle_choice(self, choice: int) -> bool:
        """
        Perform one menu selection.

        Returns False when the user chose to exit, True otherwise.
        """
        if choice == MenuOption.EXIT:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._terminal.write_line("Invalid option. Please try again.")
            self._audit_logger.log_invalid_selection(menu="main", choice=choice)
            return True

        action()
        return True

    def _prompt_menu(self) -> int:
        self._terminal.write_line()
        self._terminal.write_line("========= FINANCE MENU =========")
        self._terminal.write_line(f"Current Balance: {self._money(self._account.balance)}")
        self._terminal.write_line("--------------------------------")
        for option in (*sorted(self._actions), MenuOption.EXIT):
            self._terminal.write_line(f"{option.value}. {MENU_TITLES[option]}")
        return self._terminal.read_integer("Enter choice: ")

    # =========================================================================
    # RECORDING OPERATIONS
    # =========================================================================

    def record_income(self) -> Transaction:
        """Income is never limited, so this always succeeds."""
        amount = self._read_amount("Enter income amount: ")
        description = self._terminal.read_line("Enter description (e.g., Salary): ")

        transaction = Transaction.income(amount, description)
        self._account.deposit(amount)
        self._ledger.add_transaction(transaction)

        self._terminal.write_line("Income recorded successfully.")
        self._audit_logger.log_transaction_recorded(transaction, self._account.balance)
        return transaction

    def record_expenditure(self) -> Optional[Transaction]:
        amount = self._read_amount("Enter expenditure amount: ")
        try:
            self._account.ensure_can_withdraw(amount)
        except MinimumBalanceError as e:
            self._decline("expenditure", e, "Error: Transaction declined.")
            return None

        description = self._terminal.read_line("Enter description (e.g., Groceries): ")

        transaction = Transaction.expenditure(amount, description)
        self._account.withdraw(amount)
        self._ledger.add_transaction(transaction)

        self._terminal.write_line("Expenditure recorded successfully.")
        self._audit_logger.log_transaction_recorded(transaction, self._account.balance)
        return transaction

    def make_investment(self) -> Optional[Union[RecurringContribution, FixedDeposit]]:
        """
        Commit part of the balance to a SIP or fixed deposit.

        The investment type is validated first, then the principal is
        checked against the minimum balance before the remaining details
        are asked for.
        """
        self._terminal.write_line()
        self._terminal.write_line("--- New Investment ---")
        for option in (*sorted(self._investment_builders), InvestmentOption.BACK):
            self._terminal.write_line(f"{option.value}. {INVESTMENT_OPTION_TITLES[option]}")
        choice = self._terminal.read_integer("Choose investment type: ")

        if choice == InvestmentOption.BACK:
            self._audit_logger.log_investment_cancelled()
            return None

        build = self._investment_builders.get(choice)
        if build is None:
            self._terminal.write_line("Invalid investment type.")
            self._audit_logger.log_invalid_selection(menu="investment", choice=choice)
            return None

        principal = self._read_amount("Enter principal amount to invest: ")
        try:
            self._account.ensure_can_withdraw(principal)
        except MinimumBalanceError as e:
            self._decline("investment", e, "Error: Investment failed.")
            return None

        duration = self._terminal.read_integer(
            "Enter duration in years: ", minimum=0, maximum=MAX_DURATION_YEARS
        )
        investment = build(principal, duration)

        self._ledger.add_investment(investment)
        self._account.withdraw(principal)

        self._terminal.write_line(f"{investment.label} investment made successfully.")
        self._audit_logger.log_investment_made(investment, self._account.balance)
        return investment

    def _build_recurring_contribution(
        self,
        principal: Decimal,
        duration: int,
    ) -> RecurringContribution:
        monthly = self._read_amount("Enter monthly investment amount: ")
        return RecurringContribution(
            principal=principal,
            duration_years=duration,
            monthly_contribution=monthly,
        )

    def _build_fixed_deposit(self, principal: Decimal, duration: int) -> FixedDeposit:
        return FixedDeposit(principal=principal, duration_years=duration)

    def _read_amount(self, prompt: str) -> Decimal:
        return self._terminal.read_decimal(
            prompt, minimum=ZERO, maximum=MAX_AMOUNT, places=AMOUNT_PLACES
        )

    def _decline(self, operation: str, error: MinimumBalanceError, headline: str) -> None:
        self._terminal.write_line(
            f"{headline} Balance cannot fall below {self._money(error.minimum_balance)}."
        )
        self._audit_logger.log_withdrawal_declined(
            operation=operation,
            amount=error.amount,
            balance=error.balance,
            minimum_balance=error.minimum_balance,
        )

    # =========================================================================
    # REPORTS
    # =========================================================================

    def show_transaction_history(self) -> None:
        self._write_block(self._ledger.render_transaction_history())
        self._audit_logger.log_report_viewed(
            "transaction_history", len(self._ledger.list_transactions())
        )

    def show_investment_portfolio(self) -> None:
        self._write_block(self._ledger.render_investment_portfolio())
        self._audit_logger.log_report_viewed(
            "investment_portfolio", len(self._ledger.list_investments())
        )

    def show_investment_projections(self) -> None:
        self._write_block(self._ledger.render_investment_projections(
            rates=self._rates,
            currency=self._account.currency,
        ))
        self._audit_logger.log_report_viewed(
            "investment_projections", len(self._ledger.list_investments())
        )

    def _write_block(self, text: str) -> None:
        for line in text.split("\n"):
            self._terminal.write_line(line)

    def _money(self, amount: Decimal) -> str:
        return f"{format_amount(amount)} {self._account.currency}"


def create_app_components(
    settings: Optional[Settings] = None,
    terminal: Optional[TerminalIO] = None,
) -> AccountController:
    """
    Factory function to create a ready-to-run controller.

    Args:
        settings: Settings to build from. Defaults to get_settings().
        terminal: Terminal to talk to. Defaults to the real console.

    Returns:
        AccountController with a fresh account, ledger and audit trail
    """
    settings = settings or get_settings()
    account_settings = settings.account

    account = Account(
        balance=account_settings.initial_balance,
        minimum_balance=account_settings.minimum_balance,
        currency=account_settings.currency,
    )

    return AccountController(
        terminal=terminal or ConsoleTerminal(),
        account=account,
        ledger=Ledger(),
        audit_logger=AuditLogger(AuditTrail()),
        rates=settings.interest_rates.rates,
    )
