"""Shared fixtures: a scripted terminal and a controller wired to it."""

from collections import deque
from decimal import Decimal

import pytest

from personal_finance.account import Account
from personal_finance.audit import AuditLogger, AuditTrail
from personal_finance.ledger import Ledger
from personal_finance.orchestrator import AccountController
from personal_finance.terminal import TerminalIO


class ScriptedTerminal(TerminalIO):
    """Feeds canned input lines and records everything written."""

    def __init__(self, inputs=()):
        self.inputs = deque(str(i) for i in inputs)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *inputs) -> None:
        self.inputs.extend(str(i) for i in inputs)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError("scripted input exhausted")
        return self.inputs.popleft()

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def terminal():
    return ScriptedTerminal()


@pytest.fixture
def trail():
    return AuditTrail()


@pytest.fixture
def controller(terminal, trail):
    """Controller with the standard 5000 INR opening balance."""
    return AccountController(
        terminal=terminal,
        account=Account(Decimal("5000")),
        ledger=Ledger(),
        audit_logger=AuditLogger(trail),
    )
