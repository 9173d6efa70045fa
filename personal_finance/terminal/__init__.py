"""
Terminal I/O Package

Provides the line-oriented console contract used by the menu, and the
stdin/stdout implementation of it.
"""

from personal_finance.terminal.interface import InvalidNumberError, TerminalIO
from personal_finance.terminal.console import ConsoleTerminal

__all__ = [
    "ConsoleTerminal",
    "InvalidNumberError",
    "TerminalIO",
]
