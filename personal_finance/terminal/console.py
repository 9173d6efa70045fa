"""Console-backed terminal using input() and print()."""

from personal_finance.terminal.interface import TerminalIO


class ConsoleTerminal(TerminalIO):
    """Reads from stdin and writes to stdout."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def write_line(self, text: str = "") -> None:
        print(text)
