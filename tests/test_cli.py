"""Tests for the console entry point."""

import pytest

from personal_finance import cli
from personal_finance.config import get_settings


@pytest.fixture(autouse=True)
def quiet_session(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setattr(cli, "configure_logging", lambda *args: None)
    yield
    get_settings.cache_clear()


class TestMain:

    def test_clean_session_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "0")

        assert cli.main() == 0

        out = capsys.readouterr().out
        assert "Current Balance: 5000.00 INR" in out
        assert "Exiting. Goodbye!" in out

    def test_end_of_input_exits_zero(self, monkeypatch, capsys):
        def closed(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)

        assert cli.main() == 0
        assert "Exiting. Goodbye!" in capsys.readouterr().out

    def test_bad_settings_reported_without_traceback(self, monkeypatch, capsys):
        monkeypatch.setenv("FINANCE_INITIAL_BALANCE", "500")

        def unexpected(prompt):
            raise AssertionError("menu should not start")

        monkeypatch.setattr("builtins.input", unexpected)

        assert cli.main() == 0

        out = capsys.readouterr().out
        assert "Configuration error (account):" in out
        assert "cannot be below the minimum balance" in out
        assert "FINANCE MENU" not in out
