"""Console entry point: `personal-finance` or `python app/main.py`."""

from personal_finance.audit import configure_logging
from personal_finance.config import get_settings, validate_all_settings
from personal_finance.orchestrator import create_app_components
from personal_finance.terminal import ConsoleTerminal


SETTINGS_SECTIONS = ("account", "interest_rates", "app")


def main() -> int:
    """Run one interactive session. The exit code is always 0."""
    terminal = ConsoleTerminal()

    report = validate_all_settings()
    failed = [name for name in SETTINGS_SECTIONS if not report.get(name)]
    if failed:
        for name in failed:
            terminal.write_line(
                f"Configuration error ({name}): {report.get(f'{name}_error')}"
            )
        terminal.write_line("Fix the settings above and start again.")
        return 0

    settings = get_settings()
    app_settings = settings.app
    configure_logging(app_settings.effective_log_level, app_settings.log_file)

    controller = create_app_components(settings, terminal)
    controller.run()
    return 0
