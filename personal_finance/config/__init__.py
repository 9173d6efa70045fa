"""Configuration package."""

from personal_finance.config.settings import (
    AccountSettings,
    AppSettings,
    InterestRateSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AccountSettings",
    "AppSettings",
    "InterestRateSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
