"""
Configuration Management for Personal Finance

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every value has a default, so the tool runs with no environment at all:
a 5000 INR opening balance, a 1000 INR floor, and the standard SIP and
fixed deposit rates.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from personal_finance.models.investment import InterestRates


class AccountSettings(BaseSettings):
    """Opening balance and the balance floor."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    initial_balance: Decimal = Field(
        default=Decimal("5000"),
        description="Balance at the start of a session"
    )
    minimum_balance: Decimal = Field(
        default=Decimal("1000"),
        ge=0,
        description="Expenditure and investments may not take the balance below this"
    )
    currency: str = Field(
        default="INR",
        min_length=1,
        max_length=10,
        description="Currency code shown next to every amount"
    )

    @model_validator(mode='after')
    def validate_opening_balance(self) -> 'AccountSettings':
        """The account must start at or above its own floor."""
        if self.initial_balance < self.minimum_balance:
            raise ValueError(
                f"Initial balance ({self.initial_balance}) cannot be below "
                f"the minimum balance ({self.minimum_balance})"
            )
        return self


class InterestRateSettings(BaseSettings):
    """Annual interest rates used for maturity projections."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_RATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    fixed_deposit: Decimal = Field(
        default=Decimal("0.071"),
        ge=0,
        description="Fixed deposit rate, compounded annually"
    )
    recurring_contribution: Decimal = Field(
        default=Decimal("0.096"),
        ge=0,
        description="SIP rate, compounded monthly"
    )

    @property
    def rates(self) -> InterestRates:
        return InterestRates(
            fixed_deposit=self.fixed_deposit,
            recurring_contribution=self.recurring_contribution,
        )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging)"
    )

    # Logging
    log_level: str = Field(
        default="ERROR",
        description="Level for the audit log"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Write logs to this file instead of stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.strip().upper()
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def account(self) -> AccountSettings:
        return AccountSettings()

    @property
    def interest_rates(self) -> InterestRateSettings:
        return InterestRateSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the sections that failed.
    """
    results = {}

    settings = get_settings()

    sections = {
        "account": lambda: settings.account,
        "interest_rates": lambda: settings.interest_rates,
        "app": lambda: settings.app,
    }

    for name, load in sections.items():
        try:
            load()
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
