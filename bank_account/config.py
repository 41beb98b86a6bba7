"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .periods import Period


class BankAccountConfig(BaseSettings):
    """Bank account ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Clock configuration
    timezone: Optional[str] = None  # IANA zone for "today"; system local date if unset

    # Statement configuration
    default_statement_period: str = "P1M"  # ISO 8601 date-based period

    # Feature flags
    enable_events: bool = True

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "text"):
            raise ValueError(f"Log format must be 'json' or 'text', got '{value}'")
        return fmt

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone '{value}'")
        return value

    @field_validator("default_statement_period")
    @classmethod
    def _check_statement_period(cls, value: str) -> str:
        period = Period.parse(value)
        if period.is_negative():
            raise ValueError("Default statement period cannot be negative")
        return value

    @property
    def statement_period(self) -> Period:
        """Default statement period as a Period"""
        return Period.parse(self.default_statement_period)


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
