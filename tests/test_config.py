"""
Tests for configuration management
"""

import pytest
from pydantic import ValidationError

from bank_account import config as config_module
from bank_account.config import BankAccountConfig, get_config, reload_config
from bank_account.periods import Period


@pytest.fixture
def env(monkeypatch):
    """Environment patcher that restores the global configuration afterwards"""
    yield monkeypatch
    monkeypatch.undo()
    reload_config()


class TestBankAccountConfig:
    """Test settings defaults and environment overrides"""

    def test_defaults(self, env):
        """Test default values"""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "TIMEZONE",
                     "DEFAULT_STATEMENT_PERIOD", "ENABLE_EVENTS"):
            env.delenv(f"BANK_ACCOUNT_{name}", raising=False)

        settings = BankAccountConfig(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.timezone is None
        assert settings.enable_events is True
        assert settings.statement_period == Period.of_months(1)

    def test_environment_overrides(self, env):
        """Test values read from prefixed environment variables"""
        env.setenv("BANK_ACCOUNT_LOG_LEVEL", "debug")
        env.setenv("BANK_ACCOUNT_LOG_FORMAT", "TEXT")
        env.setenv("BANK_ACCOUNT_TIMEZONE", "Europe/Paris")
        env.setenv("BANK_ACCOUNT_DEFAULT_STATEMENT_PERIOD", "P2W")
        env.setenv("BANK_ACCOUNT_ENABLE_EVENTS", "false")

        settings = BankAccountConfig(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.timezone == "Europe/Paris"
        assert settings.statement_period == Period.of_days(14)
        assert settings.enable_events is False

    @pytest.mark.parametrize("name, value", [
        ("LOG_LEVEL", "LOUD"),
        ("LOG_FORMAT", "xml"),
        ("TIMEZONE", "Not/AZone"),
        ("TIMEZONE", "Europe"),
        ("DEFAULT_STATEMENT_PERIOD", "monthly"),
        ("DEFAULT_STATEMENT_PERIOD", "-P1M"),
    ])
    def test_invalid_values(self, env, name, value):
        """Test that invalid settings are rejected at load time"""
        env.setenv(f"BANK_ACCOUNT_{name}", value)

        with pytest.raises(ValidationError):
            BankAccountConfig(_env_file=None)

    def test_reload_replaces_global_instance(self, env):
        """Test that reloading picks up environment changes"""
        env.setenv("BANK_ACCOUNT_ENABLE_EVENTS", "false")

        reloaded = reload_config()

        assert get_config() is reloaded
        assert config_module.config is reloaded
        assert reloaded.enable_events is False
