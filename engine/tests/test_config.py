"""
Tests for settings.
"""

import pytest
from pydantic import ValidationError

from asset_ledger.config import AppEnvironment, Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Settings should have safe defaults."""
        settings = Settings()
        assert settings.env == AppEnvironment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.is_production is False

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should be read from ASSET_LEDGER_ variables."""
        monkeypatch.setenv("ASSET_LEDGER_ENV", "production")
        monkeypatch.setenv("ASSET_LEDGER_LOG_LEVEL", "debug")
        monkeypatch.setenv("ASSET_LEDGER_LOG_JSON", "true")

        settings = Settings()

        assert settings.is_production is True
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_invalid_log_level(self) -> None:
        """Unknown log level should be rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_get_settings_cached(self) -> None:
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()

    def test_redacted_config(self) -> None:
        """Redacted config should expose only safe values."""
        config = Settings(log_level="warning").get_redacted_config()
        assert config == {"env": "development", "log_level": "WARNING", "log_json": False}
