"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from sqlpostgis.settings import SpatialSettings, get_settings
from sqlpostgis.settings import _reload_settings


class TestSpatialSettings:
    """Defaults, environment overrides and validation."""

    def test_defaults(self):
        settings = SpatialSettings()
        assert settings.dialect == "postgresql"
        assert settings.auto_alias_columns is True
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SQLPOSTGIS_DIALECT", "sqlite")
        monkeypatch.setenv("sqlpostgis_auto_alias_columns", "0")
        monkeypatch.setenv("SQLPOSTGIS_LOG_LEVEL", "debug")
        settings = SpatialSettings()
        assert settings.dialect == "sqlite"
        assert settings.auto_alias_columns is False
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            SpatialSettings(log_level="LOUD")

    def test_empty_dialect(self):
        with pytest.raises(ValidationError):
            SpatialSettings(dialect="")


class TestGetSettings:
    """Singleton access."""

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        settings = get_settings()
        assert get_settings(force_reload=True) is not settings

    def test_reload_picks_up_environment(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("SQLPOSTGIS_LOG_LEVEL", "WARNING")
        assert _reload_settings().log_level == "WARNING"
