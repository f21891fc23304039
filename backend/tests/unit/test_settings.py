"""
Unit tests for Pydantic Settings configuration.

Tests defaults and DATABASE_URL normalization.
"""

import pytest

from voice_admin.config.settings import Settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_has_defaults(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "Voice Admin"
        assert settings.environment in ("development", "production", "testing")
        assert settings.database_pool_size >= 1
        assert settings.database_url.startswith("postgresql+asyncpg://")

    def test_is_production_property(self):
        """is_production should follow the environment field."""
        assert Settings(_env_file=None, environment="production").is_production is True
        dev = Settings(_env_file=None, environment="development")
        assert dev.is_production is False
        assert dev.is_development is True

    def test_allowed_origins_includes_localhost(self):
        settings = Settings(_env_file=None)

        assert "http://localhost:5173" in settings.allowed_origins
        assert "http://localhost:3000" in settings.allowed_origins

    def test_rejects_unknown_environment(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, environment="staging")


class TestDatabaseUrlNormalization:
    """Plain driver URLs are rewritten to async drivers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("postgresql://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
            ("postgres://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
            ("postgresql+asyncpg://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
            ("sqlite://", "sqlite+aiosqlite://"),
            ("sqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert Settings(_env_file=None, database_url=raw).database_url == expected

    def test_env_variable_is_read(self, monkeypatch):
        """DATABASE_URL from the environment wins over the default."""
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite://"
        assert settings.is_sqlite is True
