"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from timebill.adapters.configuration.config import Settings
from timebill.adapters.outbound.persistence.storage_provider import (
    MemoryStorageProvider,
    SqlStorageProvider,
    build_storage_provider,
)


class TestSettings:
    """Tests for Settings parsing."""

    def test_database_url_is_assembled(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(POSTGRES_USER="app", POSTGRES_PASSWORD="pw", POSTGRES_HOST="db", POSTGRES_DB="timebill")

        assert settings.DATABASE_URL == "postgresql+psycopg2://app:pw@db:5432/timebill"
        assert settings.async_database_url == "postgresql+asyncpg://app:pw@db:5432/timebill"
        assert settings.sync_database_url == settings.DATABASE_URL

    def test_explicit_database_url_wins(self):
        settings = Settings(DATABASE_URL="sqlite+aiosqlite:///./dev.db")

        assert settings.async_database_url == "sqlite+aiosqlite:///./dev.db"
        assert settings.sync_database_url == "sqlite:///./dev.db"

    def test_cors_origins_from_csv(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com")

        assert Settings().CORS_ORIGINS == ["http://a.com", "http://b.com"]

    def test_cors_origins_from_json(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://a.com"]')

        assert Settings().CORS_ORIGINS == ["http://a.com"]

    def test_invalid_storage_backend(self):
        with pytest.raises(ValidationError):
            Settings(STORAGE_BACKEND="redis")

    def test_log_level_is_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="loud")


class TestBuildStorageProvider:
    """Tests for backend selection."""

    def test_memory_backend(self):
        assert isinstance(build_storage_provider(Settings(STORAGE_BACKEND="memory")), MemoryStorageProvider)

    async def test_database_backend(self):
        provider = build_storage_provider(
            Settings(STORAGE_BACKEND="database", DATABASE_URL="sqlite+aiosqlite:///:memory:")
        )

        assert isinstance(provider, SqlStorageProvider)
        await provider.shutdown()
