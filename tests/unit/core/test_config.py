import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stationops.core.config import Settings, get_settings


def test_settings_env_override():
    """STATIONOPS_ variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "STATIONOPS_APP_NAME": "Sweet FM Ops",
        "STATIONOPS_ENVIRONMENT": "production",
        "STATIONOPS_INVITATION_EXPIRY_DAYS": "3",
        "STATIONOPS_APP_BASE_URL": "https://ops.sweetfmonline.com/",
    }):
        settings = Settings()

        assert settings.app_name == "Sweet FM Ops"
        assert settings.is_production is True
        assert settings.invitation_expiry_days == 3
        assert settings.app_base_url == "https://ops.sweetfmonline.com"


def test_unprefixed_variables_are_ignored():
    get_settings.cache_clear()

    with patch.dict(os.environ, {"APP_NAME": "Wrong", "PORT": "9999"}):
        settings = Settings()

        assert settings.app_name == "StationOps"
        assert settings.port == 8000


def test_cors_origins_parsing():
    """CORS origins accept a JSON list from the environment."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "STATIONOPS_CORS_ORIGINS": '["https://ops.sweetfmonline.com", "http://localhost:3000"]'
    }):
        settings = Settings()
        assert settings.cors_origins == ["https://ops.sweetfmonline.com", "http://localhost:3000"]

    assert Settings(cors_origins="https://a.example.com, https://b.example.com").cors_origins == [
        "https://a.example.com",
        "https://b.example.com",
    ]


def test_invitation_expiry_must_be_positive():
    with patch.dict(os.environ, {"STATIONOPS_INVITATION_EXPIRY_DAYS": "0"}):
        with pytest.raises(ValidationError):
            Settings()


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError, match="SQLite does not support multiple worker"):
        Settings(workers=2, database_url="sqlite+aiosqlite:///./data/stationops.db")

    settings = Settings(workers=2, database_url="postgresql+asyncpg://u:p@db/stationops")
    assert settings.database_url_sync == "postgresql://u:p@db/stationops"


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()
    get_settings.cache_clear()
