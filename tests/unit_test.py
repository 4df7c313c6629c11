"""Unit tests that do not require a running API or external services."""
from gradebook.config import Settings, settings


def test_settings_load():
    """Settings load from environment (conftest points at a temp SQLite DB)."""
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.APP_NAME == "Gradebook Backend"
    assert settings.uses_sqlite


def test_environment_flag():
    assert settings.ENVIRONMENT.lower() in ("development", "test", "production")
    assert settings.is_development == (settings.ENVIRONMENT.lower() == "development")
    assert settings.is_production == (settings.ENVIRONMENT.lower() == "production")


def test_comma_separated_lists_are_parsed():
    custom = Settings(
        ALLOWED_ORIGINS="http://a.example.com, http://b.example.com,",
        ALLOWED_METHODS="GET, POST",
    )
    assert custom.ALLOWED_ORIGINS == ["http://a.example.com", "http://b.example.com"]
    assert custom.ALLOWED_METHODS == ["GET", "POST"]
