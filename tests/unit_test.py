"""Unit tests that do not require a running API or external services."""
from app.config import settings
from app.database import build_database_url


def test_settings_load():
    """Settings load from environment (tests pin ENVIRONMENT=test)."""
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.APP_NAME == "School Dashboard"


def test_environment_flag():
    """Environment flags reflect ENVIRONMENT value."""
    assert settings.ENVIRONMENT.lower() in ("development", "test", "production")
    assert settings.is_development == (settings.ENVIRONMENT.lower() == "development")
    assert settings.is_production == (settings.ENVIRONMENT.lower() == "production")


def test_comma_separated_lists_are_parsed():
    assert isinstance(settings.ALLOWED_ORIGINS, list)
    assert "GET" in settings.ALLOWED_METHODS


def test_rate_limit_string():
    assert settings.rate_limit == f"{settings.RATE_LIMIT_PER_MINUTE}/minute"


def test_database_url_uses_async_drivers():
    assert build_database_url("postgresql://u:p@db/school") == "postgresql+asyncpg://u:p@db/school"
    assert build_database_url("sqlite:///./school.db") == "sqlite+aiosqlite:///./school.db"
    assert build_database_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"
