import pytest
from pydantic import ValidationError

from src.infrastructure.config.settings import Settings


@pytest.mark.parametrize("db_url, expected", [
    ("sqlite:///./trades.db", "sqlite+aiosqlite:///./trades.db"),
    ("sqlite+aiosqlite:///./trades.db", "sqlite+aiosqlite:///./trades.db"),
    ("postgresql://u:p@localhost/trades", "postgresql+asyncpg://u:p@localhost/trades"),
    ("postgresql+psycopg://u:p@localhost/trades", "postgresql+asyncpg://u:p@localhost/trades"),
])
def test_async_database_url(db_url, expected):
    assert Settings(db_url=db_url).async_database_url == expected


@pytest.mark.parametrize("db_url", ["", "mysql://u:p@localhost/trades"])
def test_rejects_unsupported_database_url(db_url):
    with pytest.raises(ValidationError):
        Settings(db_url=db_url)


def test_cors_origin_list():
    settings = Settings(cors_origins="http://localhost:3000, http://localhost:8000")
    assert settings.cors_origin_list == ["http://localhost:3000", "http://localhost:8000"]


def test_api_prefix_drops_trailing_slash():
    assert Settings(api_prefix="/api/").api_prefix == "/api"
    with pytest.raises(ValidationError):
        Settings(api_prefix="api")


def test_logging_config_follows_db_echo():
    config = Settings(db_echo=True, log_level="DEBUG").get_logging_config()
    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "INFO"
