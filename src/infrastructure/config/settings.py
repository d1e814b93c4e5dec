from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[3] / ".env"  # noqa: E402
load_dotenv(dotenv_path=ENV_PATH)  # noqa: E402

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List, Literal


SQLITE_PREFIXES = ("sqlite://", "sqlite+aiosqlite://")
POSTGRES_PREFIXES = (
    "postgresql://",
    "postgresql+asyncpg://",
    "postgresql+psycopg://",
)


class Settings(BaseSettings):
    # ============= DATABASE =============
    db_url: str = Field(
        default="sqlite+aiosqlite:///./trades.db",
        description="Database connection URL (SQLite file by default)"
    )
    db_pool_size: int = Field(
        default=5,
        ge=1,
        le=50
    )
    db_max_overflow: int = Field(
        default=10,
        ge=0,
        le=100
    )
    db_pool_timeout: int = Field(
        default=30,
        ge=1
    )
    db_pool_recycle: int = Field(
        default=3600,
        description="Recycle connections after N seconds"
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements"
    )
    seed_on_create: bool = Field(
        default=True,
        description="Insert the demo trade when the Trades table is created"
    )

    # ============= APPLICATION =============
    app_name: str = Field(default="Commodity Trades API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # ============= API =============
    api_prefix: str = Field(default="/api")

    # ============= LOGGING =============
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # ============= CORS =============
    cors_origins: str = Field(default="*")
    cors_allow_credentials: bool = Field(default=False)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        validate_default=True,
        env_prefix="",
    )

    # ============= COMPUTED PROPERTIES =============
    @property
    def async_database_url(self) -> str:
        if self.db_url.startswith("postgresql://"):
            return self.db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif self.db_url.startswith("postgresql+psycopg://"):
            return self.db_url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
        elif self.db_url.startswith("sqlite://"):
            return self.db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return self.db_url

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    # ============= VALIDATORS =============
    @field_validator("db_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Database URL cannot be empty")
        if not v.startswith(SQLITE_PREFIXES + POSTGRES_PREFIXES):
            raise ValueError(
                "Database URL must be a valid SQLite or PostgreSQL URL")
        return v

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("API prefix must start with '/'")
        return v.rstrip("/")

    def get_logging_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": self.log_format
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": self.log_level,
                }
            },
            "root": {
                "level": self.log_level,
                "handlers": ["console"]
            },
            "loggers": {
                "uvicorn": {
                    "level": self.log_level,
                    "handlers": ["console"],
                    "propagate": False
                },
                "sqlalchemy": {
                    "level": "WARNING" if not self.db_echo else "INFO",
                    "handlers": ["console"],
                    "propagate": False
                },
                "sqlalchemy.engine": {
                    "level": "INFO" if self.db_echo else "WARNING",
                    "handlers": ["console"],
                    "propagate": False
                }
            }
        }

