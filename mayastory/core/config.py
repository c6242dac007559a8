"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

# SQLAlchemy 2 only knows the "postgresql" dialect name; hosted providers often hand out "postgres".
LEGACY_DATABASE_URL_SCHEMES = {
    "postgres://": "postgresql://",
    "postgres+psycopg2://": "postgresql+psycopg2://",
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Postgres: optional at startup so /health works without a store.
    # Store-backed routes report a distinct error while it is unset.
    DATABASE_URL: str | None = None
    # Encrypt the connection but skip certificate verification (sslmode=require).
    # Only for hosted databases behind proxies that present unverifiable certs.
    DATABASE_SSL_NO_VERIFY: bool = False
    DATABASE_POOL_SIZE: int = 5

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Bcrypt cost factor used when hashing new passwords.
    BCRYPT_ROUNDS: int = 12

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        url = v.strip()
        if not any(url.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL (e.g. postgresql:// or postgresql+psycopg2://)"
            )
        for legacy, current in LEGACY_DATABASE_URL_SCHEMES.items():
            if url.startswith(legacy):
                return current + url[len(legacy):]
        return url

    @field_validator("DATABASE_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v: int) -> int:
        if v < 1 or v > 100:
            raise ValueError("DATABASE_POOL_SIZE must be between 1 and 100")
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @property
    def database_configured(self) -> bool:
        return self.DATABASE_URL is not None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
