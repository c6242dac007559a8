"""PostgreSQL connection pool and session management."""

import logging
from collections.abc import Generator
from datetime import datetime
from functools import lru_cache
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from mayastory.core.config import get_settings
from mayastory.core.exceptions import StoreNotConfiguredError

logger = logging.getLogger(__name__)


@lru_cache
def get_engine() -> Engine:
    """Create the pooled engine on first use. Raises StoreNotConfiguredError without DATABASE_URL."""
    settings = get_settings()
    if not settings.database_configured:
        raise StoreNotConfiguredError()
    connect_args: dict[str, Any] = {}
    if settings.DATABASE_SSL_NO_VERIFY:
        logger.warning(
            "DATABASE_SSL_NO_VERIFY is enabled; TLS certificates are not verified",
            extra={"app_env": settings.APP_ENV},
        )
        connect_args["sslmode"] = "require"
    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=settings.DATABASE_POOL_SIZE,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


@lru_cache
def get_sessionmaker() -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def SessionLocal() -> Session:
    """Open a new session on the shared pool (for scripts and the request dependency)."""
    return get_sessionmaker()()


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def dispose_engine() -> None:
    """Close pooled connections if the engine was ever created."""
    if get_engine.cache_info().currsize == 0:
        return
    get_engine().dispose()
    get_sessionmaker.cache_clear()
    get_engine.cache_clear()
    logger.info("Database connection pool closed")


def fetch_store_time(db: Session) -> datetime:
    """Return the database server's current time. SQLAlchemy errors propagate."""
    return db.execute(text("SELECT NOW() AS current_time")).scalar_one()


def accounts_table_exists(db: Session) -> bool:
    return inspect(db.get_bind()).has_table("accounts")
