"""
Database configuration for Catalog API.

Provides:
- Database initialization (init_database, init_db, close_db)
- Request-scoped async session management (get_db)
"""
import logging
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

logger = logging.getLogger("catalog-api.infrastructure.persistence.database")

# ==================== Database Configuration ====================

engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def to_async_url(database_url: str) -> str:
    """
    Convert a connection string to its async driver form.

    sqlite:/// -> sqlite+aiosqlite:///, postgresql:// -> postgresql+asyncpg://
    """
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def init_database(database_url: str) -> None:
    """
    Initialize database engine and session maker.

    Args:
        database_url: Connection string
    """
    global engine, async_session_maker

    # Ensure data directory exists for SQLite
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.replace("sqlite:///", "", 1)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async_db_url = to_async_url(database_url)

    engine = create_async_engine(
        async_db_url,
        echo=False,
        pool_pre_ping=True,
    )

    if "sqlite" in async_db_url:
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Set SQLite pragmas for better concurrency"""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds
            cursor.close()

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info(f"Database initialized: {engine.url.render_as_string(hide_password=True)}")


async def init_db() -> None:
    """Create tables"""
    if engine is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Close database connections"""
    global engine, async_session_maker

    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")
    engine = None
    async_session_maker = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting a request-scoped async database session.

    Nothing is committed here: the document session commits explicitly.
    Closing the session rolls back whatever was not committed, including
    work interrupted by request cancellation.

    Yields:
        AsyncSession: Database session
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with async_session_maker() as session:
        logger.debug("get_db(): session opened")
        try:
            yield session
        finally:
            logger.debug("get_db(): session closed")
