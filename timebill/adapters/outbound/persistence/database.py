# timebill/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from timebill.adapters.configuration.config import Settings

# Configure logger
logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite only enforces foreign keys when asked to, per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    PostgreSQL gets a connection pool; SQLite (used by the test suite) shares a
    single connection so an in-memory database survives across sessions.
    """
    database_url = settings.async_database_url
    logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

    if database_url.startswith("sqlite"):
        engine = create_async_engine(
            database_url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        database_url,
        echo=settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )


@asynccontextmanager
async def get_db_context(
        session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    committing on success and rolling back on any error.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context(session_factory) as db:
            result = await db.execute(select(ClientModel))
            clients = result.scalars().all()
        ```
    """
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
