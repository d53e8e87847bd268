# timebill/adapters/outbound/persistence/storage_provider.py

"""
Storage providers: one per persistence backend, selected by STORAGE_BACKEND.

A provider is created once per application and hands out a storage for each
unit of work (one per HTTP request).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from timebill.adapters.configuration.config import Settings
from timebill.adapters.outbound.persistence.database import (
    build_engine,
    build_session_factory,
    get_db_context,
)
from timebill.adapters.outbound.persistence.models import Base
from timebill.adapters.outbound.persistence.repositories.memory_repositories import InMemoryStorage
from timebill.adapters.outbound.persistence.repositories.sql_repositories import SqlAlchemyStorage
from timebill.application.ports.outbound import IStorageProvider, ITimesheetStorage

logger = logging.getLogger(__name__)


class MemoryStorageProvider(IStorageProvider):
    """
    Keeps all data in one process-local ``InMemoryStorage``.

    Units of work run one at a time under a lock; a unit of work that raises
    leaves the data as it was before it started.
    """

    def __init__(self, storage: Optional[InMemoryStorage] = None):
        self.storage = storage or InMemoryStorage()
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[ITimesheetStorage]:
        async with self._lock:
            snapshot = self.storage.snapshot()
            try:
                yield self.storage
            except Exception:
                self.storage.restore(snapshot)
                raise


class SqlStorageProvider(IStorageProvider):
    """One SQLAlchemy session (and transaction) per unit of work."""

    def __init__(self, settings: Settings):
        self.engine = build_engine(settings)
        self.session_factory = build_session_factory(self.engine)
        self.create_tables = settings.ENVIRONMENT != "production"

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[ITimesheetStorage]:
        async with get_db_context(self.session_factory) as db:
            yield SqlAlchemyStorage(db)

    async def startup(self) -> None:
        # In production the schema is managed by Alembic migrations
        if self.create_tables:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables verified")

    async def shutdown(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")


def build_storage_provider(settings: Settings) -> IStorageProvider:
    """Create the provider for ``settings.STORAGE_BACKEND``."""
    logger.info(f"Using '{settings.STORAGE_BACKEND}' storage backend")
    if settings.STORAGE_BACKEND == "memory":
        return MemoryStorageProvider()
    return SqlStorageProvider(settings)
