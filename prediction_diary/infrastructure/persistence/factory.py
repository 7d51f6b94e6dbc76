"""Repository provider factory for backend selection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from prediction_diary.infrastructure.exceptions import RepositoryException
from prediction_diary.infrastructure.persistence.database import (
    create_engine, create_session_factory, init_models)
from prediction_diary.infrastructure.persistence.repositories import (
    DatabasePostRepository, DatabaseUserRepository, MemoryPostRepository,
    MemoryUserRepository)
from prediction_diary.shared.logging import get_logger

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import (IPostRepository,
                                                         IUserRepository)
    from prediction_diary.infrastructure.config.settings import Settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class RepositoryBundle:
    """
    The repositories one request works with, plus its unit of work.

    ``commit`` must be awaited before a write is reported as done.
    The memory backend has nothing to commit.
    """

    users: "IUserRepository"
    posts: "IPostRepository"
    db: AsyncSession | None = None

    async def commit(self) -> None:
        if self.db is None:
            return
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed: %s", e)
            raise RepositoryException("commit", "transaction", str(e)) from e


class RepositoryProvider(ABC):
    """Hands out a RepositoryBundle per unit of work."""

    async def startup(self) -> None:
        """Prepare the backend (call on app startup)"""

    async def shutdown(self) -> None:
        """Release the backend (call on app shutdown)"""

    @abstractmethod
    def session(self) -> AsyncIterator[RepositoryBundle]:
        """Async context manager yielding repositories for one request"""

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the backend is reachable"""


class MemoryRepositoryProvider(RepositoryProvider):
    """Process-wide in-memory repositories shared by every request"""

    def __init__(self) -> None:
        self.bundle = RepositoryBundle(users=MemoryUserRepository(), posts=MemoryPostRepository())

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RepositoryBundle]:
        yield self.bundle

    async def ping(self) -> bool:
        return True


class DatabaseRepositoryProvider(RepositoryProvider):
    """
    Database repositories bound to one AsyncSession per request.

    Pending changes are committed on a clean exit and rolled back on error.
    Request handlers commit explicitly through the bundle so that a failed
    commit still reaches the client.
    """

    def __init__(self, settings: "Settings") -> None:
        self.engine = create_engine(settings)
        self.session_factory = create_session_factory(self.engine)

    async def startup(self) -> None:
        await init_models(self.engine)
        logger.info("Database tables ready")

    async def shutdown(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RepositoryBundle]:
        async with self.session_factory() as db:
            bundle = RepositoryBundle(
                users=DatabaseUserRepository(db), posts=DatabasePostRepository(db), db=db
            )
            try:
                yield bundle
                if db.in_transaction():
                    await bundle.commit()
            except Exception:
                await db.rollback()
                raise

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True


class RepositoryFactory:
    """Factory for creating repository providers based on configuration."""

    @staticmethod
    def create_repository_provider(settings: "Settings") -> RepositoryProvider:
        """
        Create repository provider based on settings.

        Raises:
            ValueError: If unknown backend or missing required config
        """
        backend = settings.storage_backend.lower()

        if backend == "memory":
            return MemoryRepositoryProvider()

        elif backend == "database":
            if not settings.database_url:
                raise ValueError("DATABASE_URL required for database backend")
            return DatabaseRepositoryProvider(settings)

        else:
            raise ValueError(f"Unknown storage backend: {backend}. Supported: 'memory', 'database'")
