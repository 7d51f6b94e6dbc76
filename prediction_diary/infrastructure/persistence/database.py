from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)
from sqlalchemy.orm import DeclarativeBase

from prediction_diary.infrastructure.config.settings import Settings


# Modern SQLAlchemy 2.0 pattern
class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL"""
    is_postgres = "postgresql" in settings.database_url
    pool_options = (
        {"pool_size": 20, "max_overflow": 30, "pool_recycle": 3600} if is_postgres else {}
    )
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        connect_args={"command_timeout": 60} if is_postgres else {},
        **pool_options,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create the ``user`` and ``post`` tables if they do not exist yet"""
    # Import models so they register on Base.metadata
    from prediction_diary.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
