"""Async SQLAlchemy engine, session factory and schema lifecycle."""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_logger, get_settings

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


@lru_cache()
def get_engine() -> AsyncEngine:
    """
    Get the cached async engine built from settings.
    
    Returns:
        Singleton AsyncEngine
    """
    settings = get_settings()
    options = {"echo": settings.database_echo}
    if not settings.is_sqlite:
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return create_async_engine(settings.database_url, **options)


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the cached session factory bound to the engine."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session scoped to one unit of work.
    
    Commits when the caller finishes cleanly, rolls back otherwise.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables."""
    from infrastructure.database import models  # noqa: F401  registers tables

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Dispose the engine and drop the cached factory."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()
