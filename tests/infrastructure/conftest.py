"""Fixtures for SQLAlchemy-backed tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from infrastructure.database import Base
from infrastructure.database.models import SeriesModel  # noqa: F401  registers the table


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    """Session rolled back after each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()
