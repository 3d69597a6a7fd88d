"""
In-memory SQLite fixtures for persistence tests.

Every test gets a fresh engine with freshly created tables, so no state
leaks between tests.

Usage:
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.add(user)
"""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from keyforge_auth.persistence.sqlalchemy import AuthBase

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_USER_EMAIL = "test@example.com"
TEST_USER_EMAIL_2 = "test2@example.com"


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine on a private in-memory database with all tables."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(
    async_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session; uncommitted work is rolled back afterwards."""
    async with session_maker() as session:
        yield session
        await session.rollback()
