"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Environment is pinned before app modules read settings

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the schema uses no
      PostgreSQL-only features
"""

import os

# Ensure tests never touch a real database or write JSON logs
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.db.base import Base  # noqa: E402
import app.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
