"""Root conftest - shared test configuration and async DB fixtures.

Invariants:
    - Env defaults set before any autoconnect import reads settings
    - Every test that asks for test_db gets a fresh in-memory SQLite database

Design Decisions:
    - SQLite in-memory: fast, no external dependency; enum columns are VARCHAR
      so behavior matches PostgreSQL for what the tests exercise
"""

import os

# Ensure tests don't accidentally use real credentials or hosts
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_fake")
os.environ.setdefault("AZURE_VISION_KEY", "azure-test-fake-key")
os.environ.setdefault("FRONTEND_URL", "http://localhost:3001")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from autoconnect.db.base import Base  # noqa: E402
import autoconnect.models  # noqa: E402,F401


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
