"""Infrastructure fixtures — in-memory SQLite engine and session manager.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - DatabaseSessionManager built around the test engine (no pool arguments,
      which SQLite does not accept)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import inventory.models  # noqa: F401
from inventory.db.base import Base
from inventory.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager
