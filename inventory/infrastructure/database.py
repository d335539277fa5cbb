"""Database Session Manager — async engine and sessions for the device store.

Invariants:
    - A session rolls back on any exception raised inside it (no partial upserts)
    - SQLAlchemy failures leave this module only as DatabaseError (core/errors.py),
      named after the operation that was running
    - DatabaseError raised by callers inside a session passes through unchanged

Design Decisions:
    - One manager per process, built by init_db in the FastAPI lifespan and
      disposed on shutdown; readiness reads it through this module
    - expire_on_commit=False: rows read back after commit without another query
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from inventory.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def _describe_failure(exc: SQLAlchemyError) -> str:
    """Client-safe summary; driver text stays in the logs."""
    if isinstance(exc, IntegrityError):
        return "device row violates a table constraint"
    if isinstance(exc, OperationalError):
        return "device store unavailable"
    return "unexpected device store error"


class DatabaseSessionManager:
    """Owns the engine and hands out sessions for device reads and writes."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Device store {operation} failed: {e}")
            raise DatabaseError(_describe_failure(e), operation) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        try:
            async with self.session("ping") as db:
                await db.execute(text("SELECT 1"))
        except (DatabaseError, OSError) as e:
            logger.warning(f"Device store ping failed: {e}")
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager
